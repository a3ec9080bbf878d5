"""ScenarioOutcome — everything produced by one scenario run."""

from pathlib import Path

from pydantic import BaseModel

from agent_judge.judge.domain.verdict import Verdict
from agent_judge.recording.domain.record import RunRecord


class ScenarioOutcome(BaseModel, frozen=True):
    record: RunRecord
    run_dir: Path

    @property
    def verdict(self) -> Verdict:
        return self.record.verdict

    @property
    def summary_path(self) -> Path:
        return self.run_dir / "summary.md"
