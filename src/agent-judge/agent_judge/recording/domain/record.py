"""RunRecord and Timing — the persisted audit record of one scenario run."""

from datetime import datetime

from pydantic import BaseModel, Field

from agent_judge.judge.domain.verdict import Verdict


class Timing(BaseModel, frozen=True):
    agent_duration_ms: int = Field(ge=0)
    judge_duration_ms: int = Field(ge=0)
    total_duration_ms: int = Field(ge=0)


class RunRecord(BaseModel, frozen=True):
    """Immutable record written once to the judge log and the run directory."""

    timestamp: datetime
    scenario_name: str = Field(min_length=1)
    git_sha: str
    git_branch: str
    verdict: Verdict
    timing: Timing
    agent_output: str

    @property
    def run_dir_name(self) -> str:
        return f"{self.timestamp:%Y%m%d_%H%M%S}_{self.scenario_name}"
