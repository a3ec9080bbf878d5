"""Observer port for the evaluation domain."""

from pathlib import Path
from typing import Protocol


class EvaluationObserver(Protocol):
    def scenario_started(self, scenario: str, agent: str) -> None: ...

    def agent_completed(
        self, scenario: str, duration_ms: int, output_chars: int
    ) -> None: ...

    def scenario_completed(
        self,
        scenario: str,
        total_score: int,
        max_score: int,
        passed: bool,
        run_dir: Path,
    ) -> None: ...

    def scenario_failed(self, scenario: str, reason: str) -> None: ...
