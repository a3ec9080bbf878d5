"""Structlog implementation of the EvaluationObserver port."""

from pathlib import Path

import structlog


class StructlogEvaluationObserver:
    """Delegates evaluation domain events to structlog.

    Satisfies the EvaluationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_started(self, scenario: str, agent: str) -> None:
        self._log.info("evaluation.scenario_started", scenario=scenario, agent=agent)

    def agent_completed(
        self, scenario: str, duration_ms: int, output_chars: int
    ) -> None:
        self._log.info(
            "evaluation.agent_completed",
            scenario=scenario,
            duration_ms=duration_ms,
            output_chars=output_chars,
        )

    def scenario_completed(
        self,
        scenario: str,
        total_score: int,
        max_score: int,
        passed: bool,
        run_dir: Path,
    ) -> None:
        self._log.info(
            "evaluation.scenario_completed",
            scenario=scenario,
            total_score=total_score,
            max_score=max_score,
            passed=passed,
            run_dir=str(run_dir),
        )

    def scenario_failed(self, scenario: str, reason: str) -> None:
        self._log.error("evaluation.scenario_failed", scenario=scenario, reason=reason)
