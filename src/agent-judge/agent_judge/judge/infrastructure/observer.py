"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_started(self, scenario: str, mode: str, domains: list[str]) -> None:
        self._log.info("judge.started", scenario=scenario, mode=mode, domains=domains)

    def judge_domain_scored(
        self, scenario: str, domain: str, score: int, max_score: int
    ) -> None:
        self._log.info(
            "judge.domain_scored",
            scenario=scenario,
            domain=domain,
            score=score,
            max_score=max_score,
        )

    def judge_domain_parse_degraded(self, scenario: str, domain: str) -> None:
        self._log.warning(
            "judge.domain_parse_degraded",
            scenario=scenario,
            domain=domain,
            message="domain delimiters not found in judge response; scored as 0",
        )

    def judge_completed(
        self, scenario: str, total_score: int, max_score: int, passed: bool
    ) -> None:
        self._log.info(
            "judge.completed",
            scenario=scenario,
            total_score=total_score,
            max_score=max_score,
            passed=passed,
        )
