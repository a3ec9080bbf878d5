"""JudgeObserver port — domain events emitted while judging agent output."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_started(self, scenario: str, mode: str, domains: list[str]) -> None: ...

    def judge_domain_scored(
        self, scenario: str, domain: str, score: int, max_score: int
    ) -> None: ...

    def judge_domain_parse_degraded(self, scenario: str, domain: str) -> None: ...

    def judge_completed(
        self, scenario: str, total_score: int, max_score: int, passed: bool
    ) -> None: ...
