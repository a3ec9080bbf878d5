"""ResponseSegmenter Protocol — splits a judge response into per-domain judgments."""

from typing import Protocol

from agent_judge.judge.domain.judgment import DomainJudgment


class ResponseSegmenter(Protocol):
    """Structural interface for turning judge text into DomainJudgments.

    Implementations must return exactly one judgment per requested domain,
    in the requested order, and must not raise on malformed text.
    """

    def segment(
        self, response: str, domains: list[str]
    ) -> dict[str, DomainJudgment]: ...
