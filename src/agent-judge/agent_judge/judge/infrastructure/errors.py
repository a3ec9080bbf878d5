"""Error types raised by judge infrastructure."""

from pathlib import Path

from agent_judge.core.errors import AgentJudgeError


class EmptyDomainsError(AgentJudgeError):
    """Raised when a judge prompt is requested for zero domains."""

    def __init__(self) -> None:
        super().__init__("Failed to compose judge prompt: no domains given")


class DomainContextNotFoundError(AgentJudgeError):
    """Raised when a domain's rubric or context file cannot be read."""

    def __init__(self, domain: str, path: Path, reason: str = "file not found") -> None:
        self.domain = domain
        self.path = path
        super().__init__(
            f"Failed to load context for domain '{domain}': {reason}: {path}"
        )


class IncompleteJudgmentError(AgentJudgeError):
    """Raised when judgments do not cover the configured domains exactly."""

    def __init__(self, missing: list[str], unexpected: list[str]) -> None:
        self.missing = missing
        self.unexpected = unexpected
        super().__init__(
            "Failed to build verdict: "
            f"missing domains {missing}, unexpected domains {unexpected}"
        )
