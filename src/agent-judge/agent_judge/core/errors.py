"""Base exception class for all agent-judge-specific errors."""


class AgentJudgeError(Exception):
    """Base class for all agent-judge errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
