"""Error types raised by recording infrastructure."""

from pathlib import Path

from agent_judge.core.errors import AgentJudgeError


class PersistenceError(AgentJudgeError):
    """Raised when a run record cannot be written. Always fatal."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to record run: cannot write {path}: {reason}")
