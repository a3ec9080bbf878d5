"""ProcessInvocation and ProcessResult — one subprocess execution and its outcome."""

from pydantic import BaseModel


class ProcessInvocation(BaseModel, frozen=True):
    """Immutable description of one subprocess call."""

    command: list[str]
    stdin_payload: str
    streaming: bool


class ProcessResult(BaseModel, frozen=True):
    """Captured output of a finished subprocess.

    In streaming mode stdout holds the reconciled text, not the raw JSON lines.
    """

    stdout: str
    stderr: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
