"""Error types raised by LLM adapter infrastructure."""

from agent_judge.core.errors import AgentJudgeError


class ToolNotFoundError(AgentJudgeError):
    """Raised when the LLM CLI executable is not on PATH."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"Failed to invoke LLM: executable '{executable}' not found on PATH"
        )


class ProcessExecutionError(AgentJudgeError):
    """Raised when the LLM process exits non-zero or the provider call fails.

    Carries whatever output was produced before the failure for diagnosis.
    """

    def __init__(self, exit_code: int, stderr: str = "", output: str = "") -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        self.output = output
        message = f"Failed to invoke LLM: process exited with status {exit_code}"
        if output:
            message += f"\nSTDOUT: {output}"
        if stderr:
            message += f"\nSTDERR: {stderr}"
        super().__init__(message)


class ProcessTimeoutError(AgentJudgeError):
    """Raised when the LLM process outlives its timeout and is killed."""

    def __init__(self, timeout_seconds: float, output: str = "") -> None:
        self.timeout_seconds = timeout_seconds
        self.output = output
        super().__init__(
            f"Failed to invoke LLM: process killed after {timeout_seconds:g}s timeout"
        )


class AdapterTypeNotSupportedError(AgentJudgeError):
    """Raised when the adapter type specified in config is not a known type."""

    def __init__(self, adapter_type: str) -> None:
        super().__init__(
            f"Failed to create LLM adapter: unsupported adapter type '{adapter_type}'"
        )
