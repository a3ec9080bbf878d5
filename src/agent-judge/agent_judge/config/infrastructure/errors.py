"""Error types raised while loading harness configs and scenario files."""

from pathlib import Path

from agent_judge.core.errors import AgentJudgeError


class MissingEnvVarsError(AgentJudgeError):
    """Raised when ${VAR} references without a default are unset.

    Every missing name is collected before raising so one run reports them all.
    """

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            "Failed to load config: unset environment variables: "
            + ", ".join(sorted(missing_vars))
        )


class ConfigValidationError(AgentJudgeError):
    """Raised when a config or scenario file is malformed or violates its schema."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        self.path = path
        where = str(path) if path is not None else "config"
        super().__init__(f"Failed to validate {where}: {reason}")


class ConfigLoadError(AgentJudgeError):
    """Raised when a config or scenario file does not exist."""

    def __init__(self, path: Path, kind: str = "config") -> None:
        self.path = path
        super().__init__(f"Failed to load {kind}: file not found: {path}")
