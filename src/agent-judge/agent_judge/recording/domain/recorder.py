"""RunRecorder Protocol — persists RunRecords for later audit."""

from pathlib import Path
from typing import Protocol

from agent_judge.recording.domain.record import RunRecord


class RunRecorder(Protocol):
    """Write-only audit sink. Implementations must raise on write failure."""

    def record(self, run: RunRecord) -> Path:
        """Persist run and return the directory holding its artifacts."""
        ...
