"""Observer port for the recording domain."""

from pathlib import Path
from typing import Protocol


class RecordingObserver(Protocol):
    def recording_run_recorded(self, scenario: str, run_dir: Path) -> None: ...

    def recording_results_table_updated(self, scenario: str, path: Path) -> None: ...

    def recording_failed(self, scenario: str, reason: str) -> None: ...
