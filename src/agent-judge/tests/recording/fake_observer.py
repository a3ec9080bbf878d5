"""Fake RecordingObserver for use in tests — records events without mocking."""

from pathlib import Path


class FakeRecordingObserver:
    def __init__(self) -> None:
        self.recorded: list[tuple[str, Path]] = []
        self.tables_updated: list[tuple[str, Path]] = []
        self.failed: list[tuple[str, str]] = []

    def recording_run_recorded(self, scenario: str, run_dir: Path) -> None:
        self.recorded.append((scenario, run_dir))

    def recording_results_table_updated(self, scenario: str, path: Path) -> None:
        self.tables_updated.append((scenario, path))

    def recording_failed(self, scenario: str, reason: str) -> None:
        self.failed.append((scenario, reason))
