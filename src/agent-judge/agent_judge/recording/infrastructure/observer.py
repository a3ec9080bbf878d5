"""Structlog implementation of the RecordingObserver port."""

from pathlib import Path

import structlog


class StructlogRecordingObserver:
    """Delegates recording domain events to structlog.

    Satisfies the RecordingObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def recording_run_recorded(self, scenario: str, run_dir: Path) -> None:
        self._log.info("recording.run_recorded", scenario=scenario, run_dir=str(run_dir))

    def recording_results_table_updated(self, scenario: str, path: Path) -> None:
        self._log.info(
            "recording.results_table_updated", scenario=scenario, path=str(path)
        )

    def recording_failed(self, scenario: str, reason: str) -> None:
        self._log.error("recording.failed", scenario=scenario, reason=reason)
