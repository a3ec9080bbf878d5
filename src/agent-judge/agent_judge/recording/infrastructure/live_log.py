"""LiveLog — a tail-able file mirroring subprocess output while it streams."""

from pathlib import Path
from typing import IO

from rich.console import Console

LIVE_LOG_NAME = "live.log"


class LiveLog:
    """Truncated at the start of each scenario; flushed after every write.

    Status lines go to the file and are echoed to the console (stderr).
    Stream chunks go to the file only, so `tail -f live.log` shows the
    agent and judge output as it arrives.

    Pass ``console=None`` to suppress console echo (useful in tests).
    """

    def __init__(self, log_dir: Path, console: Console | None = None) -> None:
        self._path = log_dir / LIVE_LOG_NAME
        self._console = console
        self._file: IO[str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def start(self, scenario: str) -> None:
        """Truncate the file and write the scenario banner."""
        self.close()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self._path, "w", encoding="utf-8")
        self.status(f"=== Scenario: {scenario} ===")

    def status(self, line: str) -> None:
        self._write(line + "\n")
        if self._console is not None:
            self._console.print(line, markup=False, highlight=False)

    def chunk(self, text: str) -> None:
        self._write(text)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _write(self, text: str) -> None:
        if self._file is None:
            raise RuntimeError("LiveLog.start() must be called before writing")
        self._file.write(text)
        self._file.flush()
