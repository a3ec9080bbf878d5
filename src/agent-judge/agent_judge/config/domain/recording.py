"""Recording configuration model."""

from pathlib import Path

from pydantic import BaseModel


class RecordingConfig(BaseModel, frozen=True):
    log_dir: Path = Path("tmp/test/integration")
    results_table: Path | None = None
