"""LLM adapter configuration model."""

from pydantic import BaseModel, Field


class AdapterConfig(BaseModel, frozen=True):
    type: str = Field(default="claude_cli", min_length=1)
    executable: str = Field(default="claude", min_length=1)
    model: str | None = None
    timeout_seconds: float | None = Field(default=1800.0, gt=0.0)
