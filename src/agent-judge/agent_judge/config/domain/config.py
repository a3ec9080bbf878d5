"""Top-level HarnessConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.config.domain.judge import JudgeConfig
from agent_judge.config.domain.recording import RecordingConfig


class HarnessConfig(BaseModel, frozen=True):
    """Root configuration aggregate for an agent-judge harness."""

    name: str = Field(min_length=1)
    adapter: AdapterConfig = AdapterConfig()
    judge: JudgeConfig
    recording: RecordingConfig = RecordingConfig()
