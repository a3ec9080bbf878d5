"""Adapter registry — maps AdapterConfig.type to the correct LLMAdapter."""

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.llm.domain.adapter import LLMAdapter
from agent_judge.llm.domain.observer import LLMObserver
from agent_judge.llm.infrastructure.claude_cli import ClaudeCliAdapter
from agent_judge.llm.infrastructure.errors import AdapterTypeNotSupportedError
from agent_judge.llm.infrastructure.litellm import LiteLLMAdapter


def create_adapter(config: AdapterConfig, observer: LLMObserver) -> LLMAdapter:
    """Return the LLMAdapter for the given AdapterConfig.

    Raises:
        AdapterTypeNotSupportedError: if config.type is not a known adapter type.
    """
    if config.type == "claude_cli":
        return ClaudeCliAdapter(config=config, observer=observer)
    if config.type == "litellm":
        return LiteLLMAdapter(config=config, observer=observer)

    raise AdapterTypeNotSupportedError(adapter_type=config.type)
