"""Tests for the adapter registry."""

import pytest

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.llm.infrastructure.claude_cli import ClaudeCliAdapter
from agent_judge.llm.infrastructure.errors import AdapterTypeNotSupportedError
from agent_judge.llm.infrastructure.litellm import LiteLLMAdapter
from agent_judge.llm.infrastructure.registry import create_adapter
from tests.llm.fake_observer import FakeLLMObserver


class TestCreateAdapter:
    def test_claude_cli(self) -> None:
        adapter = create_adapter(config=AdapterConfig(), observer=FakeLLMObserver())

        assert isinstance(adapter, ClaudeCliAdapter)

    def test_litellm(self) -> None:
        adapter = create_adapter(
            config=AdapterConfig(type="litellm", model="gpt-4o"),
            observer=FakeLLMObserver(),
        )

        assert isinstance(adapter, LiteLLMAdapter)

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(AdapterTypeNotSupportedError, match="'codex'"):
            create_adapter(config=AdapterConfig(type="codex"), observer=FakeLLMObserver())
