"""Tests for LiteLLMAdapter infrastructure implementation."""

from collections.abc import AsyncIterator
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import litellm
import pytest

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.llm.infrastructure.errors import (
    ProcessExecutionError,
    ProcessTimeoutError,
)
from agent_judge.llm.infrastructure.litellm import LiteLLMAdapter
from tests.llm.fake_observer import FakeLLMObserver

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_ACOMPLETION = "agent_judge.llm.infrastructure.litellm.litellm.acompletion"


def _make_adapter(
    model: str | None = "anthropic/claude-sonnet-4-5",
) -> tuple[LiteLLMAdapter, FakeLLMObserver]:
    observer = FakeLLMObserver()
    config = AdapterConfig(type="litellm", model=model, timeout_seconds=60)
    return LiteLLMAdapter(config=config, observer=observer), observer


def _make_response(content: str) -> SimpleNamespace:
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _make_chunk(content: str | None) -> SimpleNamespace:
    delta = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(delta=delta)])


async def _stream(*contents: str | None) -> AsyncIterator[SimpleNamespace]:
    for content in contents:
        yield _make_chunk(content)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestAvailability:
    def test_available_with_model(self) -> None:
        adapter, _ = _make_adapter()

        assert adapter.is_available() is True
        assert adapter.name == "LiteLLM (anthropic/claude-sonnet-4-5)"

    def test_unavailable_without_model(self) -> None:
        adapter, _ = _make_adapter(model=None)

        assert adapter.is_available() is False


class TestBufferedCompletion:
    async def test_returns_message_content(self) -> None:
        adapter, observer = _make_adapter()
        mock = AsyncMock(return_value=_make_response("## Backend Total: 40/50"))

        with patch(_ACOMPLETION, mock):
            output = await adapter.execute(prompt="judge this")

        assert output == "## Backend Total: 40/50"
        assert observer.completed[0].output_chars == len(output)

    async def test_system_prompt_sent_first(self) -> None:
        adapter, _ = _make_adapter()
        mock = AsyncMock(return_value=_make_response("ok"))

        with patch(_ACOMPLETION, mock):
            await adapter.execute(prompt="user text", system_prompt="sys text")

        messages = mock.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "sys text"},
            {"role": "user", "content": "user text"},
        ]
        assert mock.call_args.kwargs["timeout"] == 60
        assert mock.call_args.kwargs["stream"] is False

    async def test_none_content_becomes_empty_string(self) -> None:
        adapter, _ = _make_adapter()
        response = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
        )

        with patch(_ACOMPLETION, AsyncMock(return_value=response)):
            assert await adapter.execute(prompt="x") == ""


class TestStreamingCompletion:
    async def test_forwards_each_delta(self) -> None:
        adapter, _ = _make_adapter()
        chunks: list[str] = []
        mock = AsyncMock(return_value=_stream("Hel", None, "lo", ""))

        with patch(_ACOMPLETION, mock):
            output = await adapter.execute(
                prompt="x", streaming=True, on_chunk=chunks.append
            )

        assert output == "Hello"
        assert chunks == ["Hel", "lo"]
        assert mock.call_args.kwargs["stream"] is True


class TestErrors:
    async def test_provider_error_becomes_process_execution_error(self) -> None:
        adapter, observer = _make_adapter()
        mock = AsyncMock(side_effect=RuntimeError("provider down"))

        with patch(_ACOMPLETION, mock), pytest.raises(ProcessExecutionError) as exc_info:
            await adapter.execute(prompt="x")

        assert exc_info.value.exit_code == -1
        assert "provider down" in exc_info.value.stderr
        assert len(observer.failed) == 1

    async def test_timeout_becomes_process_timeout_error(self) -> None:
        adapter, observer = _make_adapter()
        timeout = litellm.Timeout(
            message="too slow", model="claude", llm_provider="anthropic"
        )

        with (
            patch(_ACOMPLETION, AsyncMock(side_effect=timeout)),
            pytest.raises(ProcessTimeoutError),
        ):
            await adapter.execute(prompt="x")

        assert len(observer.failed) == 1

    async def test_callback_error_propagates_unwrapped(self) -> None:
        adapter, observer = _make_adapter()

        def explode(chunk: str) -> None:
            raise ValueError("sink closed")

        with (
            patch(_ACOMPLETION, AsyncMock(return_value=_stream("Hel", "lo"))),
            pytest.raises(ValueError, match="sink closed"),
        ):
            await adapter.execute(prompt="x", streaming=True, on_chunk=explode)

        assert observer.failed == []
        assert observer.completed == []

    async def test_stream_failure_keeps_partial_output(self) -> None:
        adapter, observer = _make_adapter()

        async def broken_stream() -> AsyncIterator[SimpleNamespace]:
            yield _make_chunk("partial")
            raise RuntimeError("connection reset")

        with (
            patch(_ACOMPLETION, AsyncMock(return_value=broken_stream())),
            pytest.raises(ProcessExecutionError) as exc_info,
        ):
            await adapter.execute(prompt="x", streaming=True, on_chunk=lambda _: None)

        assert exc_info.value.output == "partial"
        assert "connection reset" in exc_info.value.stderr
        assert len(observer.failed) == 1
