"""LiteLLMAdapter — LLM adapter that calls a hosted model through LiteLLM."""

import time
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any

import litellm

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.llm.domain.adapter import ChunkCallback
from agent_judge.llm.domain.observer import LLMObserver
from agent_judge.llm.infrastructure.errors import (
    ProcessExecutionError,
    ProcessTimeoutError,
)

# Provider failures have no process exit status.
_PROVIDER_FAILURE_EXIT_CODE = -1


class LiteLLMAdapter:
    """Adapter satisfying the LLMAdapter protocol over litellm.acompletion.

    Useful when the judge should run on a different provider than the agent,
    or when no CLI is installed. Provider errors surface as
    ProcessExecutionError so callers handle both adapters identically.
    """

    def __init__(self, config: AdapterConfig, observer: LLMObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    @property
    def name(self) -> str:
        return f"LiteLLM ({self._config.model})"

    def is_available(self) -> bool:
        return bool(self._config.model)

    async def execute(
        self,
        prompt: str,
        system_prompt: str | None = None,
        streaming: bool = False,
        on_chunk: ChunkCallback | None = None,
    ) -> str:
        """Send one completion request and return the full response text.

        Raises:
            ProcessExecutionError: if the provider call fails.
            ProcessTimeoutError: if the provider does not answer in time.
        """
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        self._observer.llm_invocation_started(
            adapter=self.name, streaming=streaming, prompt_chars=len(prompt)
        )

        start = time.monotonic()
        parts: list[str] = []
        async with aclosing(
            self._completion_texts(messages=messages, streaming=streaming, parts=parts)
        ) as texts:
            async for text in texts:
                # sink errors propagate unwrapped
                if streaming and on_chunk is not None:
                    on_chunk(text)

        output = "".join(parts)
        self._observer.llm_invocation_completed(
            adapter=self.name,
            duration_ms=int((time.monotonic() - start) * 1000),
            output_chars=len(output),
        )
        return output

    async def _completion_texts(
        self, messages: list[dict[str, str]], streaming: bool, parts: list[str]
    ) -> AsyncIterator[str]:
        """Yield response text as it arrives, appending each piece to parts.

        Provider failures are translated here, so only errors raised by
        litellm itself become ProcessExecutionError / ProcessTimeoutError.
        """
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                messages=messages,
                stream=streaming,
                timeout=self._config.timeout_seconds,
            )
            if streaming:
                async for chunk in response:
                    text = _delta_text(chunk)
                    if text:
                        parts.append(text)
                        yield text
            else:
                text = response.choices[0].message.content or ""
                parts.append(text)
                yield text
        except litellm.Timeout as exc:
            error: Exception = ProcessTimeoutError(
                timeout_seconds=self._config.timeout_seconds or 0.0,
                output="".join(parts),
            )
            self._observer.llm_invocation_failed(adapter=self.name, reason=str(error))
            raise error from exc
        except Exception as exc:
            error = ProcessExecutionError(
                exit_code=_PROVIDER_FAILURE_EXIT_CODE,
                stderr=str(exc),
                output="".join(parts),
            )
            self._observer.llm_invocation_failed(adapter=self.name, reason=str(error))
            raise error from exc


def _delta_text(chunk: Any) -> str | None:
    choices = getattr(chunk, "choices", None)
    if not choices:
        return None
    delta = getattr(choices[0], "delta", None)
    return getattr(delta, "content", None)
