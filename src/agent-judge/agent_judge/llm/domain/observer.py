"""LLMObserver port — domain events emitted around LLM invocations."""

from typing import Protocol


class LLMObserver(Protocol):
    """Observer port for LLM adapter events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def llm_invocation_started(
        self, adapter: str, streaming: bool, prompt_chars: int
    ) -> None: ...

    def llm_invocation_completed(
        self, adapter: str, duration_ms: int, output_chars: int
    ) -> None: ...

    def llm_invocation_failed(self, adapter: str, reason: str) -> None: ...

    def llm_stream_reconciled(
        self, adapter: str, streamed_chars: int, final_chars: int
    ) -> None: ...
