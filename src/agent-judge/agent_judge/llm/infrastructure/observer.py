"""Structlog implementation of the LLMObserver port."""

import structlog


class StructlogLLMObserver:
    """Delegates LLM adapter events to structlog.

    Satisfies the LLMObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def llm_invocation_started(
        self, adapter: str, streaming: bool, prompt_chars: int
    ) -> None:
        self._log.info(
            "llm.invocation_started",
            adapter=adapter,
            streaming=streaming,
            prompt_chars=prompt_chars,
        )

    def llm_invocation_completed(
        self, adapter: str, duration_ms: int, output_chars: int
    ) -> None:
        self._log.info(
            "llm.invocation_completed",
            adapter=adapter,
            duration_ms=duration_ms,
            output_chars=output_chars,
        )

    def llm_invocation_failed(self, adapter: str, reason: str) -> None:
        self._log.error("llm.invocation_failed", adapter=adapter, reason=reason)

    def llm_stream_reconciled(
        self, adapter: str, streamed_chars: int, final_chars: int
    ) -> None:
        self._log.warning(
            "llm.stream_reconciled",
            adapter=adapter,
            streamed_chars=streamed_chars,
            final_chars=final_chars,
        )
