"""FakeLLMObserver — records LLM adapter events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationStartedEvent:
    adapter: str
    streaming: bool
    prompt_chars: int


@dataclass(frozen=True)
class InvocationCompletedEvent:
    adapter: str
    duration_ms: int
    output_chars: int


@dataclass(frozen=True)
class InvocationFailedEvent:
    adapter: str
    reason: str


@dataclass(frozen=True)
class StreamReconciledEvent:
    adapter: str
    streamed_chars: int
    final_chars: int


class FakeLLMObserver:
    """Records all emitted LLM events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.
    """

    def __init__(self) -> None:
        self.started: list[InvocationStartedEvent] = []
        self.completed: list[InvocationCompletedEvent] = []
        self.failed: list[InvocationFailedEvent] = []
        self.reconciled: list[StreamReconciledEvent] = []

    def llm_invocation_started(
        self, adapter: str, streaming: bool, prompt_chars: int
    ) -> None:
        self.started.append(
            InvocationStartedEvent(
                adapter=adapter, streaming=streaming, prompt_chars=prompt_chars
            )
        )

    def llm_invocation_completed(
        self, adapter: str, duration_ms: int, output_chars: int
    ) -> None:
        self.completed.append(
            InvocationCompletedEvent(
                adapter=adapter, duration_ms=duration_ms, output_chars=output_chars
            )
        )

    def llm_invocation_failed(self, adapter: str, reason: str) -> None:
        self.failed.append(InvocationFailedEvent(adapter=adapter, reason=reason))

    def llm_stream_reconciled(
        self, adapter: str, streamed_chars: int, final_chars: int
    ) -> None:
        self.reconciled.append(
            StreamReconciledEvent(
                adapter=adapter, streamed_chars=streamed_chars, final_chars=final_chars
            )
        )
