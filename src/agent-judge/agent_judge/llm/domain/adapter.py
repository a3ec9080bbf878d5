"""LLMAdapter Protocol — structural interface for every LLM backend."""

from collections.abc import Callable
from typing import Protocol

type ChunkCallback = Callable[[str], None]


class LLMAdapter(Protocol):
    """Structural interface satisfied by any LLM adapter implementation.

    Both the agent run and the judge run go through the same adapter.
    """

    @property
    def name(self) -> str: ...

    def is_available(self) -> bool: ...

    async def execute(
        self,
        prompt: str,
        system_prompt: str | None = None,
        streaming: bool = False,
        on_chunk: ChunkCallback | None = None,
    ) -> str: ...
