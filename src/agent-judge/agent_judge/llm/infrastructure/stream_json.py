"""Parser for the newline-delimited JSON stream emitted by `claude --output-format stream-json`.

Two record shapes carry text:

    {"type": "stream_event", "event": {"type": "content_block_delta", "delta": {"text": "..."}}}
    {"type": "assistant", "message": {"content": [{"text": "..."}]}}

Everything else (system/init records, tool events, stray log lines, partial
lines) is classified as Unparseable and ignored.
"""

import json
from collections.abc import Iterator
from typing import Any

from agent_judge.llm.domain.stream_event import (
    FinalMessage,
    PartialDelta,
    StreamEvent,
    Unparseable,
)


def classify_line(line: str) -> StreamEvent | None:
    """Classify one line of output. Returns None for blank lines; never raises."""
    stripped = line.strip()
    if not stripped:
        return None

    try:
        record: Any = json.loads(stripped)
    except json.JSONDecodeError:
        return Unparseable(raw=stripped)

    if not isinstance(record, dict):
        return Unparseable(raw=stripped)

    if record.get("type") == "stream_event":
        text = _delta_text(record.get("event"))
        if text is not None:
            return PartialDelta(text=text)
    elif record.get("type") == "assistant":
        text = _message_text(record.get("message"))
        if text is not None:
            return FinalMessage(text=text)

    return Unparseable(raw=stripped)


def _delta_text(event: Any) -> str | None:
    if not isinstance(event, dict) or event.get("type") != "content_block_delta":
        return None
    delta = event.get("delta")
    if not isinstance(delta, dict):
        return None
    text = delta.get("text")
    return text if isinstance(text, str) else None


def _message_text(message: Any) -> str | None:
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, list):
        return None
    for block in content:
        if isinstance(block, dict) and isinstance(block.get("text"), str):
            return block["text"]
    return None


class StreamJsonParser:
    """Incremental line assembler for one subprocess's stdout.

    Chunks may hold several records or split one record across reads; the
    trailing partial line is buffered until its newline arrives. One instance
    is bound to one stream and is not restartable.
    """

    def __init__(self) -> None:
        self._buffer = ""

    def feed(self, chunk: str) -> Iterator[StreamEvent]:
        """Yield events for every complete line now available, in arrival order."""
        self._buffer += chunk
        while True:
            newline = self._buffer.find("\n")
            if newline < 0:
                return
            line, self._buffer = self._buffer[:newline], self._buffer[newline + 1 :]
            event = classify_line(line)
            if event is not None:
                yield event

    def flush(self) -> Iterator[StreamEvent]:
        """Yield the event for an unterminated final line, if any."""
        line, self._buffer = self._buffer, ""
        event = classify_line(line)
        if event is not None:
            yield event


class StreamAccumulator:
    """Reconciles partial deltas with the authoritative final message."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.streamed_chars = 0
        self.replaced = False

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def apply(self, event: StreamEvent) -> str | None:
        """Fold one event into the accumulator.

        Returns the text that should be forwarded to a chunk callback
        (deltas only), or None.
        """
        if isinstance(event, PartialDelta):
            self._parts.append(event.text)
            self.streamed_chars += len(event.text)
            return event.text
        if isinstance(event, FinalMessage) and event.text != self.text:
            # final message supersedes whatever was streamed
            self._parts = [event.text]
            self.replaced = True
        return None
