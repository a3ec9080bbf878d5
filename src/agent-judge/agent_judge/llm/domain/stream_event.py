"""StreamEvent — one classified line of the LLM CLI's stream-json output."""

from typing import Literal

from pydantic import BaseModel


class PartialDelta(BaseModel, frozen=True):
    """An incremental text fragment (content_block_delta inside a stream_event)."""

    type: Literal["partial_delta"] = "partial_delta"
    text: str


class FinalMessage(BaseModel, frozen=True):
    """The consolidated assistant message; authoritative over the deltas."""

    type: Literal["final_message"] = "final_message"
    text: str


class Unparseable(BaseModel, frozen=True):
    """A line that is not JSON or not a recognised shape. Ignored by consumers."""

    type: Literal["unparseable"] = "unparseable"
    raw: str


type StreamEvent = PartialDelta | FinalMessage | Unparseable
