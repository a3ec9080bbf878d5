"""DomainJudgment — the judge's evaluation of one domain."""

from pydantic import BaseModel, Field


class DomainJudgment(BaseModel, frozen=True):
    """Immutable per-domain result extracted from a judge response.

    parsed is False when the domain's delimiters were missing and the score
    was substituted with zero.
    """

    domain: str = Field(min_length=1)
    score_text: str
    score: int = Field(ge=0)
    parsed: bool = True
