"""Verdict — aggregated pass/fail result across all judged domains."""

from pydantic import BaseModel, Field, computed_field, model_validator

from agent_judge.judge.domain.judgment import DomainJudgment


class Verdict(BaseModel, frozen=True):
    """Immutable aggregate of one judgment per configured domain.

    Every derived figure is computed from domain_judgments, so the total is
    always the sum of exactly the judged domains; a domain that could not be
    parsed contributes a visible zero rather than disappearing.
    """

    domain_judgments: dict[str, DomainJudgment] = Field(min_length=1)
    max_score_per_domain: int = Field(ge=1)
    pass_threshold_fraction: float = Field(gt=0.0, le=1.0)

    @model_validator(mode="after")
    def _judgments_keyed_by_domain(self) -> "Verdict":
        for key, judgment in self.domain_judgments.items():
            if key != judgment.domain:
                raise ValueError(
                    f"judgment for '{judgment.domain}' stored under key '{key}'"
                )
            if judgment.score > self.max_score_per_domain:
                raise ValueError(
                    f"score {judgment.score} for '{key}' exceeds"
                    f" {self.max_score_per_domain}"
                )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_score(self) -> int:
        return sum(j.score for j in self.domain_judgments.values())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_score(self) -> int:
        return len(self.domain_judgments) * self.max_score_per_domain

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percentage(self) -> int:
        """Total as a percentage of max_score, rounded half up."""
        return (self.total_score * 200 + self.max_score) // (2 * self.max_score)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def pass_threshold(self) -> int:
        # round first so 200 * 0.7 lands on 140, not 139.99...
        return int(round(self.max_score * self.pass_threshold_fraction, 6))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.total_score >= self.pass_threshold

    @property
    def degraded_domains(self) -> list[str]:
        return [d for d, j in self.domain_judgments.items() if not j.parsed]
