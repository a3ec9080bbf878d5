"""Judge configuration models."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class DomainConfig(BaseModel, frozen=True):
    """One evaluation domain: where its rubric and supporting context live."""

    name: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_-]+$")
    rubric: Path
    context: list[Path] = Field(default_factory=list)


class JudgeConfig(BaseModel, frozen=True):
    mode: Literal["composite", "per_domain"] = "composite"
    max_score_per_domain: int = Field(default=50, ge=1)
    pass_threshold: float = Field(default=0.7, gt=0.0, le=1.0)
    domains: list[DomainConfig] = Field(min_length=1)

    @field_validator("domains")
    @classmethod
    def _domain_names_unique(cls, domains: list[DomainConfig]) -> list[DomainConfig]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for domain in domains:
            if domain.name in seen:
                duplicates.append(domain.name)
            seen.add(domain.name)
        if duplicates:
            raise ValueError(f"duplicate domain names: {', '.join(duplicates)}")
        return domains

    @property
    def domain_names(self) -> list[str]:
        return [domain.name for domain in self.domains]
