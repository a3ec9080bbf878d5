"""DomainContextSource Protocol — looks up rubric and context text for a domain."""

from typing import Protocol

from agent_judge.config.domain.judge import DomainConfig
from agent_judge.judge.domain.domain_spec import DomainSpec


class DomainContextSource(Protocol):
    def load(self, domain: DomainConfig) -> DomainSpec: ...
