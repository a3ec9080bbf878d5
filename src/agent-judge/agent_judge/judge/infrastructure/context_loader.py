"""FileDomainContextSource — reads rubric and context files for a domain."""

from pathlib import Path

from agent_judge.config.domain.judge import DomainConfig
from agent_judge.judge.domain.domain_spec import DomainSpec
from agent_judge.judge.infrastructure.errors import DomainContextNotFoundError


class FileDomainContextSource:
    """Builds a DomainSpec from the files named in a DomainConfig.

    Context files are concatenated in configured order, each under a
    `## Context: <file name>` heading. Contents are never interpreted.
    """

    def load(self, domain: DomainConfig) -> DomainSpec:
        """
        Raises:
            DomainContextNotFoundError: if the rubric or any context file is
                missing or unreadable.
        """
        rubric = _read(domain=domain.name, path=domain.rubric)
        context_parts = [
            f"## Context: {path.stem}\n\n{_read(domain=domain.name, path=path).strip()}"
            for path in domain.context
        ]
        return DomainSpec(
            name=domain.name, rubric=rubric, context="\n\n".join(context_parts)
        )


def _read(domain: str, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DomainContextNotFoundError(domain=domain, path=path) from exc
    except OSError as exc:
        raise DomainContextNotFoundError(
            domain=domain, path=path, reason=exc.strerror or str(exc)
        ) from exc
    except UnicodeDecodeError as exc:
        raise DomainContextNotFoundError(
            domain=domain, path=path, reason="not valid UTF-8"
        ) from exc
