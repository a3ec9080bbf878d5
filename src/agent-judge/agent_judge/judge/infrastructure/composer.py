"""Judge prompt composition — one prompt asking for N independent domain evaluations.

The framing markers below are the contract with DelimitedResponseSegmenter;
change them together.
"""

from agent_judge.judge.domain.domain_spec import DomainSpec
from agent_judge.judge.infrastructure.errors import EmptyDomainsError

DOMAIN_START = "### DOMAIN: {name}"
DOMAIN_END = "### END DOMAIN: {name}"
TOTAL_LINE = "## {title} Total: NN/{max_score}"


def compose_judge_prompt(
    agent_prompt: str,
    agent_output: str,
    domains: list[DomainSpec],
    max_score_per_domain: int,
) -> str:
    """Build the composite prompt evaluating agent_output on every domain.

    Rubric and context text are embedded verbatim and never interpreted.

    Raises:
        EmptyDomainsError: if domains is empty.
    """
    if not domains:
        raise EmptyDomainsError()

    names = ", ".join(d.name for d in domains)
    sections = "\n\n".join(_domain_section(d) for d in domains)
    framing = "\n\n".join(_output_framing(d, max_score_per_domain) for d in domains)

    return f"""\
You are acting as {len(domains)} independent expert judges ({names}) evaluating \
an implementation plan produced by an AI agent.

Evaluate each domain independently, as if each judge could not see the other \
judges' work. A weakness in one domain must not lower the score of another.

## Scenario Requirements

{agent_prompt.strip()}

## Agent Output to Evaluate

{agent_output.strip()}

## Domain Rubrics and Context

{sections}

## IMPORTANT: Output Format

Produce exactly one section per domain, in this order, using these markers \
verbatim. Each domain is scored out of {max_score_per_domain}. Put the domain \
total on its own line inside the section.

{framing}

Do not write anything outside these sections.
"""


def compose_single_domain_prompt(
    agent_prompt: str,
    agent_output: str,
    domain: DomainSpec,
    max_score_per_domain: int,
) -> str:
    """Build a prompt evaluating agent_output on a single domain.

    Uses the same framing as the composite prompt so the same segmenter
    parses the response.
    """
    return f"""\
You are an expert {domain.name} judge evaluating an implementation plan \
produced by an AI agent.

## Scenario Requirements

{agent_prompt.strip()}

## Agent Output to Evaluate

{agent_output.strip()}

{_domain_section(domain)}

## IMPORTANT: Output Format

Score the domain out of {max_score_per_domain}. Use these markers verbatim \
and put the total on its own line:

{_output_framing(domain, max_score_per_domain)}
"""


def _domain_section(domain: DomainSpec) -> str:
    section = f"### Rubric: {domain.name}\n\n{domain.rubric.strip()}"
    if domain.context.strip():
        section += f"\n\n### Supporting Context: {domain.name}\n\n{domain.context.strip()}"
    return section


def _output_framing(domain: DomainSpec, max_score_per_domain: int) -> str:
    return "\n".join(
        [
            DOMAIN_START.format(name=domain.name),
            f"<your {domain.name} evaluation: per-criterion scores and critical issues>",
            TOTAL_LINE.format(title=domain.title, max_score=max_score_per_domain),
            DOMAIN_END.format(name=domain.name),
        ]
    )
