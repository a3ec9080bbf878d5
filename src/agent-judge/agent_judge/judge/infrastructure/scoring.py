"""Verdict aggregation over per-domain judgments."""

from agent_judge.judge.domain.judgment import DomainJudgment
from agent_judge.judge.domain.verdict import Verdict
from agent_judge.judge.infrastructure.errors import IncompleteJudgmentError


def build_verdict(
    judgments: dict[str, DomainJudgment],
    domains: list[str],
    max_score_per_domain: int,
    pass_threshold_fraction: float,
) -> Verdict:
    """Aggregate judgments into a Verdict ordered like domains.

    Raises:
        IncompleteJudgmentError: if judgments do not cover domains exactly.
            Segmenters substitute zero scores for unparseable domains, so a
            gap here is a defect, never a silent zero.
    """
    missing = [d for d in domains if d not in judgments]
    unexpected = [d for d in judgments if d not in domains]
    if missing or unexpected:
        raise IncompleteJudgmentError(missing=missing, unexpected=unexpected)

    return Verdict(
        domain_judgments={d: judgments[d] for d in domains},
        max_score_per_domain=max_score_per_domain,
        pass_threshold_fraction=pass_threshold_fraction,
    )
