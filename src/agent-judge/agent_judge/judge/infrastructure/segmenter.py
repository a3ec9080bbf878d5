"""DelimitedResponseSegmenter — regex segmentation and score extraction of judge text."""

import re

from agent_judge.judge.domain.judgment import DomainJudgment

PARSE_ERROR_TEXT = "ERROR: Could not parse judgment"

_FALLBACK_TOTAL = re.compile(r"Total:\s*(\d+)/\d+")


def extract_score(score_text: str, domain: str, max_score: int | None = None) -> int:
    """Extract a domain's total from judge text. Never raises.

    Tries `## {Domain} Total: NN/MM` first (case-insensitive, one or two
    hashes), then any `Total: NN/MM`, and finally returns 0. When max_score
    is given the result is clamped to it.
    """
    primary = re.compile(
        rf"##?\s*{re.escape(domain.capitalize())}\s+Total:\s*(\d+)/\d+",
        re.IGNORECASE,
    )
    match = primary.search(score_text) or _FALLBACK_TOTAL.search(score_text)
    if match is None:
        return 0
    score = int(match.group(1))
    return min(score, max_score) if max_score is not None else score


class DelimitedResponseSegmenter:
    """Splits judge text on `### DOMAIN: x` / `### END DOMAIN: x` markers.

    A domain whose markers are missing gets a zero score, a placeholder text
    and parsed=False; the other domains are unaffected. Pure: reporting the
    degradation is the caller's job.
    """

    def __init__(self, max_score_per_domain: int | None = None) -> None:
        self._max_score_per_domain = max_score_per_domain

    def segment(self, response: str, domains: list[str]) -> dict[str, DomainJudgment]:
        judgments: dict[str, DomainJudgment] = {}
        for domain in domains:
            section = _find_section(response=response, domain=domain)
            if section is None:
                judgments[domain] = DomainJudgment(
                    domain=domain, score_text=PARSE_ERROR_TEXT, score=0, parsed=False
                )
                continue

            judgments[domain] = DomainJudgment(
                domain=domain,
                score_text=section,
                score=extract_score(
                    score_text=section,
                    domain=domain,
                    max_score=self._max_score_per_domain,
                ),
            )
        return judgments


def _find_section(response: str, domain: str) -> str | None:
    name = re.escape(domain)
    # (?![\w-]) keeps "test" from matching a "tests" or "test-e2e" marker.
    pattern = re.compile(
        rf"###[ \t]*DOMAIN:[ \t]*{name}(?![\w-])"
        r"(.*?)"
        rf"###[ \t]*END DOMAIN:[ \t]*{name}(?![\w-])",
        re.DOTALL,
    )
    # The last match wins: models occasionally restate the framing template
    # before writing the real section.
    matches = pattern.findall(response)
    if not matches:
        return None
    return matches[-1].strip()
