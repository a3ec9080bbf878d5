"""Checks a ScenarioOutcome against what its Scenario declared."""

import re

from agent_judge.evaluation.domain.outcome import ScenarioOutcome
from agent_judge.evaluation.domain.scenario import Scenario
from agent_judge.evaluation.infrastructure.errors import ScenarioExpectationError


def describe_outcome(outcome: ScenarioOutcome) -> str:
    """Score breakdown and summary pointer appended to every failure message."""
    verdict = outcome.verdict
    breakdown = "\n".join(
        f"  - {domain.capitalize()}: {j.score}/{verdict.max_score_per_domain}"
        for domain, j in verdict.domain_judgments.items()
    )
    return (
        f"Scenario: {outcome.record.scenario_name}\n"
        f"Total Score: {verdict.total_score}/{verdict.max_score}"
        f" ({verdict.percentage}%)\n"
        f"Threshold: {verdict.pass_threshold}/{verdict.max_score}\n"
        f"\n"
        f"Domain Scores:\n"
        f"{breakdown}\n"
        f"\n"
        f"Run `cat {outcome.summary_path}` for details"
    )


def unmet_expectations(outcome: ScenarioOutcome, scenario: Scenario) -> list[str]:
    verdict = outcome.verdict
    failures: list[str] = []

    if scenario.expected_pass and not verdict.passed:
        failures.append(
            f"expected PASS but scored {verdict.total_score}/{verdict.max_score},"
            f" below threshold {verdict.pass_threshold}"
        )
    elif not scenario.expected_pass and verdict.passed:
        failures.append(
            f"expected FAIL but scored {verdict.total_score}/{verdict.max_score},"
            f" at or above threshold {verdict.pass_threshold}"
        )

    for pattern in scenario.expectations.output_patterns:
        if re.search(pattern, outcome.record.agent_output) is None:
            failures.append(f"agent output does not match /{pattern}/")

    for domain, minimum in scenario.expectations.min_domain_scores.items():
        judgment = verdict.domain_judgments.get(domain)
        if judgment is None:
            failures.append(f"domain '{domain}' was not judged")
        elif judgment.score < minimum:
            failures.append(
                f"{domain.capitalize()} scored {judgment.score}"
                f"/{verdict.max_score_per_domain}, minimum is {minimum}"
            )

    return failures


def check_expectations(outcome: ScenarioOutcome, scenario: Scenario) -> None:
    """Raise ScenarioExpectationError listing every unmet expectation."""
    failures = unmet_expectations(outcome=outcome, scenario=scenario)
    if failures:
        raise ScenarioExpectationError(
            scenario=scenario.name,
            failures=failures,
            details=describe_outcome(outcome),
        )
