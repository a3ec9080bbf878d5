"""Scenario domain value objects — one judged agent task and what it must achieve."""

from pydantic import BaseModel, Field

DEFAULT_SYSTEM_PROMPT = """\
You are planning features for a Rails 8.1 application (NOT the rails-ai project itself).

This is a test scenario - provide implementation plans even if the current directory
doesn't have Rails app structure. Assume you're planning for a standard Rails app.

Output concise technical plans with code. Do not ask for clarification.
"""


class ScenarioExpectations(BaseModel, frozen=True):
    """Assertions checked in addition to the overall pass/fail expectation.

    output_patterns are regular expressions that must each match the agent
    output; min_domain_scores maps a domain name to its lowest acceptable score.
    """

    output_patterns: list[str] = Field(default_factory=list)
    min_domain_scores: dict[str, int] = Field(default_factory=dict)


class Scenario(BaseModel, frozen=True):
    """Immutable input fixture for one evaluation."""

    name: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_.-]+$")
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    agent_prompt: str = Field(min_length=1)
    expected_pass: bool
    expectations: ScenarioExpectations = ScenarioExpectations()
