"""Error types raised when a scenario run misses its expectations."""

from agent_judge.core.errors import AgentJudgeError


class ScenarioExpectationError(AgentJudgeError):
    """Raised when a completed scenario does not meet what it declared.

    failures lists every unmet expectation; the message additionally carries
    the score breakdown and where to find the run summary.
    """

    def __init__(self, scenario: str, failures: list[str], details: str) -> None:
        self.scenario = scenario
        self.failures = failures
        bullet_list = "\n".join(f"  - {f}" for f in failures)
        super().__init__(
            f"Scenario '{scenario}' did not meet its expectations:\n"
            f"{bullet_list}\n\n{details}"
        )
