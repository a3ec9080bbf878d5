"""Tests for config and scenario domain models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.config.domain.config import HarnessConfig
from agent_judge.config.domain.judge import DomainConfig, JudgeConfig
from agent_judge.config.domain.recording import RecordingConfig
from agent_judge.evaluation.domain.scenario import (
    DEFAULT_SYSTEM_PROMPT,
    Scenario,
    ScenarioExpectations,
)


def _domain(name: str) -> DomainConfig:
    return DomainConfig(name=name, rubric=Path(f"{name}.md"))


class TestAdapterConfig:
    """AdapterConfig defaults to the claude CLI with a 30 minute timeout."""

    def test_defaults(self) -> None:
        cfg = AdapterConfig()

        assert cfg.type == "claude_cli"
        assert cfg.executable == "claude"
        assert cfg.model is None
        assert cfg.timeout_seconds == 1800.0

    def test_timeout_may_be_disabled(self) -> None:
        assert AdapterConfig(timeout_seconds=None).timeout_seconds is None

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AdapterConfig(timeout_seconds=0)

    def test_is_frozen(self) -> None:
        cfg = AdapterConfig()
        with pytest.raises(ValidationError):
            cfg.executable = "other"  # type: ignore[misc]


class TestJudgeConfig:
    """JudgeConfig validates the domain list and scoring parameters."""

    def test_defaults(self) -> None:
        cfg = JudgeConfig(domains=[_domain("backend")])

        assert cfg.mode == "composite"
        assert cfg.max_score_per_domain == 50
        assert cfg.pass_threshold == 0.7

    def test_domain_names_in_configured_order(self) -> None:
        cfg = JudgeConfig(domains=[_domain("tests"), _domain("backend")])

        assert cfg.domain_names == ["tests", "backend"]

    def test_empty_domains_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(domains=[])

    def test_duplicate_domain_names_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate domain names: backend"):
            JudgeConfig(domains=[_domain("backend"), _domain("backend")])

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(mode="parallel", domains=[_domain("backend")])  # type: ignore[arg-type]

    @pytest.mark.parametrize("threshold", [0.0, 1.5, -0.1])
    def test_threshold_out_of_range_rejected(self, threshold: float) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(pass_threshold=threshold, domains=[_domain("backend")])

    def test_domain_name_with_path_separator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _domain("../etc")


class TestHarnessConfig:
    def test_adapter_and_recording_default(self) -> None:
        cfg = HarnessConfig(name="h", judge=JudgeConfig(domains=[_domain("backend")]))

        assert cfg.adapter == AdapterConfig()
        assert cfg.recording == RecordingConfig()
        assert cfg.recording.log_dir == Path("tmp/test/integration")
        assert cfg.recording.results_table is None


class TestScenario:
    """Scenario carries prompts and the expected outcome."""

    def test_system_prompt_defaults_to_planning_prompt(self) -> None:
        scenario = Scenario(name="crud", agent_prompt="Plan it", expected_pass=True)

        assert scenario.system_prompt == DEFAULT_SYSTEM_PROMPT
        assert "Rails 8.1" in scenario.system_prompt

    def test_expectations_default_empty(self) -> None:
        scenario = Scenario(name="crud", agent_prompt="Plan it", expected_pass=False)

        assert scenario.expectations == ScenarioExpectations()
        assert scenario.expectations.output_patterns == []
        assert scenario.expectations.min_domain_scores == {}

    def test_empty_agent_prompt_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(name="crud", agent_prompt="", expected_pass=True)

    def test_name_with_slash_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(name="a/b", agent_prompt="Plan it", expected_pass=True)

    def test_expected_pass_required(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(name="crud", agent_prompt="Plan it")  # type: ignore[call-arg]
