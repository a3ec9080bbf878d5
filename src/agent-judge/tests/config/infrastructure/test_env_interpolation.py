"""Tests for ${ENV_VAR} interpolation over raw YAML data."""

import pytest

from agent_judge.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_finds_every_missing_var_in_nested_data(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("AJ_ONE", raising=False)
        monkeypatch.delenv("AJ_TWO", raising=False)
        data = {"a": "${AJ_ONE}", "b": [{"c": "x ${AJ_TWO} y"}], "d": 3}

        assert collect_missing_vars(data) == ["AJ_ONE", "AJ_TWO"]

    def test_reports_each_name_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AJ_ONE", raising=False)

        assert collect_missing_vars(["${AJ_ONE}", "${AJ_ONE}"]) == ["AJ_ONE"]

    def test_var_with_default_is_not_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("AJ_ONE", raising=False)

        assert collect_missing_vars("${AJ_ONE:-fallback}") == []

    def test_set_var_is_not_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AJ_ONE", "value")

        assert collect_missing_vars("${AJ_ONE}") == []


class TestInterpolate:
    def test_substitutes_set_vars_recursively(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AJ_BIN", "/opt/claude")
        data = {"adapter": {"executable": "${AJ_BIN}", "args": ["--x=${AJ_BIN}"]}}

        assert interpolate(data) == {
            "adapter": {"executable": "/opt/claude", "args": ["--x=/opt/claude"]}
        }

    def test_default_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AJ_BIN", raising=False)

        assert interpolate("${AJ_BIN:-claude}") == "claude"

    def test_env_wins_over_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AJ_BIN", "custom")

        assert interpolate("${AJ_BIN:-claude}") == "custom"

    def test_non_string_scalars_untouched(self) -> None:
        assert interpolate({"n": 50, "f": 0.7, "b": True, "z": None}) == {
            "n": 50,
            "f": 0.7,
            "b": True,
            "z": None,
        }
