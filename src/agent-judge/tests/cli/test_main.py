"""Tests for the agent-judge CLI — `check` and `run` against the fake claude CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from agent_judge.cli.main import app
from tests.judge.responses import judge_response
from tests.llm.fake_cli import install_fake_cli

DOMAINS = ["backend", "frontend", "tests", "security"]

runner = CliRunner()


def _write_config(tmp_path: Path, executable: str) -> Path:
    for domain in DOMAINS:
        (tmp_path / f"{domain}.md").write_text(
            f"Score the {domain} work out of 50.", encoding="utf-8"
        )
    domain_lines = "".join(
        f"    - name: {d}\n      rubric: {d}.md\n" for d in DOMAINS
    )
    config = tmp_path / "config.yaml"
    config.write_text(
        "name: cli-test\n"
        "adapter:\n"
        "  type: claude_cli\n"
        f"  executable: {executable}\n"
        "  timeout_seconds: 60\n"
        "judge:\n"
        "  domains:\n"
        f"{domain_lines}"
        "recording:\n"
        "  log_dir: logs\n"
        "  results_table: TESTING.md\n",
        encoding="utf-8",
    )
    return config


def _write_scenario(tmp_path: Path, expected_pass: bool = True) -> Path:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(
        "name: cli_scenario\n"
        "agent_prompt: Plan a Feedback resource\n"
        f"expected_pass: {'true' if expected_pass else 'false'}\n",
        encoding="utf-8",
    )
    return scenario


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_available_adapter(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, executable=str(install_fake_cli(tmp_path)))

        result = runner.invoke(app, ["check", str(config)])

        assert result.exit_code == 0
        assert "cli-test" in result.output
        assert "backend, frontend, tests, security" in result.output
        assert "available" in result.output

    def test_missing_executable_exits_1(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, executable="no-such-claude-binary")

        result = runner.invoke(app, ["check", str(config)])

        assert result.exit_code == 1
        assert "not available" in result.output

    def test_missing_config_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    def test_passing_scenario(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # Agent and judge share the fake CLI, so both receive the judge reply.
        monkeypatch.setenv(
            "FAKE_CLAUDE_REPLY",
            judge_response({"backend": 45, "frontend": 40, "tests": 38, "security": 42}),
        )
        config = _write_config(tmp_path, executable=str(install_fake_cli(tmp_path)))
        scenario = _write_scenario(tmp_path)

        result = runner.invoke(
            app, ["run", str(config), str(scenario), "--log-format", "json"]
        )

        assert result.exit_code == 0, result.output
        assert "MET" in result.output
        assert "165/200" in result.output
        assert (tmp_path / "logs" / "JUDGE_LOG.md").is_file()
        assert (tmp_path / "logs" / "live.log").is_file()
        assert "| cli_scenario |" in (tmp_path / "TESTING.md").read_text(
            encoding="utf-8"
        )

    def test_missed_expectation_exits_1(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(
            "FAKE_CLAUDE_REPLY",
            judge_response({"backend": 45, "frontend": 40, "tests": 38, "security": 42}),
        )
        config = _write_config(tmp_path, executable=str(install_fake_cli(tmp_path)))
        scenario = _write_scenario(tmp_path, expected_pass=False)

        result = runner.invoke(
            app, ["run", str(config), str(scenario), "--log-format", "json"]
        )

        assert result.exit_code == 1
        assert "MISSED" in result.output
        assert "expected FAIL" in result.output
        assert (tmp_path / "logs" / "JUDGE_LOG.md").is_file()

    def test_agent_failure_exits_1(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAKE_CLAUDE_EXIT", "3")
        config = _write_config(tmp_path, executable=str(install_fake_cli(tmp_path)))
        scenario = _write_scenario(tmp_path)

        result = runner.invoke(
            app, ["run", str(config), str(scenario), "--log-format", "json"]
        )

        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert not (tmp_path / "logs" / "JUDGE_LOG.md").exists()

    def test_invalid_config_exits_1(self, tmp_path: Path) -> None:
        scenario = _write_scenario(tmp_path)

        result = runner.invoke(
            app, ["run", str(tmp_path / "missing.yaml"), str(scenario)]
        )

        assert result.exit_code == 1

    def test_invalid_log_format_exits_1(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, executable="claude")
        scenario = _write_scenario(tmp_path)

        result = runner.invoke(
            app, ["run", str(config), str(scenario), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output
