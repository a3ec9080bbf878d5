"""CLI entrypoint for agent-judge — typer app with `run` and `check` commands."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from agent_judge.config.domain.config import HarnessConfig
from agent_judge.config.infrastructure.observer import StructlogConfigObserver
from agent_judge.config.infrastructure.yaml_loader import (
    YamlConfigLoader,
    YamlScenarioLoader,
)
from agent_judge.core.errors import AgentJudgeError
from agent_judge.evaluation.application.expectations import check_expectations
from agent_judge.evaluation.application.harness import ScenarioHarness
from agent_judge.evaluation.domain.outcome import ScenarioOutcome
from agent_judge.evaluation.domain.scenario import Scenario
from agent_judge.evaluation.infrastructure.errors import ScenarioExpectationError
from agent_judge.evaluation.infrastructure.observer import StructlogEvaluationObserver
from agent_judge.judge.application.panel import JudgePanel
from agent_judge.judge.infrastructure.context_loader import FileDomainContextSource
from agent_judge.judge.infrastructure.observer import StructlogJudgeObserver
from agent_judge.llm.infrastructure.observer import StructlogLLMObserver
from agent_judge.llm.infrastructure.registry import create_adapter
from agent_judge.recording.infrastructure.errors import PersistenceError
from agent_judge.recording.infrastructure.git import GitVcsContextProvider
from agent_judge.recording.infrastructure.live_log import LiveLog
from agent_judge.recording.infrastructure.markdown_recorder import MarkdownRunRecorder
from agent_judge.recording.infrastructure.observer import StructlogRecordingObserver
from agent_judge.recording.infrastructure.results_table import MarkdownResultsTable

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _build_harness(config: HarnessConfig, echo_status: bool) -> ScenarioHarness:
    """Wire the real infrastructure for one harness config."""
    adapter = create_adapter(config=config.adapter, observer=StructlogLLMObserver())
    panel = JudgePanel(
        config=config.judge,
        adapter=adapter,
        context_source=FileDomainContextSource(),
        observer=StructlogJudgeObserver(),
    )
    results_table = (
        MarkdownResultsTable(path=config.recording.results_table)
        if config.recording.results_table is not None
        else None
    )
    recorder = MarkdownRunRecorder(
        log_dir=config.recording.log_dir,
        observer=StructlogRecordingObserver(),
        results_table=results_table,
    )
    live_log = LiveLog(
        log_dir=config.recording.log_dir,
        console=Console(stderr=True) if echo_status else None,
    )
    return ScenarioHarness(
        agent=adapter,
        panel=panel,
        recorder=recorder,
        vcs=GitVcsContextProvider(),
        live_log=live_log,
        observer=StructlogEvaluationObserver(),
    )


async def _run_all(
    harness: ScenarioHarness, scenarios: list[Scenario]
) -> list[tuple[Scenario, ScenarioOutcome | None, str | None]]:
    """Run scenarios in order. A scenario error does not stop the rest,
    except PersistenceError, which aborts the whole run."""
    results: list[tuple[Scenario, ScenarioOutcome | None, str | None]] = []
    for scenario in scenarios:
        try:
            outcome = await harness.run(scenario=scenario)
        except PersistenceError:
            raise
        except AgentJudgeError as exc:
            results.append((scenario, None, str(exc)))
            continue
        try:
            check_expectations(outcome=outcome, scenario=scenario)
        except ScenarioExpectationError as exc:
            results.append((scenario, outcome, str(exc)))
            continue
        results.append((scenario, outcome, None))
    return results


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _score_color(score: int, max_score: int) -> str:
    fraction = score / max_score
    if fraction >= 0.8:
        return _GREEN
    if fraction >= 0.6:
        return _YELLOW
    return _RED


def _print_summary(
    config_name: str,
    results: list[tuple[Scenario, ScenarioOutcome | None, str | None]],
) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  agent-judge  ·  {config_name}{_RESET}")
    _rule(color=_CYAN)

    for scenario, outcome, error in results:
        typer.echo("")
        if outcome is None:
            typer.echo(f"  {_RED}{_BOLD}ERROR{_RESET}  {scenario.name}")
            typer.echo(f"  {_DIM}{error}{_RESET}")
            continue

        verdict = outcome.verdict
        status = (
            f"{_GREEN}{_BOLD}MET  {_RESET}"
            if error is None
            else f"{_RED}{_BOLD}MISSED{_RESET}"
        )
        result = "PASS" if verdict.passed else "FAIL"
        typer.echo(
            f"  {status} {scenario.name}  "
            f"{_BOLD}{result}{_RESET} {verdict.total_score}/{verdict.max_score}"
            f" ({verdict.percentage}%)"
        )
        name_w = max(len(d) for d in verdict.domain_judgments)
        for domain, judgment in verdict.domain_judgments.items():
            color = _score_color(
                score=judgment.score, max_score=verdict.max_score_per_domain
            )
            marker = "" if judgment.parsed else f" {_YELLOW}(unparsed){_RESET}"
            typer.echo(
                f"    {domain.capitalize():<{name_w}}  "
                f"{color}{judgment.score:>3}{_RESET}/{verdict.max_score_per_domain}"
                f"{marker}"
            )
        if error is not None:
            typer.echo("")
            typer.echo(f"  {_DIM}{error}{_RESET}")
        else:
            typer.echo(f"  {_DIM}Summary: {outcome.summary_path}{_RESET}")

    typer.echo("")
    _rule(color=_CYAN)
    typer.echo("")


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to harness config YAML"),
    scenario_paths: list[Path] = typer.Argument(..., help="Scenario YAML files"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run one or more scenarios and judge the agent's output."""
    try:
        _configure_structlog(log_format=log_format)

        config_observer = StructlogConfigObserver()
        config = YamlConfigLoader(observer=config_observer).load(path=config_path)
        scenario_loader = YamlScenarioLoader(observer=config_observer)
        scenarios = [scenario_loader.load(path=p) for p in scenario_paths]

        harness = _build_harness(config=config, echo_status=log_format != "json")
        results = asyncio.run(_run_all(harness=harness, scenarios=scenarios))

        _print_summary(config_name=config.name, results=results)
        if any(error is not None for _, _, error in results):
            sys.exit(1)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Run interrupted.")
        sys.exit(1)
    except AgentJudgeError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def check(
    config_path: Path = typer.Argument(..., help="Path to harness config YAML"),
) -> None:
    """Validate a harness config and report whether its adapter is usable."""
    try:
        _configure_structlog(log_format="console")
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        adapter = create_adapter(config=config.adapter, observer=StructlogLLMObserver())
    except AgentJudgeError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    domains = ", ".join(config.judge.domain_names)
    typer.echo(f"  {_DIM}Config{_RESET}   {config.name}")
    typer.echo(f"  {_DIM}Domains{_RESET}  {domains}")
    if adapter.is_available():
        typer.echo(f"  {_DIM}Adapter{_RESET}  {_GREEN}{adapter.name} available{_RESET}")
        return
    typer.echo(f"  {_DIM}Adapter{_RESET}  {_RED}{adapter.name} not available{_RESET}")
    sys.exit(1)


if __name__ == "__main__":
    app()
