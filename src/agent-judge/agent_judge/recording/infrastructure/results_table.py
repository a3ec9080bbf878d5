"""MarkdownResultsTable — keeps one row per scenario in a markdown results table."""

import re
from pathlib import Path

from agent_judge.recording.domain.record import RunRecord
from agent_judge.recording.infrastructure.errors import PersistenceError
from agent_judge.recording.infrastructure.formatting import format_duration

TABLE_TITLE = "## Integration Test Results"

_LEADING_COLUMNS = ["Scenario", "Last Run", "Agent Time", "Judge Time", "Total Time", "Total"]


def header_line(domains: list[str]) -> str:
    columns = [*_LEADING_COLUMNS, *(d.capitalize() for d in domains), "Result"]
    return "| " + " | ".join(columns) + " |"


def separator_line(domains: list[str]) -> str:
    columns = [*_LEADING_COLUMNS, *(d.capitalize() for d in domains), "Result"]
    return "|" + "|".join("-" * (len(c) + 2) for c in columns) + "|"


def render_row(run: RunRecord) -> str:
    verdict = run.verdict
    cells = [
        run.scenario_name,
        f"{run.timestamp:%Y-%m-%d}",
        format_duration(run.timing.agent_duration_ms),
        format_duration(run.timing.judge_duration_ms),
        format_duration(run.timing.total_duration_ms),
        f"{verdict.total_score}/{verdict.max_score}",
        *(
            f"{j.score}/{verdict.max_score_per_domain}"
            for j in verdict.domain_judgments.values()
        ),
        "✅ PASS" if verdict.passed else "❌ FAIL",
    ]
    return "| " + " | ".join(cells) + " |"


def apply_row(content: str, run: RunRecord) -> str:
    """Return content with the scenario's row replaced or inserted.

    An existing row for the scenario is replaced in place. Otherwise the row
    goes directly under the separator of a table whose header matches the
    run's domains; when no such table exists one is appended.
    """
    row = render_row(run)
    existing = re.compile(
        rf"^\| {re.escape(run.scenario_name)} \|.*\|$", re.MULTILINE
    )
    if existing.search(content):
        return existing.sub(lambda _: row, content, count=1)

    domains = list(run.verdict.domain_judgments)
    table_head = f"{header_line(domains)}\n{separator_line(domains)}"
    if table_head in content:
        return content.replace(table_head, f"{table_head}\n{row}", 1)

    block = f"{TABLE_TITLE}\n\n{table_head}\n{row}\n"
    if not content:
        return block
    return content.rstrip("\n") + "\n\n" + block


class MarkdownResultsTable:
    """Updates a markdown file holding the latest result for each scenario."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def update(self, run: RunRecord) -> None:
        try:
            content = (
                self._path.read_text(encoding="utf-8") if self._path.exists() else ""
            )
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(apply_row(content, run), encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(
                path=self._path, reason=exc.strerror or str(exc)
            ) from exc
