"""MarkdownRunRecorder — append-only judge log plus a per-run artifact directory.

Layout under log_dir:

    JUDGE_LOG.md                          chronological log, header written once
    runs/<YYYYMMDD_HHMMSS>_<scenario>/
        agent_output.md
        <domain>_judgment.md              one per judged domain
        summary.md                        cross-links the files above
"""

import fcntl
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from agent_judge.recording.domain.observer import RecordingObserver
from agent_judge.recording.domain.record import RunRecord
from agent_judge.recording.infrastructure.errors import PersistenceError
from agent_judge.recording.infrastructure.formatting import format_duration
from agent_judge.recording.infrastructure.results_table import MarkdownResultsTable

JUDGE_LOG_NAME = "JUDGE_LOG.md"
RUNS_DIR_NAME = "runs"
SUMMARY_NAME = "summary.md"
AGENT_OUTPUT_NAME = "agent_output.md"

JUDGE_LOG_HEADER = """\
# Agent Integration Test Judge Log

This file contains a chronological log of all judge evaluations for tracking accuracy and improvement over time.

Format: Each entry includes timestamp, scenario, git version, scores, and pass/fail result.

---

"""


def judgment_file_name(domain: str) -> str:
    return f"{domain}_judgment.md"


class MarkdownRunRecorder:
    """Persists RunRecords as markdown. Satisfies the RunRecorder protocol.

    Entries are only ever appended to the judge log; existing content is
    never rewritten. Any filesystem failure is raised as PersistenceError.
    """

    def __init__(
        self,
        log_dir: Path,
        observer: RecordingObserver,
        results_table: MarkdownResultsTable | None = None,
    ) -> None:
        self._log_dir = log_dir
        self._observer = observer
        self._results_table = results_table

    @property
    def log_path(self) -> Path:
        return self._log_dir / JUDGE_LOG_NAME

    def record(self, run: RunRecord) -> Path:
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            self._append_log_entry(run)
            run_dir = self._write_run_dir(run)
        except OSError as exc:
            path = Path(exc.filename) if exc.filename else self._log_dir
            self._observer.recording_failed(
                scenario=run.scenario_name, reason=str(exc)
            )
            raise PersistenceError(path=path, reason=exc.strerror or str(exc)) from exc

        self._observer.recording_run_recorded(
            scenario=run.scenario_name, run_dir=run_dir
        )

        if self._results_table is not None:
            try:
                self._results_table.update(run)
            except PersistenceError as exc:
                self._observer.recording_failed(
                    scenario=run.scenario_name, reason=str(exc)
                )
                raise
            self._observer.recording_results_table_updated(
                scenario=run.scenario_name, path=self._results_table.path
            )

        return run_dir

    def _append_log_entry(self, run: RunRecord) -> None:
        with open(self.log_path, "a", encoding="utf-8") as f, _exclusive_lock(f):
            # Checked under the lock so two first writers cannot both add it.
            if f.seek(0, os.SEEK_END) == 0:
                f.write(JUDGE_LOG_HEADER)
            f.write(render_log_entry(run))
            f.flush()

    def _write_run_dir(self, run: RunRecord) -> Path:
        run_dir = _unique_dir(self._log_dir / RUNS_DIR_NAME / run.run_dir_name)

        (run_dir / AGENT_OUTPUT_NAME).write_text(run.agent_output, encoding="utf-8")
        for domain, judgment in run.verdict.domain_judgments.items():
            (run_dir / judgment_file_name(domain)).write_text(
                judgment.score_text, encoding="utf-8"
            )
        (run_dir / SUMMARY_NAME).write_text(render_summary(run), encoding="utf-8")
        return run_dir


@contextmanager
def _exclusive_lock(f: IO[str]) -> Iterator[None]:
    fcntl.flock(f.fileno(), fcntl.LOCK_EX)
    try:
        yield
    finally:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def _unique_dir(base: Path) -> Path:
    """Create base, or base_2, base_3... if a run in the same second exists."""
    base.parent.mkdir(parents=True, exist_ok=True)
    candidate = base
    suffix = 1
    while True:
        try:
            candidate.mkdir()
            return candidate
        except FileExistsError:
            suffix += 1
            candidate = base.with_name(f"{base.name}_{suffix}")


def _domain_score_lines(run: RunRecord) -> list[str]:
    verdict = run.verdict
    return [
        f"- **{domain.capitalize()}**: {j.score}/{verdict.max_score_per_domain}"
        + ("" if j.parsed else " (unparsed)")
        for domain, j in verdict.domain_judgments.items()
    ]


def _timing_lines(run: RunRecord) -> list[str]:
    timing = run.timing
    return [
        f"- **Agent Duration**: {format_duration(timing.agent_duration_ms)}",
        f"- **Judge Duration**: {format_duration(timing.judge_duration_ms)}",
        f"- **Total Duration**: {format_duration(timing.total_duration_ms)}",
    ]


def render_log_entry(run: RunRecord) -> str:
    verdict = run.verdict
    lines = [
        "",
        f"## Evaluation: {run.timestamp:%Y-%m-%d %H:%M:%S}",
        "",
        f"**Scenario**: {run.scenario_name}",
        f"**Git SHA**: {run.git_sha}",
        f"**Git Branch**: {run.git_branch}",
        "",
        "### Timing",
        "",
        *_timing_lines(run),
        "",
        "### Domain Scores",
        "",
        *_domain_score_lines(run),
        f"- **Total**: {verdict.total_score}/{verdict.max_score}"
        f" ({verdict.percentage}%)",
        "",
        "### Result",
        "",
        f"**{'PASS' if verdict.passed else 'FAIL'}**"
        f" (Threshold: {verdict.pass_threshold}/{verdict.max_score})",
        "",
        "---",
        "",
    ]
    return "\n".join(lines) + "\n"


def render_summary(run: RunRecord) -> str:
    verdict = run.verdict
    threshold_pct = round(verdict.pass_threshold_fraction * 100)
    lines = [
        f"# Integration Test Summary: {run.scenario_name}",
        "",
        f"**Timestamp**: {run.timestamp:%Y-%m-%d %H:%M:%S}",
        f"**Git SHA**: {run.git_sha}",
        f"**Git Branch**: {run.git_branch}",
        "",
        "## Overall Result",
        "",
        f"**{'PASS ✓' if verdict.passed else 'FAIL ✗'}**",
        "",
        f"**Total Score**: {verdict.total_score}/{verdict.max_score}"
        f" ({verdict.percentage}%)",
        f"**Threshold**: {verdict.pass_threshold}/{verdict.max_score}"
        f" ({threshold_pct}%)",
        "",
        "## Timing",
        "",
        *_timing_lines(run),
        "",
        "## Domain Scores",
        "",
        *_domain_score_lines(run),
        "",
        "## Detailed Judgments",
        "",
        "See individual files:",
        *(
            f"- [{judgment_file_name(d)}](./{judgment_file_name(d)})"
            for d in verdict.domain_judgments
        ),
        "",
        "## Agent Output",
        "",
        f"See [{AGENT_OUTPUT_NAME}](./{AGENT_OUTPUT_NAME}) for full agent response.",
    ]
    if verdict.degraded_domains:
        lines += [
            "",
            "## Warnings",
            "",
            *(
                f"- Judgment for '{d}' could not be located in the judge response;"
                " scored 0."
                for d in verdict.degraded_domains
            ),
        ]
    return "\n".join(lines) + "\n"
