"""ScenarioHarness — runs one scenario end to end: agent, judge, record."""

import time
from collections.abc import Callable
from datetime import datetime

from agent_judge.core.errors import AgentJudgeError
from agent_judge.evaluation.domain.observer import EvaluationObserver
from agent_judge.evaluation.domain.outcome import ScenarioOutcome
from agent_judge.evaluation.domain.scenario import Scenario
from agent_judge.judge.application.panel import JudgePanel
from agent_judge.llm.domain.adapter import LLMAdapter
from agent_judge.recording.domain.record import RunRecord, Timing
from agent_judge.recording.domain.recorder import RunRecorder
from agent_judge.recording.domain.vcs import VcsContextProvider
from agent_judge.recording.infrastructure.formatting import format_duration
from agent_judge.recording.infrastructure.live_log import LiveLog


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


class ScenarioHarness:
    """Owns the Scenario -> agent run -> judge run -> RunRecord pipeline.

    Phases run strictly in sequence. Agent and judge output stream into the
    live log as they arrive. Any AgentJudgeError aborts the scenario: it is
    written to the live log, reported to the observer, and re-raised.
    Checking the outcome against the scenario's expectations is left to
    check_expectations so callers decide how a miss is surfaced.
    """

    def __init__(
        self,
        agent: LLMAdapter,
        panel: JudgePanel,
        recorder: RunRecorder,
        vcs: VcsContextProvider,
        live_log: LiveLog,
        observer: EvaluationObserver,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._agent = agent
        self._panel = panel
        self._recorder = recorder
        self._vcs = vcs
        self._live_log = live_log
        self._observer = observer
        self._clock = clock

    async def run(self, scenario: Scenario) -> ScenarioOutcome:
        live = self._live_log
        live.start(scenario=scenario.name)
        self._observer.scenario_started(scenario=scenario.name, agent=self._agent.name)
        try:
            return await self._run(scenario=scenario, live=live)
        except AgentJudgeError as exc:
            live.status(f"ERROR: {exc}")
            self._observer.scenario_failed(scenario=scenario.name, reason=str(exc))
            raise
        finally:
            live.close()

    async def _run(self, scenario: Scenario, live: LiveLog) -> ScenarioOutcome:
        timestamp = self._clock()
        started = time.monotonic()

        live.status(f"Running agent ({self._agent.name})...")
        agent_output = await self._agent.execute(
            prompt=scenario.agent_prompt,
            system_prompt=scenario.system_prompt,
            streaming=True,
            on_chunk=live.chunk,
        )
        agent_ms = _elapsed_ms(started)
        live.chunk("\n")
        live.status(f"Agent completed in {format_duration(agent_ms)}")
        self._observer.agent_completed(
            scenario=scenario.name, duration_ms=agent_ms, output_chars=len(agent_output)
        )

        judge_started = time.monotonic()
        live.status("Running judge...")
        verdict = await self._panel.evaluate(
            scenario=scenario.name,
            agent_prompt=scenario.agent_prompt,
            agent_output=agent_output,
            on_chunk=live.chunk,
            on_status=live.status,
        )
        judge_ms = _elapsed_ms(judge_started)
        live.chunk("\n")
        live.status(f"Judge completed in {format_duration(judge_ms)}")

        record = RunRecord(
            timestamp=timestamp,
            scenario_name=scenario.name,
            git_sha=self._vcs.current_sha(),
            git_branch=self._vcs.current_branch(),
            verdict=verdict,
            timing=Timing(
                agent_duration_ms=agent_ms,
                judge_duration_ms=judge_ms,
                total_duration_ms=_elapsed_ms(started),
            ),
            agent_output=agent_output,
        )
        run_dir = self._recorder.record(record)

        live.status(
            f"{'PASS' if verdict.passed else 'FAIL'}: "
            f"{verdict.total_score}/{verdict.max_score} ({verdict.percentage}%)"
        )
        self._observer.scenario_completed(
            scenario=scenario.name,
            total_score=verdict.total_score,
            max_score=verdict.max_score,
            passed=verdict.passed,
            run_dir=run_dir,
        )
        return ScenarioOutcome(record=record, run_dir=run_dir)
