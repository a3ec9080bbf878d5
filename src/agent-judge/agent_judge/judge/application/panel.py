"""JudgePanel — scores one agent output on every configured domain."""

from collections.abc import Callable

from agent_judge.config.domain.judge import JudgeConfig
from agent_judge.judge.domain.context_source import DomainContextSource
from agent_judge.judge.domain.domain_spec import DomainSpec
from agent_judge.judge.domain.judgment import DomainJudgment
from agent_judge.judge.domain.observer import JudgeObserver
from agent_judge.judge.domain.segmenter import ResponseSegmenter
from agent_judge.judge.domain.verdict import Verdict
from agent_judge.judge.infrastructure.composer import (
    compose_judge_prompt,
    compose_single_domain_prompt,
)
from agent_judge.judge.infrastructure.scoring import build_verdict
from agent_judge.judge.infrastructure.segmenter import DelimitedResponseSegmenter
from agent_judge.llm.domain.adapter import ChunkCallback, LLMAdapter

type StatusCallback = Callable[[str], None]


class JudgePanel:
    """Runs the judge LLM over an agent's output and aggregates a Verdict.

    In "composite" mode all domains are judged by a single streaming call;
    in "per_domain" mode one call is issued per domain, sequentially, in
    configured order. Both modes parse responses with the same segmenter, so
    a domain the judge failed to frame is scored 0 (and reported to the
    observer) instead of aborting the evaluation. Adapter errors propagate.
    """

    def __init__(
        self,
        config: JudgeConfig,
        adapter: LLMAdapter,
        context_source: DomainContextSource,
        observer: JudgeObserver,
        segmenter: ResponseSegmenter | None = None,
    ) -> None:
        self._config = config
        self._adapter = adapter
        self._context_source = context_source
        self._observer = observer
        self._segmenter = (
            segmenter
            if segmenter is not None
            else DelimitedResponseSegmenter(
                max_score_per_domain=config.max_score_per_domain
            )
        )

    async def evaluate(
        self,
        scenario: str,
        agent_prompt: str,
        agent_output: str,
        on_chunk: ChunkCallback | None = None,
        on_status: StatusCallback | None = None,
    ) -> Verdict:
        """Judge agent_output against agent_prompt and return the Verdict.

        Raises:
            DomainContextNotFoundError: if a rubric or context file is missing.
            ToolNotFoundError, ProcessExecutionError, ProcessTimeoutError:
                from the adapter.
        """
        domains = self._config.domain_names
        specs = [self._context_source.load(domain) for domain in self._config.domains]
        self._observer.judge_started(
            scenario=scenario, mode=self._config.mode, domains=domains
        )

        if self._config.mode == "per_domain":
            judgments = await self._judge_each(
                agent_prompt=agent_prompt,
                agent_output=agent_output,
                specs=specs,
                on_chunk=on_chunk,
                on_status=on_status,
            )
        else:
            prompt = compose_judge_prompt(
                agent_prompt=agent_prompt,
                agent_output=agent_output,
                domains=specs,
                max_score_per_domain=self._config.max_score_per_domain,
            )
            response = await self._adapter.execute(
                prompt=prompt, streaming=True, on_chunk=on_chunk
            )
            judgments = self._segmenter.segment(response=response, domains=domains)

        for judgment in judgments.values():
            if not judgment.parsed:
                self._observer.judge_domain_parse_degraded(
                    scenario=scenario, domain=judgment.domain
                )
            self._observer.judge_domain_scored(
                scenario=scenario,
                domain=judgment.domain,
                score=judgment.score,
                max_score=self._config.max_score_per_domain,
            )

        verdict = build_verdict(
            judgments=judgments,
            domains=domains,
            max_score_per_domain=self._config.max_score_per_domain,
            pass_threshold_fraction=self._config.pass_threshold,
        )
        self._observer.judge_completed(
            scenario=scenario,
            total_score=verdict.total_score,
            max_score=verdict.max_score,
            passed=verdict.passed,
        )
        return verdict

    async def _judge_each(
        self,
        agent_prompt: str,
        agent_output: str,
        specs: list[DomainSpec],
        on_chunk: ChunkCallback | None,
        on_status: StatusCallback | None,
    ) -> dict[str, DomainJudgment]:
        judgments: dict[str, DomainJudgment] = {}
        for index, spec in enumerate(specs, start=1):
            if on_status is not None:
                on_status(f"[{index}/{len(specs)}] Evaluating {spec.name}...")
            prompt = compose_single_domain_prompt(
                agent_prompt=agent_prompt,
                agent_output=agent_output,
                domain=spec,
                max_score_per_domain=self._config.max_score_per_domain,
            )
            response = await self._adapter.execute(
                prompt=prompt, streaming=True, on_chunk=on_chunk
            )
            judgments.update(
                self._segmenter.segment(response=response, domains=[spec.name])
            )
        return judgments
