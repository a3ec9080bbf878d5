"""ClaudeCliAdapter — LLM adapter that drives the `claude` command-line tool."""

import asyncio
import codecs
import shutil
import time
from asyncio.subprocess import PIPE, Process

from agent_judge.config.domain.adapter import AdapterConfig
from agent_judge.llm.domain.adapter import ChunkCallback
from agent_judge.llm.domain.observer import LLMObserver
from agent_judge.llm.domain.process import ProcessInvocation, ProcessResult
from agent_judge.llm.infrastructure.errors import (
    ProcessExecutionError,
    ProcessTimeoutError,
    ToolNotFoundError,
)
from agent_judge.llm.infrastructure.stream_json import (
    StreamAccumulator,
    StreamJsonParser,
)

_READ_SIZE = 4096


class ClaudeCliAdapter:
    """Adapter that sends the prompt on stdin to `claude --print`.

    Streaming mode asks the CLI for stream-json output with partial messages
    and forwards each text delta to on_chunk as it arrives. stdout and stderr
    are drained by separate tasks so a chatty stderr can never block stdout
    (or vice versa).

    Every invocation is bounded by config.timeout_seconds; on expiry the
    process is killed and ProcessTimeoutError is raised.
    """

    def __init__(self, config: AdapterConfig, observer: LLMObserver) -> None:
        self._config = config
        self._observer = observer

    @property
    def name(self) -> str:
        return "Claude CLI"

    def is_available(self) -> bool:
        return shutil.which(self._config.executable) is not None

    def build_command(self, system_prompt: str | None, streaming: bool) -> list[str]:
        command = [self._config.executable, "--print"]
        if streaming:
            command += [
                "--output-format",
                "stream-json",
                "--verbose",
                "--include-partial-messages",
            ]
        if system_prompt:
            command += ["--system-prompt", system_prompt]
        return command

    async def execute(
        self,
        prompt: str,
        system_prompt: str | None = None,
        streaming: bool = False,
        on_chunk: ChunkCallback | None = None,
    ) -> str:
        """Run the CLI once and return its complete text output.

        Raises:
            ToolNotFoundError: if the executable is not on PATH.
            ProcessExecutionError: if the process exits non-zero.
            ProcessTimeoutError: if the process exceeds the configured timeout.
        """
        if not self.is_available():
            raise ToolNotFoundError(executable=self._config.executable)

        invocation = ProcessInvocation(
            command=self.build_command(system_prompt=system_prompt, streaming=streaming),
            stdin_payload=prompt,
            streaming=streaming,
        )
        self._observer.llm_invocation_started(
            adapter=self.name, streaming=streaming, prompt_chars=len(prompt)
        )

        start = time.monotonic()
        try:
            if streaming:
                result = await self._run_streaming(invocation, on_chunk=on_chunk)
            else:
                result = await self._run_buffered(invocation)
        except ProcessTimeoutError as exc:
            self._observer.llm_invocation_failed(adapter=self.name, reason=str(exc))
            raise

        if not result.succeeded:
            error = ProcessExecutionError(
                exit_code=result.exit_code, stderr=result.stderr, output=result.stdout
            )
            self._observer.llm_invocation_failed(adapter=self.name, reason=str(error))
            raise error

        self._observer.llm_invocation_completed(
            adapter=self.name,
            duration_ms=int((time.monotonic() - start) * 1000),
            output_chars=len(result.stdout),
        )
        return result.stdout

    async def _spawn(self, invocation: ProcessInvocation) -> Process:
        return await asyncio.create_subprocess_exec(
            *invocation.command, stdin=PIPE, stdout=PIPE, stderr=PIPE
        )

    async def _run_buffered(self, invocation: ProcessInvocation) -> ProcessResult:
        proc = await self._spawn(invocation)
        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                stdout, stderr = await proc.communicate(
                    invocation.stdin_payload.encode("utf-8")
                )
        except TimeoutError as exc:
            raise ProcessTimeoutError(
                timeout_seconds=self._config.timeout_seconds or 0.0
            ) from exc
        finally:
            await _reap(proc)

        return ProcessResult(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=proc.returncode if proc.returncode is not None else -1,
        )

    async def _run_streaming(
        self, invocation: ProcessInvocation, on_chunk: ChunkCallback | None
    ) -> ProcessResult:
        proc = await self._spawn(invocation)
        accumulator = StreamAccumulator()
        stderr_parts: list[str] = []

        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                await _pump(
                    proc=proc,
                    payload=invocation.stdin_payload,
                    accumulator=accumulator,
                    stderr_parts=stderr_parts,
                    on_chunk=on_chunk,
                )
                exit_code = await proc.wait()
        except TimeoutError as exc:
            raise ProcessTimeoutError(
                timeout_seconds=self._config.timeout_seconds or 0.0,
                output=accumulator.text,
            ) from exc
        finally:
            await _reap(proc)

        if accumulator.replaced:
            self._observer.llm_stream_reconciled(
                adapter=self.name,
                streamed_chars=accumulator.streamed_chars,
                final_chars=len(accumulator.text),
            )

        return ProcessResult(
            stdout=accumulator.text,
            stderr="".join(stderr_parts),
            exit_code=exit_code,
        )


async def _pump(
    proc: Process,
    payload: str,
    accumulator: StreamAccumulator,
    stderr_parts: list[str],
    on_chunk: ChunkCallback | None,
) -> None:
    """Feed stdin and drain stdout/stderr concurrently until both reach EOF."""
    assert proc.stdin is not None
    assert proc.stdout is not None
    assert proc.stderr is not None
    stdin, stdout, stderr = proc.stdin, proc.stdout, proc.stderr

    async def feed_stdin() -> None:
        try:
            stdin.write(payload.encode("utf-8"))
            await stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            # Process exited before reading its input; the exit code reports it.
            return
        finally:
            stdin.close()

    async def drain_stdout() -> None:
        parser = StreamJsonParser()
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while chunk := await stdout.read(_READ_SIZE):
            for event in parser.feed(decoder.decode(chunk)):
                _forward(accumulator.apply(event), on_chunk)
        for event in parser.feed(decoder.decode(b"", final=True)):
            _forward(accumulator.apply(event), on_chunk)
        for event in parser.flush():
            _forward(accumulator.apply(event), on_chunk)

    async def drain_stderr() -> None:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while chunk := await stderr.read(_READ_SIZE):
            stderr_parts.append(decoder.decode(chunk))
        stderr_parts.append(decoder.decode(b"", final=True))

    try:
        async with asyncio.TaskGroup() as tg:
            tg.create_task(feed_stdin())
            tg.create_task(drain_stdout())
            tg.create_task(drain_stderr())
    except ExceptionGroup as eg:
        # surface the first failure (e.g. from on_chunk) unwrapped
        raise eg.exceptions[0] from None


def _forward(text: str | None, on_chunk: ChunkCallback | None) -> None:
    if text is not None and on_chunk is not None:
        on_chunk(text)


async def _reap(proc: Process) -> None:
    """Kill the process if it is still running and wait for it to exit."""
    if proc.returncode is not None:
        return
    try:
        proc.kill()
    except ProcessLookupError:
        pass  # exited between the check and the kill
    await proc.wait()
