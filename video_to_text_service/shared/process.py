"""Async subprocess execution.

Each call yields one explicit completion value (`ProcessResult`) instead of
lifecycle callbacks, so pipeline steps compose with plain ``await``.
"""

from __future__ import annotations

import asyncio
import codecs
import contextlib
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Protocol, Sequence

from ..domain.errors import SubprocessSpawnError, SubprocessTimeoutError

_READ_SIZE = 4096


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: str
    stderr: str


class ProcessRunner(Protocol):
    def __call__(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        timeout_s: float | None = None,
        on_stderr: Callable[[str], None] | None = None,
        install_hint: str | None = None,
    ) -> Awaitable[ProcessResult]: ...


def _kill(proc: asyncio.subprocess.Process) -> None:
    with contextlib.suppress(ProcessLookupError):
        proc.kill()


async def run_process(
    cmd: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout_s: float | None = None,
    on_stderr: Callable[[str], None] | None = None,
    install_hint: str | None = None,
) -> ProcessResult:
    tool = Path(cmd[0]).name
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd) if cwd else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise SubprocessSpawnError(tool, exc.strerror or str(exc), hint=install_hint) from exc

    stderr_parts: list[str] = []

    async def _pump_stderr() -> None:
        assert proc.stderr is not None
        # chunks can end inside a multi-byte character
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await proc.stderr.read(_READ_SIZE)
            text = decoder.decode(chunk, final=not chunk)
            if text:
                stderr_parts.append(text)
                if on_stderr is not None:
                    on_stderr(text)
            if not chunk:
                break

    async def _collect() -> bytes:
        assert proc.stdout is not None
        stdout, _ = await asyncio.gather(proc.stdout.read(), _pump_stderr())
        await proc.wait()
        return stdout

    try:
        stdout = await asyncio.wait_for(_collect(), timeout=timeout_s)
    except asyncio.TimeoutError as exc:
        _kill(proc)
        await proc.wait()
        raise SubprocessTimeoutError(tool, timeout_s or 0, "".join(stderr_parts)) from exc
    except asyncio.CancelledError:
        _kill(proc)
        raise

    return ProcessResult(
        returncode=int(proc.returncode if proc.returncode is not None else -1),
        stdout=stdout.decode(errors="replace"),
        stderr="".join(stderr_parts),
    )
