"""Spawn the java process in attached or detached mode."""

from __future__ import annotations

import asyncio
import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..models.results import SPAWN_ERROR_STATUS, RunOutcome, RunResult

logger = logging.getLogger(__name__)

DEFAULT_WAIT_FOR_ERROR_MS = 500
_READ_CHUNK_SIZE = 64 * 1024


@dataclass
class RunOptions:
    """How to launch the child process.

    Attributes:
        detached: Let the child outlive the call instead of awaiting it
        wait_for_error_ms: Grace period used in detached mode to catch
            near-immediate failures
        cwd: Working directory of an attached child (current dir if None)
    """

    detached: bool = False
    wait_for_error_ms: int = DEFAULT_WAIT_FOR_ERROR_MS
    cwd: Optional[str] = None

    def __post_init__(self) -> None:
        if self.wait_for_error_ms < 0:
            raise ValueError(
                f"wait_for_error_ms must be >= 0, got {self.wait_for_error_ms}"
            )
        if self.cwd is None:
            self.cwd = os.getcwd()


class ProcessState(Enum):
    """Lifecycle of one invocation."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    EXITED = "exited"
    SPAWN_FAILED = "spawn_failed"


def resolve_executable(executable: str) -> Tuple[str, str]:
    """Get the (spawn path, display form) of an executable.

    A Windows executable path containing spaces is made absolute and shown
    quoted, unless it is quoted already.
    """
    looks_windows = " " in executable and ".exe" in executable.lower()
    if not looks_windows:
        return executable, executable

    if "'" in executable or '"' in executable:
        return executable.strip("'\""), executable

    resolved = os.path.abspath(executable)
    return resolved, f'"{resolved}"'


async def _drain(stream: Optional[asyncio.StreamReader], buffer: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)


class ProcessInvoker:
    """Runs java with an assembled argument vector.

    Spawn problems never raise; they come back as ``SPAWN_ERROR_STATUS``
    with a message on stderr.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.state = ProcessState.NOT_STARTED

    async def invoke(
        self,
        executable: str,
        args: Sequence[str],
        options: Optional[RunOptions] = None,
    ) -> RunResult:
        """Spawn the process and report its outcome.

        Args:
            executable: java executable (name on PATH or path)
            args: Argument vector from ``build_arguments``
            options: Launch options

        Returns:
            RunResult with status, captured output and the child handle
        """
        options = options or RunOptions()
        spawn_path, display = resolve_executable(executable)
        logger.debug(f"Java command: {display} {' '.join(args)}")

        self.state = ProcessState.NOT_STARTED
        try:
            process = await asyncio.create_subprocess_exec(
                spawn_path,
                *args,
                **self._spawn_kwargs(options),
            )
        except OSError as e:
            return self._spawn_failed(f"Java spawn error: {e}")
        except Exception as e:
            return self._spawn_failed(f"Java spawn fatal error: {e}")

        self.state = ProcessState.RUNNING

        if options.detached:
            return await self._watch_detached(process, options)
        return await self._wait_attached(process)

    def _spawn_kwargs(self, options: RunOptions) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"env": dict(self.environ)}
        creationflags = 0
        if sys.platform == "win32":
            creationflags |= subprocess.CREATE_NO_WINDOW

        if options.detached:
            kwargs["stdin"] = subprocess.DEVNULL
            kwargs["stdout"] = subprocess.DEVNULL
            kwargs["stderr"] = subprocess.DEVNULL
            if sys.platform == "win32":
                creationflags |= subprocess.CREATE_NEW_PROCESS_GROUP
            else:
                kwargs["start_new_session"] = True
        else:
            kwargs["cwd"] = options.cwd
            kwargs["stdout"] = asyncio.subprocess.PIPE
            kwargs["stderr"] = asyncio.subprocess.PIPE

        if creationflags:
            kwargs["creationflags"] = creationflags
        return kwargs

    async def _wait_attached(self, process: asyncio.subprocess.Process) -> RunResult:
        stdout = bytearray()
        stderr = bytearray()
        await asyncio.gather(
            _drain(process.stdout, stdout),
            _drain(process.stderr, stderr),
        )
        status = await process.wait()
        self.state = ProcessState.EXITED
        return RunResult(
            status=status,
            stdout=bytes(stdout),
            stderr=bytes(stderr),
            child=process,
        )

    async def _watch_detached(
        self,
        process: asyncio.subprocess.Process,
        options: RunOptions,
    ) -> RunResult:
        await asyncio.sleep(options.wait_for_error_ms / 1000)

        status = process.returncode
        if status is not None:
            self.state = ProcessState.EXITED
            logger.debug(f"Detached java process exited early with status {status}")

        return RunResult(status=status, child=process)

    def _spawn_failed(self, message: str) -> RunResult:
        self.state = ProcessState.SPAWN_FAILED
        logger.debug(message)
        return RunResult(
            status=SPAWN_ERROR_STATUS,
            stderr=message.encode(),
            outcome=RunOutcome.FAILED,
        )
