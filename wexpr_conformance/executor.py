"""Process execution capability used to invoke the validator."""

import asyncio
import contextlib
import logging
import os
import signal
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ProcessOutcome:
    """Exit status and combined output of a finished process.

    exit_code is None when the process could not be launched or was killed
    after a timeout; it is negative when the process died from a signal.
    """

    exit_code: int | None
    output: str = ""
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True, kw_only=True)
class ProcessExecutor(ABC):
    """Abstract base for running an external command to completion."""

    @abstractmethod
    async def run(self, command: Sequence[str]) -> ProcessOutcome:
        """Run the command and wait for it to finish.

        Args:
            command: Program followed by its arguments

        Returns:
            Exit status and captured stdout/stderr

        """


@dataclass(frozen=True, kw_only=True)
class SubprocessExecutor(ProcessExecutor):
    """Runs commands as child processes, inheriting environment and cwd.

    With a timeout set, a child still running after that many seconds is
    killed and reported as timed out.
    """

    timeout: float | None = None

    async def run(self, command: Sequence[str]) -> ProcessOutcome:
        """Spawn the command without a shell and capture its output."""
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as exc:
            log.error("Failed to launch %s: %s", command[0], exc)
            return ProcessOutcome(exit_code=None, output=str(exc))

        try:
            stdout, _ = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout
            )
        except TimeoutError:
            await _kill_process_group(process)
            return ProcessOutcome(exit_code=None, timed_out=True)

        return ProcessOutcome(exit_code=process.returncode, output=_decode(stdout))


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


async def _kill_process_group(process: asyncio.subprocess.Process) -> None:
    """Kill the child and everything it spawned, then reap the child."""
    with contextlib.suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)
    await process.wait()
