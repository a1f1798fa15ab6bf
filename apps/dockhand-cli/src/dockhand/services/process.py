"""Async subprocess wrapper, the single I/O primitive for runtime CLI calls."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import subprocess
from typing import Sequence

from dockhand.errors import (
    CommandCancelledError,
    CommandTimeoutError,
    NonZeroExitError,
    SpawnError,
)

log = logging.getLogger(__name__)


def describe(argv: Sequence[str]) -> str:
    """Command text as reported to callers."""
    return " ".join(argv)


async def _reap(proc: asyncio.subprocess.Process, communicate: asyncio.Future) -> None:
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
    await communicate


class ProcessRunner:
    """Runs one external command per call and captures its output.

    There is no retry. Without a timeout a hung command waits forever;
    pass ``cancel`` (or cancel the awaiting task) to abandon it.
    """

    def __init__(self, *, timeout: float | None = None):
        self.timeout = timeout
        self._detached: list[subprocess.Popen] = []

    async def run(
        self,
        argv: Sequence[str],
        *,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> str:
        """Run ``argv`` and return its stdout; raise a ProcessError subclass on failure."""
        command = describe(argv)
        if timeout is None:
            timeout = self.timeout
        if cancel is not None and cancel.is_set():
            raise CommandCancelledError(f"Cancelled before start: {command}", command=command)

        log.debug("Running: %s", command)
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            reason = exc.strerror or str(exc)
            log.warning("Could not start %s: %s", command, reason)
            raise SpawnError(f"Failed to start {command}: {reason}", command=command) from exc

        communicate = asyncio.ensure_future(proc.communicate())
        waiters: set[asyncio.Future] = {communicate}
        cancelled = None
        if cancel is not None:
            cancelled = asyncio.ensure_future(cancel.wait())
            waiters.add(cancelled)

        try:
            done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            await _reap(proc, communicate)
            raise
        finally:
            if cancelled is not None:
                cancelled.cancel()

        if communicate not in done:
            await _reap(proc, communicate)
            if cancelled is not None and cancelled in done:
                log.warning("Cancelled: %s", command)
                raise CommandCancelledError(f"Cancelled: {command}", command=command)
            log.warning("Timed out after %ss: %s", timeout, command)
            raise CommandTimeoutError(f"Timed out after {timeout}s: {command}", command=command)

        stdout_bytes, stderr_bytes = communicate.result()
        stdout = stdout_bytes.decode(errors="replace")
        stderr = stderr_bytes.decode(errors="replace").strip()

        if proc.returncode != 0:
            message = stderr or f"Command exited with status {proc.returncode}"
            log.warning("Command failed (%s): %s\n%s", proc.returncode, command, message)
            raise NonZeroExitError(message, command=command, returncode=proc.returncode, stderr=stderr)
        return stdout

    def reap_detached(self) -> int:
        """Collect exited detached children; return how many are still running."""
        self._detached = [p for p in self._detached if p.poll() is None]
        return len(self._detached)

    def spawn_detached(self, argv: Sequence[str]) -> None:
        """Launch ``argv`` in its own session without waiting for it.

        Handles are kept so earlier launches are reaped on the next call.
        """
        command = describe(argv)
        log.debug("Launching: %s", command)
        self.reap_detached()
        try:
            proc = subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            reason = exc.strerror or str(exc)
            log.warning("Could not start %s: %s", command, reason)
            raise SpawnError(f"Failed to start {command}: {reason}", command=command) from exc
        self._detached.append(proc)
