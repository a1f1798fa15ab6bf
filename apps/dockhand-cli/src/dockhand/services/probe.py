"""Runtime host probes: binaries on PATH, group membership, daemon liveness."""

from __future__ import annotations

import getpass
import logging
import re
import shutil
import subprocess

from dockhand_common import (
    DAEMON_PROCESS,
    DAEMON_PROCESSES,
    KNOWN_RUNTIMES,
    DockhandConfig,
    RuntimeCapabilities,
)

from dockhand.errors import RuntimeNotFoundError
from dockhand.services.process import ProcessRunner

log = logging.getLogger(__name__)


def has_runtime_binary(name: str) -> bool:
    return shutil.which(name) is not None


def group_tokens(groups_output: str) -> list[str]:
    """Group names from ``groups <user>`` output (``user : a b c`` or ``a b c``)."""
    _, sep, rest = groups_output.partition(":")
    return (rest if sep else groups_output).split()


def is_user_authorized(group: str, user: str | None = None) -> bool:
    """Whether the user belongs to ``group`` and may use the runtime without sudo."""
    user = user or getpass.getuser()
    try:
        result = subprocess.run(["groups", user], capture_output=True, text=True, check=False)
    except OSError as exc:
        log.debug("Could not query groups for %s: %s", user, exc)
        return False
    if result.returncode != 0:
        log.debug("groups %s failed: %s", user, result.stderr.strip())
        return False
    return group in group_tokens(result.stdout)


class RuntimeProbe:
    """Probes the host once and keeps an immutable snapshot until refreshed."""

    def __init__(self, runner: ProcessRunner, config: DockhandConfig):
        self.runner = runner
        self.config = config
        self._snapshot: RuntimeCapabilities | None = None

    def refresh(self) -> RuntimeCapabilities:
        self._snapshot = RuntimeCapabilities(
            runtimes={name: has_runtime_binary(name) for name in KNOWN_RUNTIMES},
            user_authorized=is_user_authorized(self.config.runtime_group),
        )
        log.debug("Runtime capabilities: %s", self._snapshot)
        return self._snapshot

    def snapshot(self) -> RuntimeCapabilities:
        if self._snapshot is None:
            return self.refresh()
        return self._snapshot

    def daemon_process(self) -> str:
        """Configured daemon name, else the one belonging to the runtime in use."""
        if self.config.daemon_process:
            return self.config.daemon_process
        runtime = self.config.runtime or self.snapshot().preferred_runtime
        return DAEMON_PROCESSES.get(runtime or "", DAEMON_PROCESS)

    async def is_daemon_running(self) -> bool:
        """Re-checked on every call; the daemon starts and stops on its own."""
        output = await self.runner.run(["ps", "cax"])
        pattern = rf"\b{re.escape(self.daemon_process())}\b"
        return re.search(pattern, output) is not None


def resolve_runtime(config: DockhandConfig, capabilities: RuntimeCapabilities) -> str:
    """The configured runtime, else the first one found on PATH."""
    if config.runtime:
        return config.runtime
    runtime = capabilities.preferred_runtime
    if runtime is None:
        raise RuntimeNotFoundError(f"No container runtime found on PATH ({', '.join(KNOWN_RUNTIMES)})")
    return runtime
