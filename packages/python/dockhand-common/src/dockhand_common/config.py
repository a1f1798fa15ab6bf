"""Central configuration for dockhand."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from dockhand_common.constants import (
    COMPOSE_LABEL_PREFIX,
    LOG_TAIL_LINES,
    RUNTIME_GROUP,
    TERMINALS,
)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_timeout() -> float | None:
    raw = os.environ.get("DOCKHAND_COMMAND_TIMEOUT", "").strip()
    return float(raw) if raw else None


class DockhandConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    runtime: str | None = Field(default_factory=lambda: os.environ.get("DOCKHAND_RUNTIME") or None)
    compose_label_prefix: str = Field(
        default_factory=lambda: os.environ.get("DOCKHAND_COMPOSE_PREFIX", COMPOSE_LABEL_PREFIX)
    )
    runtime_group: str = Field(default_factory=lambda: os.environ.get("DOCKHAND_RUNTIME_GROUP", RUNTIME_GROUP))
    # None: derived from the runtime in use
    daemon_process: str | None = Field(default_factory=lambda: os.environ.get("DOCKHAND_DAEMON_PROCESS") or None)
    log_tail_lines: int = Field(default=LOG_TAIL_LINES, gt=0)
    command_timeout: float | None = Field(default_factory=_env_timeout)
    isolate_inspect_failures: bool = Field(default_factory=lambda: _env_flag("DOCKHAND_ISOLATE_INSPECT"))
    terminals: tuple[str, ...] = Field(default=TERMINALS)

