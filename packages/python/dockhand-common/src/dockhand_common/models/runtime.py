"""Snapshot of slowly-changing facts about the container runtime host."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RuntimeCapabilities(BaseModel):
    """Which runtime binaries exist and whether the user may talk to the daemon.

    Daemon liveness is not part of the snapshot; callers check it per call.
    """

    model_config = ConfigDict(frozen=True)

    runtimes: dict[str, bool] = Field(default_factory=dict)
    user_authorized: bool = False

    @property
    def available_runtimes(self) -> list[str]:
        return [name for name, present in self.runtimes.items() if present]

    @property
    def preferred_runtime(self) -> str | None:
        available = self.available_runtimes
        return available[0] if available else None
