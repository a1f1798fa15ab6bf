"""CLI configuration — singleton DockhandConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from dockhand_common import DockhandConfig


@lru_cache(maxsize=1)
def get_config() -> DockhandConfig:
    """Return the global DockhandConfig (resolved once, cached)."""
    return DockhandConfig()
