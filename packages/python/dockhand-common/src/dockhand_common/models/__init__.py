"""Shared Pydantic models."""

from dockhand_common.models.command import (
    COMMAND_LABELS,
    COMPOSABLE_ACTIONS,
    Action,
    CommandOutcome,
    LifecycleCommand,
)
from dockhand_common.models.container import ComposeInfo, ContainerRecord
from dockhand_common.models.runtime import RuntimeCapabilities

__all__ = [
    "Action",
    "COMMAND_LABELS",
    "COMPOSABLE_ACTIONS",
    "CommandOutcome",
    "ComposeInfo",
    "ContainerRecord",
    "LifecycleCommand",
    "RuntimeCapabilities",
]
