"""dockhand common — shared models and constants for the dockhand CLI."""

from dockhand_common.constants import (
    COMPOSE_LABEL_PREFIX,
    DAEMON_PROCESS,
    DAEMON_PROCESSES,
    KNOWN_RUNTIMES,
    LABELS_FORMAT,
    LIST_DELIMITER,
    LIST_FORMAT,
    LOG_TAIL_LINES,
    RUNTIME_GROUP,
    TERMINALS,
)
from dockhand_common.config import DockhandConfig
from dockhand_common.models import (
    COMMAND_LABELS,
    COMPOSABLE_ACTIONS,
    Action,
    CommandOutcome,
    ComposeInfo,
    ContainerRecord,
    LifecycleCommand,
    RuntimeCapabilities,
)

__all__ = [
    "Action",
    "COMMAND_LABELS",
    "COMPOSABLE_ACTIONS",
    "COMPOSE_LABEL_PREFIX",
    "CommandOutcome",
    "ComposeInfo",
    "ContainerRecord",
    "DAEMON_PROCESS",
    "DAEMON_PROCESSES",
    "DockhandConfig",
    "KNOWN_RUNTIMES",
    "LABELS_FORMAT",
    "LIST_DELIMITER",
    "LIST_FORMAT",
    "LOG_TAIL_LINES",
    "LifecycleCommand",
    "RUNTIME_GROUP",
    "RuntimeCapabilities",
    "TERMINALS",
]
