"""Lifecycle commands and their outcomes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class Action(str, Enum):
    START = "start"
    RESTART = "restart"
    STOP = "stop"
    PAUSE = "pause"
    UNPAUSE = "unpause"
    EXEC = "exec"
    LOGS = "logs"

    @property
    def interactive(self) -> bool:
        return self in (Action.EXEC, Action.LOGS)


COMPOSABLE_ACTIONS = (Action.START, Action.RESTART, Action.STOP, Action.PAUSE, Action.UNPAUSE)


class LifecycleCommand(BaseModel):
    """A lifecycle action, either on a single container or scoped to its compose project.

    ``extra_args`` are forwarded to the runtime CLI verbatim and always
    placed before the target, e.g. ``-f compose.yml`` for compose actions.
    """

    model_config = ConfigDict(frozen=True)

    action: Action
    compose: bool = False
    extra_args: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_compose_scope(self) -> "LifecycleCommand":
        if self.compose and self.action not in COMPOSABLE_ACTIONS:
            raise ValueError(f"'{self.action.value}' cannot be compose-scoped")
        return self

    @classmethod
    def simple(cls, action: Action | str, *extra_args: str) -> "LifecycleCommand":
        return cls(action=Action(action), extra_args=extra_args)

    @classmethod
    def compose_scoped(cls, action: Action | str, *extra_args: str) -> "LifecycleCommand":
        return cls(action=Action(action), compose=True, extra_args=extra_args)

    @classmethod
    def all(cls) -> list["LifecycleCommand"]:
        """The fixed set of commands, in menu order."""
        commands = [cls.simple(a) for a in COMPOSABLE_ACTIONS]
        commands += [cls.compose_scoped(a) for a in COMPOSABLE_ACTIONS]
        commands += [cls.simple(Action.EXEC), cls.simple(Action.LOGS)]
        return commands

    @property
    def key(self) -> str:
        """Legacy one-string encoding, e.g. ``"compose start"``."""
        return f"compose {self.action.value}" if self.compose else self.action.value

    @property
    def label(self) -> str:
        return COMMAND_LABELS[self.key]


COMMAND_LABELS: dict[str, str] = {
    "start": "Start",
    "restart": "Restart",
    "stop": "Stop",
    "pause": "Pause",
    "unpause": "Unpause",
    "compose start": "Start (compose)",
    "compose restart": "Restart (compose)",
    "compose stop": "Stop (compose)",
    "compose pause": "Pause (compose)",
    "compose unpause": "Unpause (compose)",
    "exec": "Exec",
    "logs": "Logs",
}


class CommandOutcome(BaseModel):
    """Result of a dispatched command: success flag, command text and output or error."""

    model_config = ConfigDict(frozen=True)

    success: bool
    command: str
    output: str = ""
