"""Lifecycle command dispatch: logical action plus target to a runtime command line."""

from __future__ import annotations

import asyncio
import logging
import shlex

from pydantic import ValidationError

from dockhand_common import Action, CommandOutcome, ComposeInfo, LifecycleCommand

from dockhand.errors import InvalidActionError, ProcessError
from dockhand.services.process import ProcessRunner, describe
from dockhand.services.terminal import TerminalResolver

log = logging.getLogger(__name__)


def parse_command(text: str) -> LifecycleCommand:
    """Parse the one-string form: ``"restart"`` or ``"compose restart"``."""
    tokens = text.split()
    try:
        if len(tokens) == 1:
            return LifecycleCommand.simple(tokens[0])
        if len(tokens) == 2 and tokens[0] == "compose":
            return LifecycleCommand.compose_scoped(tokens[1])
    except (ValueError, ValidationError) as exc:
        raise InvalidActionError(f"Invalid action '{text}': {exc}") from exc
    raise InvalidActionError(f"Invalid action '{text}'")


def compose_args(info: ComposeInfo) -> tuple[str, ...]:
    """Compose CLI flags pointing at a container's project files."""
    args: list[str] = []
    for config_file in info.config_file_list:
        args += ["-f", config_file]
    if info.working_dir:
        args += ["--project-directory", info.working_dir]
    return tuple(args)


class CommandDispatcher:
    def __init__(
        self,
        runner: ProcessRunner,
        runtime: str,
        *,
        terminals: TerminalResolver | None = None,
        log_tail_lines: int = 2000,
    ):
        self.runner = runner
        self.runtime = runtime
        self.terminals = terminals or TerminalResolver()
        self.log_tail_lines = log_tail_lines

    def build_argv(self, command: LifecycleCommand, target: str) -> list[str]:
        """Runtime command line for a non-interactive action.

        Simple:   ``<runtime> <action> [extra...] <container>``
        Compose:  ``<runtime> compose [extra...] -p <project> <action>``
        """
        if command.action.interactive:
            raise InvalidActionError(f"'{command.action.value}' runs in a terminal")
        if command.compose:
            return [self.runtime, "compose", *command.extra_args, "-p", target, command.action.value]
        return [self.runtime, command.action.value, *command.extra_args, target]

    def build_script(self, command: LifecycleCommand, target: str) -> str:
        """Shell script for an interactive action; drops to a shell when it ends."""
        name = shlex.quote(target)
        if command.action is Action.EXEC:
            return f"{self.runtime} exec -it {name} sh; exec $SHELL"
        if command.action is Action.LOGS:
            return f"{self.runtime} logs -f --tail {self.log_tail_lines} {name}; exec $SHELL"
        raise InvalidActionError(f"'{command.action.value}' is not interactive")

    async def dispatch(
        self,
        command: LifecycleCommand,
        target: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> CommandOutcome:
        if command.action.interactive:
            return self._launch_interactive(command, target)

        argv = self.build_argv(command, target)
        try:
            output = await self.runner.run(argv, cancel=cancel)
        except ProcessError as exc:
            log.error("%s on %s failed: %s", command.label, target, exc)
            return CommandOutcome(success=False, command=describe(argv), output=str(exc))
        return CommandOutcome(success=True, command=describe(argv), output=output)

    def _launch_interactive(self, command: LifecycleCommand, target: str) -> CommandOutcome:
        available = self.terminals.resolve()
        terminal = next((t for t, present in available.items() if present), None)
        if terminal is None:
            message = f"No valid terminal found ({', '.join(available)})"
            log.error(message)
            return CommandOutcome(success=False, command=command.key, output=message)

        argv = [*self.terminals.launcher(terminal), self.build_script(command, target)]
        try:
            self.runner.spawn_detached(argv)
        except ProcessError as exc:
            log.error("%s on %s failed: %s", command.label, target, exc)
            return CommandOutcome(success=False, command=describe(argv), output=str(exc))
        return CommandOutcome(success=True, command=describe(argv))
