"""Compose-scoped lifecycle commands, resolved from a container's labels."""

from __future__ import annotations

import typer

from dockhand_common import COMPOSABLE_ACTIONS, Action, CommandOutcome, LifecycleCommand

from dockhand.commands.container import _report, _run
from dockhand.context import build_services
from dockhand.errors import DockhandError
from dockhand.services.dispatch import compose_args

app = typer.Typer(no_args_is_help=True)


async def _dispatch_for_container(action: Action, name: str) -> CommandOutcome:
    services = build_services()
    record = await services.lister().find(name)
    if record.compose is None:
        raise DockhandError(f"Container '{name}' is not part of a compose project")
    command = LifecycleCommand.compose_scoped(action, *compose_args(record.compose))
    return await services.dispatcher().dispatch(command, record.compose.project)


def _compose_lifecycle(action: Action):
    def command(
        name: str = typer.Argument(..., help="Any container of the compose project"),
    ) -> None:
        _report(_run(_dispatch_for_container(action, name)))

    command.__doc__ = f"{action.value.capitalize()} the compose project a container belongs to."
    return command


for _action in COMPOSABLE_ACTIONS:
    app.command(name=_action.value)(_compose_lifecycle(_action))
