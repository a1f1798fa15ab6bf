"""Container listing and single-container lifecycle commands."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Coroutine, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dockhand_common import COMPOSABLE_ACTIONS, Action, CommandOutcome, LifecycleCommand

from dockhand.context import build_services
from dockhand.errors import DockhandError

app = typer.Typer(no_args_is_help=True)
console = Console()

T = TypeVar("T")


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion, turning dockhand errors into a red message and exit code."""
    try:
        return asyncio.run(coro)
    except DockhandError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code)


def _report(outcome: CommandOutcome) -> None:
    if not outcome.success:
        console.print(f"[red]Failed: {escape(outcome.command)}[/red]")
        console.print(outcome.output, style="red", markup=False)
        raise typer.Exit(1)
    console.print(f"[green]{escape(outcome.command)}[/green]")
    if outcome.output.strip():
        console.print(outcome.output.rstrip(), markup=False)


def _status_style(status: str) -> str:
    if "Paused" in status:
        return "yellow"
    if status.startswith("Up"):
        return "green"
    return "dim"


async def _dispatch(command: LifecycleCommand, name: str) -> CommandOutcome:
    services = build_services()
    return await services.dispatcher().dispatch(command, name)


@app.command("ls")
def list_containers(
    running: bool = typer.Option(False, "--running", help="Only running containers"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
) -> None:
    """List containers, stopped ones included unless --running is given."""

    async def _list():
        lister = build_services().lister()
        return await (lister.list_running() if running else lister.list_all())

    records = _run(_list())

    if as_json:
        console.print_json(json.dumps([r.to_dict() for r in records]))
        return

    if not records:
        console.print("[yellow]No containers found.[/yellow]")
        return

    table = Table(title="Containers")
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Project")
    table.add_column("Service")

    for r in records:
        style = _status_style(r.status)
        table.add_row(
            r.name,
            f"[{style}]{escape(r.status)}[/{style}]",
            r.compose.project if r.compose else "",
            (r.compose.service or "") if r.compose else "",
        )

    console.print(table)


@app.command("count")
def count() -> None:
    """Print the number of running containers."""

    async def _count():
        return await build_services().lister().list_running_count()

    console.print(_run(_count()))


def _lifecycle(action: Action):
    def command(
        name: str = typer.Argument(..., help="Container name"),
    ) -> None:
        _report(_run(_dispatch(LifecycleCommand.simple(action), name)))

    command.__doc__ = f"{action.value.capitalize()} a container."
    return command


for _action in COMPOSABLE_ACTIONS:
    app.command(name=_action.value)(_lifecycle(_action))


@app.command("exec")
def exec_shell(
    name: str = typer.Argument(..., help="Container name"),
) -> None:
    """Open a shell inside a container in a new terminal window."""
    _report(_run(_dispatch(LifecycleCommand.simple(Action.EXEC), name)))


@app.command("logs")
def logs(
    name: str = typer.Argument(..., help="Container name"),
) -> None:
    """Follow a container's logs in a new terminal window."""
    _report(_run(_dispatch(LifecycleCommand.simple(Action.LOGS), name)))
