"""Runtime and terminal detection commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from dockhand.commands.container import _run
from dockhand.context import build_services

app = typer.Typer(no_args_is_help=True)
console = Console()


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


@app.command()
def status() -> None:
    """Show which runtimes are installed, group access and daemon state."""
    services = build_services()
    caps = services.probe.snapshot()
    daemon_running = _run(services.probe.is_daemon_running())

    table = Table(title="Container runtime")
    table.add_column("Check", style="bold")
    table.add_column("Result")

    for name, present in caps.runtimes.items():
        table.add_row(f"{name} binary", _yes_no(present))
    table.add_row(f"user in '{services.config.runtime_group}' group", _yes_no(caps.user_authorized))
    table.add_row(f"{services.probe.daemon_process()} running", _yes_no(daemon_running))

    console.print(table)


@app.command()
def terminals() -> None:
    """Show which terminal emulators are available for exec/logs."""
    resolver = build_services().terminals
    selected = resolver.pick()

    table = Table(title="Terminal emulators")
    table.add_column("Terminal", style="bold")
    table.add_column("Available")
    table.add_column("Selected")

    for terminal, available in resolver.resolve().items():
        table.add_row(terminal, _yes_no(available), "*" if terminal == selected else "")

    console.print(table)
    if selected is None:
        console.print("[yellow]No terminal emulator found; exec and logs are unavailable.[/yellow]")
