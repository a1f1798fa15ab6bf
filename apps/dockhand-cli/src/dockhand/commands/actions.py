"""List the supported lifecycle actions."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from dockhand_common import LifecycleCommand

console = Console()


def actions() -> None:
    """Show every lifecycle action and its label."""
    table = Table(title="Lifecycle actions")
    table.add_column("Action", style="bold")
    table.add_column("Label")
    table.add_column("Interactive")

    for command in LifecycleCommand.all():
        table.add_row(command.key, command.label, "yes" if command.action.interactive else "")

    console.print(table)
