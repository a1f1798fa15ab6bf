"""Root Typer application for the dockhand CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from dockhand.commands import actions, compose, container, runtime

app = typer.Typer(
    name="dockhand",
    help="dockhand — list and control docker/podman containers from the shell.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every runtime command"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.add_typer(container.app, name="container", help="List containers and run lifecycle actions.")
app.add_typer(compose.app, name="compose", help="Lifecycle actions on a container's compose project.")
app.add_typer(runtime.app, name="runtime", help="Runtime and terminal detection.")
app.command(name="actions")(actions.actions)

if __name__ == "__main__":
    app()
