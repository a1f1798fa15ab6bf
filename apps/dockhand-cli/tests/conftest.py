"""Shared test fixtures."""

from __future__ import annotations

import inspect
from typing import Any

import pytest

from dockhand_common import DockhandConfig

from dockhand.errors import NonZeroExitError

PS_ALL = ("docker", "ps", "-a", "--format", "{{.Names}},{{.Status}}")
PS_RUNNING = ("docker", "ps", "--format", "{{.Names}},{{.Status}}")


def inspect_argv(name: str) -> tuple[str, ...]:
    return ("docker", "inspect", "-f", "{{json .Config.Labels}}", name)


def failure(argv: tuple[str, ...], stderr: str, returncode: int = 1) -> NonZeroExitError:
    return NonZeroExitError(stderr, command=" ".join(argv), returncode=returncode, stderr=stderr)


class FakeRunner:
    """Stands in for ProcessRunner: canned output (or exception, or coroutine) per argv."""

    def __init__(self, responses: dict[tuple[str, ...], Any] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []
        self.spawned: list[list[str]] = []

    async def run(self, argv, *, cancel=None, timeout=None) -> str:
        self.calls.append(list(argv))
        key = tuple(argv)
        if key not in self.responses:
            raise AssertionError(f"Unexpected command: {key}")
        result = self.responses[key]
        if isinstance(result, Exception):
            raise result
        if callable(result):
            result = result()
            if inspect.isawaitable(result):
                result = await result
        return result

    def spawn_detached(self, argv) -> None:
        self.spawned.append(list(argv))


@pytest.fixture
def config() -> DockhandConfig:
    """A DockhandConfig pinned to docker with default labels and terminals."""
    return DockhandConfig(
        runtime="docker",
        compose_label_prefix="com.docker.compose",
        runtime_group="docker",
        daemon_process="dockerd",
        command_timeout=None,
        isolate_inspect_failures=False,
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
