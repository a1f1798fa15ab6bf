"""Container listing: ``ps`` and ``inspect`` output turned into records."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from dockhand_common import (
    LABELS_FORMAT,
    LIST_DELIMITER,
    LIST_FORMAT,
    ComposeInfo,
    ContainerRecord,
    DockhandConfig,
)

from dockhand.errors import (
    CommandCancelledError,
    ContainerNotFoundError,
    LabelParseError,
    ListingParseError,
    ProcessError,
)
from dockhand.services.process import ProcessRunner

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Parsers (pure, testable)
# ---------------------------------------------------------------------------


def parse_listing(output: str) -> list[tuple[str, str]]:
    """Split ``Names,Status`` lines into (name, status) pairs.

    Names cannot contain the delimiter, so only the first one splits;
    the status keeps any further commas.
    """
    entries: list[tuple[str, str]] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        name, sep, status = line.partition(LIST_DELIMITER)
        name = name.strip()
        if not sep or not name:
            raise ListingParseError(f"Unexpected listing line: {line!r}")
        entries.append((name, status.strip()))
    return entries


def parse_labels(output: str) -> dict[str, str]:
    """Decode ``{{json .Config.Labels}}`` output; ``null`` means no labels."""
    try:
        labels = json.loads(output)
    except json.JSONDecodeError as exc:
        raise LabelParseError(f"Invalid label JSON: {exc}") from exc
    if labels is None:
        return {}
    if not isinstance(labels, dict):
        raise LabelParseError(f"Expected a label object, got {type(labels).__name__}")
    return labels


def build_record(name: str, status: str, labels: dict[str, Any], prefix: str) -> ContainerRecord:
    project = labels.get(f"{prefix}.project")
    if not project:
        return ContainerRecord(name=name, status=status)
    return ContainerRecord(
        name=name,
        status=status,
        compose=ComposeInfo(
            project=project,
            service=labels.get(f"{prefix}.service"),
            config_files=labels.get(f"{prefix}.project.config_files"),
            working_dir=labels.get(f"{prefix}.project.working_dir"),
        ),
    )


# ---------------------------------------------------------------------------
# Lister
# ---------------------------------------------------------------------------


class ContainerLister:
    def __init__(self, runner: ProcessRunner, runtime: str, config: DockhandConfig):
        self.runner = runner
        self.runtime = runtime
        self.config = config

    async def _ps(self, *flags: str, cancel: asyncio.Event | None = None) -> list[tuple[str, str]]:
        output = await self.runner.run(
            [self.runtime, "ps", *flags, "--format", LIST_FORMAT],
            cancel=cancel,
        )
        return parse_listing(output)

    async def _labels(self, name: str, cancel: asyncio.Event | None) -> dict[str, str]:
        try:
            output = await self.runner.run(
                [self.runtime, "inspect", "-f", LABELS_FORMAT, name],
                cancel=cancel,
            )
            return parse_labels(output)
        except CommandCancelledError:
            raise
        except (ProcessError, LabelParseError) as exc:
            if not self.config.isolate_inspect_failures:
                raise
            log.warning("Inspect failed for %s, listing without labels: %s", name, exc)
            return {}

    async def _records(self, *flags: str, cancel: asyncio.Event | None) -> list[ContainerRecord]:
        entries = await self._ps(*flags, cancel=cancel)
        tasks = [asyncio.ensure_future(self._labels(name, cancel)) for name, _ in entries]
        try:
            label_maps = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        prefix = self.config.compose_label_prefix
        return [
            build_record(name, status, labels, prefix)
            for (name, status), labels in zip(entries, label_maps)
        ]

    async def list_all(self, *, cancel: asyncio.Event | None = None) -> list[ContainerRecord]:
        """All containers, stopped ones included, in listing order."""
        return await self._records("-a", cancel=cancel)

    async def list_running(self, *, cancel: asyncio.Event | None = None) -> list[ContainerRecord]:
        return await self._records(cancel=cancel)

    async def list_running_count(self, *, cancel: asyncio.Event | None = None) -> int:
        """Number of running containers; skips the inspect step."""
        return len(await self._ps(cancel=cancel))

    async def find(self, name: str, *, cancel: asyncio.Event | None = None) -> ContainerRecord:
        for record in await self.list_all(cancel=cancel):
            if record.name == name:
                return record
        raise ContainerNotFoundError(f"No container named '{name}'")
