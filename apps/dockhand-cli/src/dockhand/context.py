"""Service wiring shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from dockhand_common import DockhandConfig

from dockhand.config import get_config
from dockhand.services.containers import ContainerLister
from dockhand.services.dispatch import CommandDispatcher
from dockhand.services.probe import RuntimeProbe, resolve_runtime
from dockhand.services.process import ProcessRunner
from dockhand.services.terminal import TerminalResolver


@dataclass
class Services:
    config: DockhandConfig
    runner: ProcessRunner
    probe: RuntimeProbe
    terminals: TerminalResolver

    @property
    def runtime(self) -> str:
        return resolve_runtime(self.config, self.probe.snapshot())

    def lister(self) -> ContainerLister:
        return ContainerLister(self.runner, self.runtime, self.config)

    def dispatcher(self) -> CommandDispatcher:
        return CommandDispatcher(
            self.runner,
            self.runtime,
            terminals=self.terminals,
            log_tail_lines=self.config.log_tail_lines,
        )


def build_services(config: DockhandConfig | None = None) -> Services:
    cfg = config or get_config()
    runner = ProcessRunner(timeout=cfg.command_timeout)
    return Services(
        config=cfg,
        runner=runner,
        probe=RuntimeProbe(runner, cfg),
        terminals=TerminalResolver(cfg.terminals),
    )
