"""Tests for the Typer CLI (services wired to a fake runner)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dockhand_common import DockhandConfig, RuntimeCapabilities

from dockhand.cli import app
from dockhand.context import Services
from dockhand.services.probe import RuntimeProbe
from dockhand.services.terminal import TerminalResolver

from conftest import PS_ALL, PS_RUNNING, FakeRunner, failure, inspect_argv

cli = CliRunner()

SHOP_LABELS = json.dumps({
    "com.docker.compose.project": "shop",
    "com.docker.compose.service": "web",
    "com.docker.compose.project.config_files": "/srv/shop/compose.yml",
    "com.docker.compose.project.working_dir": "/srv/shop",
})


@pytest.fixture
def fake_services(config: DockhandConfig):
    """Patch every command module to use services backed by a FakeRunner."""
    runner = FakeRunner()
    services = Services(
        config=config,
        runner=runner,
        probe=RuntimeProbe(runner, config),
        terminals=TerminalResolver(config.terminals),
    )
    with patch("dockhand.commands.container.build_services", return_value=services), \
            patch("dockhand.commands.compose.build_services", return_value=services), \
            patch("dockhand.commands.runtime.build_services", return_value=services):
        yield services


class TestContainerCommands:
    def test_ls_json(self, fake_services: Services):
        fake_services.runner.responses.update({
            PS_ALL: "web,Up 2 hours\ndb,Exited (0) 3 days ago\n",
            inspect_argv("web"): SHOP_LABELS,
            inspect_argv("db"): "null",
        })
        result = cli.invoke(app, ["container", "ls", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data[0]["compose"]["project"] == "shop"
        assert data[0]["compose"]["workingDir"] == "/srv/shop"
        assert data[1] == {"name": "db", "status": "Exited (0) 3 days ago"}

    def test_ls_table(self, fake_services: Services):
        fake_services.runner.responses.update({
            PS_ALL: "web,Up 2 hours\n",
            inspect_argv("web"): SHOP_LABELS,
        })
        result = cli.invoke(app, ["container", "ls"])
        assert result.exit_code == 0, result.output
        assert "web" in result.output
        assert "shop" in result.output

    def test_ls_running(self, fake_services: Services):
        fake_services.runner.responses.update({
            PS_RUNNING: "web,Up 2 hours\n",
            inspect_argv("web"): SHOP_LABELS,
        })
        result = cli.invoke(app, ["container", "ls", "--running", "--json"])
        assert result.exit_code == 0, result.output
        assert [c["name"] for c in json.loads(result.output)] == ["web"]
        assert fake_services.runner.calls[0] == list(PS_RUNNING)

    def test_ls_empty(self, fake_services: Services):
        fake_services.runner.responses[PS_ALL] = ""
        result = cli.invoke(app, ["container", "ls"])
        assert result.exit_code == 0
        assert "No containers found" in result.output

    def test_ls_runtime_failure(self, fake_services: Services):
        fake_services.runner.responses[PS_ALL] = failure(PS_ALL, "Cannot connect to the Docker daemon")
        result = cli.invoke(app, ["container", "ls"])
        assert result.exit_code == 1
        assert "Cannot connect to the Docker daemon" in result.output

    def test_count(self, fake_services: Services):
        fake_services.runner.responses[PS_RUNNING] = "a,Up\nb,Up\n"
        result = cli.invoke(app, ["container", "count"])
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_restart(self, fake_services: Services):
        fake_services.runner.responses[("docker", "restart", "web")] = "web\n"
        result = cli.invoke(app, ["container", "restart", "web"])
        assert result.exit_code == 0, result.output
        assert "docker restart web" in result.output
        assert fake_services.runner.calls == [["docker", "restart", "web"]]

    def test_stop_failure(self, fake_services: Services):
        argv = ("docker", "stop", "ghost")
        fake_services.runner.responses[argv] = failure(argv, "No such container: ghost")
        result = cli.invoke(app, ["container", "stop", "ghost"])
        assert result.exit_code == 1
        assert "No such container: ghost" in result.output

    def test_exec_without_terminal(self, fake_services: Services):
        with patch("dockhand.services.terminal.shutil.which", return_value=None):
            result = cli.invoke(app, ["container", "exec", "web"])
        assert result.exit_code == 1
        assert "No valid terminal found" in result.output

    def test_logs_in_terminal(self, fake_services: Services):
        with patch("dockhand.services.terminal.shutil.which", side_effect=lambda n: "/usr/bin/kgx" if n == "kgx" else None):
            result = cli.invoke(app, ["container", "logs", "web"])
        assert result.exit_code == 0, result.output
        assert fake_services.runner.spawned[0][0] == "kgx"


class TestComposeCommands:
    def test_restart_resolves_project(self, fake_services: Services):
        compose_argv = (
            "docker", "compose",
            "-f", "/srv/shop/compose.yml",
            "--project-directory", "/srv/shop",
            "-p", "shop", "restart",
        )
        fake_services.runner.responses.update({
            PS_ALL: "web,Up 2 hours\n",
            inspect_argv("web"): SHOP_LABELS,
            compose_argv: "",
        })
        result = cli.invoke(app, ["compose", "restart", "web"])
        assert result.exit_code == 0, result.output
        assert fake_services.runner.calls[-1] == list(compose_argv)

    def test_not_a_compose_container(self, fake_services: Services):
        fake_services.runner.responses.update({PS_ALL: "solo,Up\n", inspect_argv("solo"): "null"})
        result = cli.invoke(app, ["compose", "stop", "solo"])
        assert result.exit_code == 1
        assert "not part of a compose project" in result.output

    def test_unknown_container(self, fake_services: Services):
        fake_services.runner.responses.update({PS_ALL: "solo,Up\n", inspect_argv("solo"): "null"})
        result = cli.invoke(app, ["compose", "stop", "ghost"])
        assert result.exit_code == 1
        assert "No container named 'ghost'" in result.output


class TestRuntimeCommands:
    def test_status(self, fake_services: Services):
        fake_services.runner.responses[("ps", "cax")] = "  812 ?  Ssl  1:12 dockerd\n"
        caps = RuntimeCapabilities(runtimes={"docker": True, "podman": False}, user_authorized=True)
        with patch.object(fake_services.probe, "snapshot", return_value=caps):
            result = cli.invoke(app, ["runtime", "status"])
        assert result.exit_code == 0, result.output
        assert "docker binary" in result.output
        assert "dockerd running" in result.output

    def test_terminals(self, fake_services: Services):
        with patch("dockhand.services.terminal.shutil.which", return_value=None):
            result = cli.invoke(app, ["runtime", "terminals"])
        assert result.exit_code == 0
        assert "No terminal emulator found" in result.output


class TestActions:
    def test_lists_all_labels(self):
        result = cli.invoke(app, ["actions"])
        assert result.exit_code == 0
        assert "Start (compose)" in result.output
        assert "Logs" in result.output
