"""Tests for terminal emulator detection."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from dockhand.services.terminal import TerminalResolver


def _which(*present: str):
    return lambda name: f"/usr/bin/{name}" if name in present else None


class TestTerminalResolver:
    def test_resolve_in_preference_order(self):
        with patch("dockhand.services.terminal.shutil.which", side_effect=_which("gnome-terminal")):
            availability = TerminalResolver().resolve()
        assert list(availability) == ["kgx", "ptyxis", "gnome-terminal", "x-terminal-emulator"]
        assert availability == {
            "kgx": False,
            "ptyxis": False,
            "gnome-terminal": True,
            "x-terminal-emulator": False,
        }

    def test_pick_first_available(self):
        with patch("dockhand.services.terminal.shutil.which", side_effect=_which("x-terminal-emulator", "ptyxis")):
            assert TerminalResolver().pick() == "ptyxis"

    def test_pick_none(self):
        with patch("dockhand.services.terminal.shutil.which", return_value=None):
            assert TerminalResolver().pick() is None

    def test_recomputed_each_call(self):
        resolver = TerminalResolver()
        with patch("dockhand.services.terminal.shutil.which", return_value=None):
            assert resolver.pick() is None
        with patch("dockhand.services.terminal.shutil.which", side_effect=_which("kgx")):
            assert resolver.pick() == "kgx"

    def test_custom_preference(self):
        with patch("dockhand.services.terminal.shutil.which", side_effect=_which("kgx", "gnome-terminal")):
            assert TerminalResolver(["gnome-terminal", "kgx"]).pick() == "gnome-terminal"

    def test_unknown_terminal_rejected(self):
        with pytest.raises(ValueError, match="xterm"):
            TerminalResolver(["xterm"])

    def test_launchers(self):
        assert TerminalResolver.launcher("kgx") == ["kgx", "--", "sh", "-c"]
        assert TerminalResolver.launcher("ptyxis") == ["ptyxis", "--", "sh", "-c"]
        assert TerminalResolver.launcher("gnome-terminal") == ["gnome-terminal", "--", "sh", "-c"]
        assert TerminalResolver.launcher("x-terminal-emulator") == ["x-terminal-emulator", "-e", "sh", "-c"]
