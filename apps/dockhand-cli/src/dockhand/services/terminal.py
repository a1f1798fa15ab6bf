"""Terminal emulator detection for interactive sessions."""

from __future__ import annotations

import shutil
from typing import Sequence

from dockhand_common import TERMINALS

# argv prefix that runs a shell script inside each terminal
_LAUNCHERS: dict[str, list[str]] = {
    "kgx": ["kgx", "--", "sh", "-c"],
    "ptyxis": ["ptyxis", "--", "sh", "-c"],
    "gnome-terminal": ["gnome-terminal", "--", "sh", "-c"],
    "x-terminal-emulator": ["x-terminal-emulator", "-e", "sh", "-c"],
}


class TerminalResolver:
    """Finds the first available terminal in a fixed preference order.

    Nothing is cached: every call does fresh PATH lookups.
    """

    def __init__(self, preference: Sequence[str] = TERMINALS):
        unknown = [t for t in preference if t not in _LAUNCHERS]
        if unknown:
            raise ValueError(f"Unsupported terminal(s): {', '.join(unknown)}")
        self.preference = tuple(preference)

    def resolve(self) -> dict[str, bool]:
        return {terminal: shutil.which(terminal) is not None for terminal in self.preference}

    def pick(self) -> str | None:
        for terminal, available in self.resolve().items():
            if available:
                return terminal
        return None

    @staticmethod
    def launcher(terminal: str) -> list[str]:
        return list(_LAUNCHERS[terminal])
