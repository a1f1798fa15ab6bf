"""Custom exceptions for the dockhand CLI."""

from __future__ import annotations


class DockhandError(Exception):
    """Base exception for all dockhand operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class ProcessError(DockhandError):
    """An external command could not be run to a successful end."""

    def __init__(self, message: str, *, command: str, exit_code: int = 1):
        super().__init__(message, exit_code=exit_code)
        self.command = command


class SpawnError(ProcessError):
    """The external program could not be launched."""


class NonZeroExitError(ProcessError):
    """The external program ran but reported failure."""

    def __init__(self, message: str, *, command: str, returncode: int, stderr: str = ""):
        super().__init__(message, command=command)
        self.returncode = returncode
        self.stderr = stderr


class CommandCancelledError(ProcessError):
    """The caller abandoned the command; the child was killed."""


class CommandTimeoutError(ProcessError):
    """The command did not finish within the configured timeout."""


class ParseError(DockhandError):
    """Runtime CLI output did not have the expected shape."""


class ListingParseError(ParseError):
    """A container listing line could not be split into name and status."""


class LabelParseError(ParseError):
    """Inspect output was not a JSON label object."""


class InvalidActionError(DockhandError):
    """Unknown or malformed lifecycle action."""


class ContainerNotFoundError(DockhandError):
    """No container found matching criteria."""


class RuntimeNotFoundError(DockhandError):
    """No usable container runtime on this host."""
