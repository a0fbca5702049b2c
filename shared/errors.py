"""
Error taxonomy shared by the launcher and its presenters.
"""

from __future__ import annotations


class InfoBoxError(Exception):
    """Base class for fatal launcher failures. Carries the process exit code."""

    exit_code: int = 1


class MissingArgument(InfoBoxError, IndexError):
    """Raised when fewer than the two required positional arguments are supplied."""

    exit_code = 2

    def __init__(self, name: str, position: int) -> None:
        super().__init__(f"Missing required argument <{name}> at position {position}.")
        self.name = name
        self.position = position


class EnvironmentUnavailable(InfoBoxError, RuntimeError):
    """Raised when no display or windowing subsystem can host the dialog."""

    exit_code = 3
