"""
Shared representation of a single dialog invocation built from CLI arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import MissingArgument

TITLE_PREFIX = "InfoBox: "
ARGUMENT_NAMES = ("message", "title")


def compose_title(title: str) -> str:
    return TITLE_PREFIX + title


@dataclass(frozen=True, slots=True)
class DialogRequest:
    """
    Body text and title suffix of an information dialog. Content is passed
    through untouched, empty strings included.
    """

    message: str
    title: str

    @property
    def window_title(self) -> str:
        return compose_title(self.title)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "DialogRequest":
        """
        Build a request from positional arguments (program name excluded).

        Raises MissingArgument for the first absent parameter. Arguments past
        the second are ignored.
        """
        args = list(argv)
        for position, name in enumerate(ARGUMENT_NAMES):
            if position >= len(args):
                raise MissingArgument(name, position)
        return cls(message=args[0], title=args[1])
