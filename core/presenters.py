"""
Presenter backends able to show a blocking information dialog.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QMessageBox

from core.display import display_available
from shared.errors import EnvironmentUnavailable
from infobox_launcher.infobox_launcher import logger as app_logger

_LOGGER = app_logger.get_logger()


class Presenter(ABC):
    """Shows ``message`` in a modal dialog titled ``title`` and waits for dismissal."""

    @abstractmethod
    def show_info(self, message: str, title: str) -> None:
        raise NotImplementedError


class MessageBoxPresenter(Presenter):
    """Native Qt message box with the information icon and an OK button."""

    def __init__(self, *, display_check: Callable[[], bool] = display_available) -> None:
        self._display_check = display_check
        self._app: Optional[QApplication] = None

    def show_info(self, message: str, title: str) -> None:
        # Qt aborts the interpreter when no platform plugin can start, so the
        # check must run before any QApplication exists.
        if not self._display_check():
            raise EnvironmentUnavailable("No display available to show the dialog.")

        self._ensure_application()
        box = QMessageBox(QMessageBox.Icon.Information, title, message, QMessageBox.StandardButton.Ok)
        box.setTextFormat(Qt.TextFormat.PlainText)
        _LOGGER.debug("Showing message box titled {!r}", title)
        box.exec()
        _LOGGER.debug("Message box dismissed.")

    def _ensure_application(self) -> None:
        if QApplication.instance() is not None:
            return
        # Held for the presenter lifetime; Qt needs the instance alive while the box runs.
        self._app = QApplication([sys.argv[0] if sys.argv else "infobox"])


class ConsolePresenter(Presenter):
    """
    Terminal rendition of the dialog. The box is drawn on ``output`` (stderr
    by default) and the call blocks until a line, or EOF, is read from
    ``input_stream``.
    """

    prompt = "[ OK ] Press Enter to dismiss"

    def __init__(self, output: Optional[TextIO] = None, input_stream: Optional[TextIO] = None) -> None:
        self._output = output
        self._input = input_stream

    def show_info(self, message: str, title: str) -> None:
        output = self._output or sys.stderr
        input_stream = self._input or sys.stdin
        if output is None or input_stream is None:
            raise EnvironmentUnavailable("No terminal attached to show the dialog.")

        output.write(render_box(message, title, footer=self.prompt))
        output.flush()
        input_stream.readline()


class HeadlessPresenter(Presenter):
    """Records requested dialogs without displaying anything."""

    def __init__(self) -> None:
        self.shown: List[Tuple[str, str]] = []

    def show_info(self, message: str, title: str) -> None:
        _LOGGER.debug("Headless presenter recorded dialog {!r}", title)
        self.shown.append((message, title))


def render_box(message: str, title: str, *, footer: str = "") -> str:
    """Draw a plain-text framed box: title row, message lines, optional footer."""
    body = message.splitlines() or [""]
    rows = [f"(i) {title}", *body]
    if footer:
        rows.append(footer)
    width = max(len(row) for row in rows)
    border = "+" + "-" * (width + 2) + "+"

    lines = [border, f"| {rows[0].ljust(width)} |", border]
    lines.extend(f"| {row.ljust(width)} |" for row in body)
    if footer:
        lines.append(border)
        lines.append(f"| {footer.ljust(width)} |")
    lines.append(border)
    return "\n".join(lines) + "\n"


PRESENTERS: Dict[str, Callable[[], Presenter]] = {
    "qt": MessageBoxPresenter,
    "console": ConsolePresenter,
    "headless": HeadlessPresenter,
}


def choose_presenter(name: str) -> Presenter:
    """Return a new presenter for the backend ``name``."""
    try:
        factory = PRESENTERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown presenter backend: {name!r}") from None
    return factory()
