"""
Launcher turning two CLI arguments into a blocking information dialog.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from core.presenters import MessageBoxPresenter, Presenter
from shared.dialog_request import DialogRequest, compose_title
from infobox_launcher.infobox_launcher import logger as app_logger


class DialogLauncher:
    """
    Presents one dialog per ``run`` and then reports its own identity on
    ``output``. Holds no state between runs.
    """

    def __init__(
        self,
        presenter: Optional[Presenter] = None,
        *,
        output: Optional[TextIO] = None,
        print_diagnostic: bool = True,
    ) -> None:
        self.presenter = presenter or MessageBoxPresenter()
        self.print_diagnostic = print_diagnostic
        self._output = output
        self._logger = app_logger.get_logger()

    @classmethod
    def identity(cls) -> str:
        """Fully qualified name of the launcher class."""
        return f"{cls.__module__}.{cls.__qualname__}"

    def show_info(self, message: str, title: str) -> None:
        """Show ``message`` titled ``"InfoBox: " + title``; returns once dismissed."""
        self.presenter.show_info(message, compose_title(title))

    def run(self, argv: Sequence[str]) -> int:
        request = DialogRequest.from_argv(argv)
        self._logger.info("Presenting dialog {!r} via {}", request.window_title, type(self.presenter).__name__)
        self.show_info(request.message, request.title)
        if self.print_diagnostic:
            self._write_diagnostic()
        return 0

    def _write_diagnostic(self) -> None:
        output = self._output or sys.stdout
        if output is None:
            return
        output.write("\n\n\n" + self.identity() + "\n")
        output.flush()
