"""
Entry point for the ``infobox`` command.

Usage: infobox <message> <title>
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from core.launcher import DialogLauncher
from core.presenters import Presenter, choose_presenter
from core.settings import LauncherSettingsManager
from shared.errors import InfoBoxError
from infobox_launcher.infobox_launcher import logger as app_logger


def main(argv: Optional[Sequence[str]] = None, *, presenter: Optional[Presenter] = None) -> int:
    """Show the dialog described by ``argv`` and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    manager = LauncherSettingsManager()
    settings = manager.read_settings()
    app_logger.configure(settings.log_path, level=settings.log_level, force=True)
    logger = app_logger.get_logger()
    for warning in manager.warnings:
        logger.warning(warning)

    launcher = DialogLauncher(
        presenter or choose_presenter(settings.backend),
        print_diagnostic=settings.print_diagnostic,
    )
    try:
        return launcher.run(args)
    except InfoBoxError as exc:
        logger.error("{} (exit code {})", exc, exc.exit_code)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
