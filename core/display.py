"""
Detection of a windowing subsystem able to host a Qt dialog.
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional

_ALWAYS_DISPLAY_PLATFORMS = ("win32", "cygwin", "darwin")
_VIRTUAL_QPA_PLATFORMS = {"offscreen", "minimal", "vnc", "eglfs", "linuxfb"}


def display_available(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> bool:
    """
    Report whether a dialog can be shown in the current session.

    Windows and macOS always provide a window server to desktop processes.
    Elsewhere an X11 or Wayland display, or a virtual Qt platform plugin,
    has to be configured.
    """
    env = os.environ if environ is None else environ
    platform = platform or sys.platform

    if platform.startswith(_ALWAYS_DISPLAY_PLATFORMS):
        return True
    if env.get("DISPLAY") or env.get("WAYLAND_DISPLAY"):
        return True
    qpa = (env.get("QT_QPA_PLATFORM") or "").split(":", 1)[0].strip().lower()
    return qpa in _VIRTUAL_QPA_PLATFORMS
