"""
Environment-backed configuration for the InfoBox launcher.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from core.presenters import PRESENTERS
from infobox_launcher.infobox_launcher.logger import DEFAULT_CONSOLE_LEVEL

_PREFIX = "INFOBOX_"
_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_BACKEND = "qt"


@dataclass(eq=True)
class LauncherSettings:
    backend: str = DEFAULT_BACKEND
    print_diagnostic: bool = True
    log_level: str = DEFAULT_CONSOLE_LEVEL
    log_path: Optional[Path] = None


class LauncherSettingsManager:
    """
    Reads INFOBOX_* variables and falls back to defaults on invalid data.

    Problems are collected in ``warnings`` rather than logged directly since
    settings are read before logging is configured.
    """

    def __init__(self, *, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ
        self.warnings: list[str] = []

    def read_settings(self) -> LauncherSettings:
        self.warnings = []
        log_path = self._read("LOG_PATH")
        return LauncherSettings(
            backend=self._read_backend(),
            print_diagnostic=self._read_bool("DIAGNOSTIC", True),
            log_level=self._read_log_level(),
            log_path=Path(log_path).expanduser() if log_path else None,
        )

    def _read(self, name: str) -> Optional[str]:
        raw = self._environ.get(_PREFIX + name)
        if raw is None:
            return None
        value = raw.strip()
        return value or None

    def _read_backend(self) -> str:
        raw = self._read("BACKEND")
        if raw is None:
            return DEFAULT_BACKEND
        value = raw.lower()
        if value not in PRESENTERS:
            self.warnings.append(
                f"Unknown backend {raw!r} in {_PREFIX}BACKEND. Using {DEFAULT_BACKEND!r}."
            )
            return DEFAULT_BACKEND
        return value

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = self._read(name)
        if raw is None:
            return default
        value = raw.lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        self.warnings.append(f"{_PREFIX}{name} has unexpected value {raw!r}. Using {default}.")
        return default

    def _read_log_level(self) -> str:
        raw = self._read("LOG_LEVEL")
        if raw is None:
            return DEFAULT_CONSOLE_LEVEL
        value = raw.upper()
        if value not in _LOG_LEVELS:
            self.warnings.append(
                f"Unknown log level {raw!r} in {_PREFIX}LOG_LEVEL. Using {DEFAULT_CONSOLE_LEVEL}."
            )
            return DEFAULT_CONSOLE_LEVEL
        return value
