from __future__ import annotations

import pytest

from core.presenters import HeadlessPresenter

_INFOBOX_VARIABLES = ("INFOBOX_BACKEND", "INFOBOX_DIAGNOSTIC", "INFOBOX_LOG_LEVEL", "INFOBOX_LOG_PATH")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in _INFOBOX_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def headless():
    return HeadlessPresenter()
