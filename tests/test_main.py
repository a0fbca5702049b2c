from __future__ import annotations

import runpy

import pytest

from core.presenters import MessageBoxPresenter
from infobox_launcher import main as entry

IDENTITY_LINE = "core.launcher.DialogLauncher"


@pytest.mark.parametrize(
    "argv, window_title",
    [(["Hello", "Greeting"], "InfoBox: Greeting"), (["", ""], "InfoBox: ")],
)
def test_valid_invocation_exits_zero(capsys, headless, argv, window_title):
    assert entry.main(argv, presenter=headless) == 0
    assert headless.shown == [(argv[0], window_title)]
    assert capsys.readouterr().out == "\n\n\n" + IDENTITY_LINE + "\n"


@pytest.mark.parametrize("argv", [[], ["Hello"]])
def test_missing_arguments_exit_non_zero_without_dialog(capsys, headless, argv):
    assert entry.main(argv, presenter=headless) == 2
    assert headless.shown == []
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Missing required argument" in captured.err


def test_no_display_exits_non_zero(capsys):
    presenter = MessageBoxPresenter(display_check=lambda: False)
    assert entry.main(["Hello", "Greeting"], presenter=presenter) == 3
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No display available" in captured.err


def test_reads_process_arguments_by_default(monkeypatch, capsys, headless):
    monkeypatch.setattr("sys.argv", ["infobox", "from", "argv"])
    assert entry.main(presenter=headless) == 0
    assert headless.shown == [("from", "InfoBox: argv")]


def test_backend_selected_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("INFOBOX_BACKEND", "headless")
    monkeypatch.setenv("INFOBOX_DIAGNOSTIC", "0")
    assert entry.main(["Hello", "Greeting"]) == 0
    assert capsys.readouterr().out == ""


def test_invalid_setting_is_logged(monkeypatch, capsys, headless):
    monkeypatch.setenv("INFOBOX_BACKEND", "gtk")
    assert entry.main(["a", "b"], presenter=headless) == 0
    assert "Unknown backend 'gtk'" in capsys.readouterr().err


def test_log_file_receives_debug_records(monkeypatch, tmp_path, capsys, headless):
    log_path = tmp_path / "logs" / "infobox.log"
    monkeypatch.setenv("INFOBOX_LOG_PATH", str(log_path))
    assert entry.main(["Hello", "Greeting"], presenter=headless) == 0
    from infobox_launcher.infobox_launcher import logger as app_logger

    app_logger.configure(force=True)  # closes the file sink
    assert "InfoBox: Greeting" in log_path.read_text(encoding="utf-8")


def test_missing_stdout_still_exits_zero(monkeypatch, headless):
    monkeypatch.setattr("sys.stdout", None)
    assert entry.main(["Hello", "Greeting"], presenter=headless) == 0
    assert headless.shown == [("Hello", "InfoBox: Greeting")]


def test_module_run_exits_with_missing_argument_status(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["infobox"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("infobox_launcher.main", run_name="__main__")
    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""
