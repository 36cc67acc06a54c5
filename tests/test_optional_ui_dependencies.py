"""Regression tests for the optional Rich dependency.

Bootstrap commands, plain runs, error reporting and ``--verbose``
logging must all keep working when Rich is not importable.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from expense_report.cli import exit_codes
from expense_report.cli.app import cli, main
from expense_report.cli.console import console, escape_markup, get_rich_console
from expense_report.cli.log_setup import configure_logging


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_product_printed_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    write_input: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    path = write_input(["10", "20"])

    assert main(["--input", str(path), "--target", "30"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "200\n"


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert get_rich_console() is None
    console.print("plain message")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "plain message" in captured.err


def test_error_reported_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["expense-report", "--input", str(tmp_path / "nope.txt")])

    with pytest.raises(SystemExit) as exc_info:
        cli()

    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Unable to open file" in capsys.readouterr().err


def test_verbose_logging_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_configure_logging_does_not_stack_handlers() -> None:
    logger = configure_logging(verbose=True)
    configure_logging(verbose=True)
    assert len(logger.handlers) == 1


def test_quiet_run_attaches_no_handler() -> None:
    logger = configure_logging(verbose=False)
    assert logger.handlers == []


def test_escape_markup_passthrough_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setitem(sys.modules, "rich.markup", None)

    assert escape_markup("in[/x].txt") == "in[/x].txt"


def test_bracketed_error_reported_verbatim_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["expense-report", "--input", "in[/x].txt"])

    with pytest.raises(SystemExit) as exc_info:
        cli()

    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Unable to open file 'in[/x].txt'" in capsys.readouterr().err
