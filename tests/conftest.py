"""Shared pytest fixtures and configuration for the expense-report suite.

Guidelines
----------
* Core tests are pure — lists and ``io.StringIO`` stand in for files.
* Filesystem tests write only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any handlers ``--verbose`` attached during a test."""
    logger = logging.getLogger("expense_report")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing *lines* joined by ``\\n`` to a temp file."""

    def _write(lines: list[str], name: str = "day1.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
