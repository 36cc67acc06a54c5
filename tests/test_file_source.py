"""Tests for the file line source (infra/file_source.py).

Files are written under ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from expense_report.core.models import Entries
from expense_report.core.report_service import process_lines
from expense_report.exceptions import EntryDecodeError, InputOpenError
from expense_report.infra.file_source import FileLineSource


class TestFileLineSource:
    def test_yields_lines_with_terminators(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(b"10\r\n20\n30")

        with FileLineSource().open(path) as lines:
            assert list(lines) == ["10\r\n", "20\n", "30"]

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.txt"

        with pytest.raises(InputOpenError) as exc_info:
            with FileLineSource().open(path):
                pass  # pragma: no cover

        assert f"Unable to open file '{path}'" == str(exc_info.value)
        assert exc_info.value.hint
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_open_failure(self, tmp_path: Path) -> None:
        with pytest.raises(InputOpenError):
            with FileLineSource().open(tmp_path):
                pass  # pragma: no cover

    def test_invalid_utf8_after_match_is_masked(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(b"10\n20\n\xff\xfe\n")

        with FileLineSource().open(path) as lines:
            assert process_lines(lines, 30) == Entries(10, 20, 30)

    def test_invalid_utf8_before_match_is_decode_error(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(b"10\n\xff\n20\n")

        with FileLineSource().open(path) as lines:
            with pytest.raises(EntryDecodeError, match="can't decode") as exc_info:
                process_lines(lines, 30)
        assert exc_info.value.line_number == 2
