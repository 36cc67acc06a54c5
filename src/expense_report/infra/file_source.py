"""Infrastructure: the input file as a line source.

Rules
-----
* Opening failures surface as :class:`InputOpenError` naming the path.
* Lines are split on ``\\n`` only and decoded one at a time, so a bad
  byte is only reported when its own line is pulled.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from expense_report.exceptions import InputOpenError

logger = logging.getLogger(__name__)

INPUT_ENCODING = "utf-8"


class FileLineSource:
    """Open files for line-by-line reading.

    Satisfies :class:`~expense_report.core.protocols.LineSourceOpener`.
    """

    def __init__(self, encoding: str = INPUT_ENCODING) -> None:
        self._encoding = encoding

    @contextmanager
    def open(self, path: Path) -> Iterator[Iterable[str]]:
        """Yield the lines of the file at *path*, closing it on exit.

        Decoding errors are raised lazily, from the iteration that
        reaches the offending line.

        Raises
        ------
        InputOpenError
            When *path* cannot be opened for reading.
        """
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise InputOpenError(
                f"Unable to open file '{path}'",
                hint=exc.strerror or str(exc),
            ) from exc

        logger.debug("Reading entries from %s", path)
        with handle:
            yield self._decode_lines(handle)

    def _decode_lines(self, handle: BinaryIO) -> Iterator[str]:
        for raw in handle:
            yield raw.decode(self._encoding)
