"""Line-to-integer decoding.

Turns any line-oriented source into a lazy stream of signed 64-bit
integers.  The decoder is pull-based: each call to ``next()`` reads
exactly one line.  The first malformed line or read failure stops the
stream and is kept on :attr:`EntryDecoder.error` for the caller to
inspect once it is done pulling.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from expense_report.config import INT64_MAX, INT64_MIN
from expense_report.exceptions import EntryDecodeError

logger = logging.getLogger(__name__)

_ASCII_DIGITS = "0123456789"

EMPTY_MESSAGE = "cannot parse integer from empty string"
INVALID_DIGIT_MESSAGE = "invalid digit found in string"
POS_OVERFLOW_MESSAGE = "number too large to fit in target type"
NEG_OVERFLOW_MESSAGE = "number too small to fit in target type"


def strip_line_ending(line: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n`` from *line*."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_entry(text: str) -> int:
    """Parse *text* as a signed 64-bit decimal integer.

    Only an optional sign followed by ASCII digits is accepted.  Unlike
    :func:`int`, surrounding whitespace and underscores are rejected.
    Characters are scanned left to right, so a bad character and an
    overflow are reported in the order they occur.

    Raises
    ------
    EntryDecodeError
        With the parser message describing why *text* was rejected.
    """
    if not text:
        raise EntryDecodeError(EMPTY_MESSAGE)

    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise EntryDecodeError(INVALID_DIGIT_MESSAGE)

    limit = -INT64_MIN if negative else INT64_MAX
    value = 0
    for char in digits:
        if char not in _ASCII_DIGITS:
            raise EntryDecodeError(INVALID_DIGIT_MESSAGE)
        value = value * 10 + _ASCII_DIGITS.index(char)
        if value > limit:
            raise EntryDecodeError(
                NEG_OVERFLOW_MESSAGE if negative else POS_OVERFLOW_MESSAGE
            )
    return -value if negative else value


class EntryDecoder(Iterator[int]):
    """Lazy iterator of integers decoded from *lines*.

    Parameters
    ----------
    lines:
        Any iterable of text lines — an open file, ``io.StringIO``,
        a list of strings.  Trailing line terminators are stripped.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.error: EntryDecodeError | None = None
        """First decode failure, or ``None`` while decoding succeeds."""
        self.exhausted: bool = False
        """``True`` once the source was drained or decoding failed."""
        self.line_number: int = 0
        """Number of lines pulled from the source so far."""

    def __iter__(self) -> EntryDecoder:
        return self

    def __next__(self) -> int:
        if self.exhausted:
            raise StopIteration

        try:
            line = next(self._lines)
        except StopIteration:
            self.exhausted = True
            raise
        except (OSError, UnicodeDecodeError) as exc:
            self._fail(str(exc), self.line_number + 1, exc)
            raise StopIteration from None

        self.line_number += 1
        try:
            return parse_entry(strip_line_ending(line))
        except EntryDecodeError as exc:
            self._fail(str(exc), self.line_number, None)
            raise StopIteration from None

    def _fail(self, message: str, line_number: int, cause: BaseException | None) -> None:
        error = EntryDecodeError(
            message,
            line_number=line_number,
            hint=f"Check line {line_number} of the input.",
        )
        error.__cause__ = cause
        self.error = error
        self.exhausted = True
        logger.debug("Decoding stopped at line %d: %s", line_number, message)
