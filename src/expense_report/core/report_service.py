"""Core report service — composes decoding and the pair search.

This is the central service consumed by the CLI layer.  It depends on
a :class:`~expense_report.core.protocols.LineSourceOpener` injected at
construction time, keeping the core free of filesystem access.

Guarantees
----------
* The decoder is pulled lazily; a decode failure after the matching
  entry is never observed.
* A decode failure is only reported when no match was found.
* Only :class:`~expense_report.exceptions.ExpenseReportError`
  subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from expense_report.config import INT64_MAX, INT64_MIN, Parameters, in_int64_range
from expense_report.core.decoder import EntryDecoder
from expense_report.core.models import Entries
from expense_report.core.pair_finder import two_entries_that_sum_to
from expense_report.core.protocols import LineSourceOpener
from expense_report.exceptions import InvalidTargetError, NoEntriesFoundError

logger = logging.getLogger(__name__)


def process_lines(lines: Iterable[str], target: int) -> Entries:
    """Find the entries in *lines* that sum to *target*.

    Raises
    ------
    InvalidTargetError
        If *target* does not fit a signed 64-bit integer.
    EntryDecodeError
        If a line failed to decode before any match was found.
    NoEntriesFoundError
        If every line decoded and no pair sums to *target*.
    """
    if not in_int64_range(target):
        raise InvalidTargetError(
            f"Target {target} is out of range",
            hint=f"Use a value between {INT64_MIN} and {INT64_MAX}.",
        )

    decoder = EntryDecoder(lines)
    entries = two_entries_that_sum_to(decoder, target)

    if entries is not None:
        logger.debug(
            "Found %d + %d = %d at line %d",
            entries.entry1, entries.entry2, target, decoder.line_number,
        )
        return entries

    if decoder.error is not None:
        raise decoder.error

    raise NoEntriesFoundError(target)


class ReportService:
    """Stateless service that resolves a run's parameters to :class:`Entries`.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`LineSourceOpener` protocol.
    """

    def __init__(self, source: LineSourceOpener) -> None:
        self._source: LineSourceOpener = source

    def find_entries(self, parameters: Parameters) -> Entries:
        """Open ``parameters.input_path`` and search it for a pair.

        Raises
        ------
        InputOpenError
            If the input cannot be opened.
        EntryDecodeError
            If a line failed to decode before any match was found.
        NoEntriesFoundError
            If no pair sums to ``parameters.target``.
        """
        with self._source.open(parameters.input_path) as lines:
            return process_lines(lines, parameters.target)
