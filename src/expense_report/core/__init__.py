"""Core / service layer — pure business logic.

Rules
-----
* No ``print()`` calls.
* No filesystem access; line sources arrive through protocols.
* No imports from ``cli`` or ``infra``.
"""

from expense_report.core.decoder import EntryDecoder, parse_entry
from expense_report.core.models import Entries
from expense_report.core.pair_finder import two_entries_that_sum_to
from expense_report.core.protocols import LineSourceOpener
from expense_report.core.report_service import ReportService, process_lines

__all__: list[str] = [
    "Entries",
    "EntryDecoder",
    "LineSourceOpener",
    "ReportService",
    "parse_entry",
    "process_lines",
    "two_entries_that_sum_to",
]
