"""Custom exception hierarchy for expense-report.

All exceptions that cross layer boundaries must inherit from
:class:`ExpenseReportError`.  Raw ``OSError``, ``UnicodeDecodeError``
and ``ValueError`` instances never propagate beyond the layer that
produced them — they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
ExpenseReportError
├── InputOpenError
├── EntryDecodeError
├── NoEntriesFoundError
└── InvalidTargetError
"""

from __future__ import annotations


class ExpenseReportError(Exception):
    """Base exception for all expense-report errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputOpenError(ExpenseReportError):
    """Raised when the input path cannot be opened for reading."""


class EntryDecodeError(ExpenseReportError):
    """Raised when a line cannot be parsed or the line source fails."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.line_number: int | None = line_number
        """1-based number of the offending line, when known."""


# --- Search ----------------------------------------------------------------

class NoEntriesFoundError(ExpenseReportError):
    """Raised when the whole input was decoded without finding a pair."""

    def __init__(self, target: int) -> None:
        super().__init__(f"Unable to find entries for target {target}")
        self.target: int = target


class InvalidTargetError(ExpenseReportError):
    """Raised when the target lies outside the signed 64-bit range."""
