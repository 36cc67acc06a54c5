"""Infrastructure layer — operating-system integration.

Every raw ``OSError`` raised while opening input is caught here and
re-raised as an :class:`~expense_report.exceptions.ExpenseReportError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from expense_report.infra.file_source import FileLineSource

__all__: list[str] = ["FileLineSource"]
