"""expense-report — find the two expense entries that sum to a target.

Reads one integer per line, locates the first pair summing to the
target, and prints their product.
"""

from expense_report.version import __version__

__all__: list[str] = ["__version__"]
