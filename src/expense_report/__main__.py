"""Allow ``python -m expense_report`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m expense_report`` behaves identically to the
``expense-report`` console script.
"""

from __future__ import annotations

from expense_report.cli.app import cli

if __name__ == "__main__":
    cli()
