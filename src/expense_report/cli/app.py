"""CLI application entry point for expense-report.

This module is the **sole error boundary** for the entire application.
It catches :class:`~expense_report.exceptions.ExpenseReportError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the search is delegated to the core
  service, file access to the infrastructure layer.
* The product is the only thing ever written to stdout.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from expense_report.cli import exit_codes
from expense_report.cli.console import console, escape_markup
from expense_report.cli.log_setup import configure_logging
from expense_report.config import (
    DEFAULT_INPUT_PATH,
    DEFAULT_TARGET,
    INT64_MAX,
    INT64_MIN,
    Parameters,
    in_int64_range,
)
from expense_report.exceptions import ExpenseReportError
from expense_report.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _int64(text: str) -> int:
    """``argparse`` type converting *text* to a signed 64-bit integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if not in_int64_range(value):
        raise argparse.ArgumentTypeError(
            f"{value} is outside {INT64_MIN}..{INT64_MAX}"
        )
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="expense-report",
        description=(
            "Find the two expense report entries that sum to a target "
            "and print their product."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--input",
        default=str(DEFAULT_INPUT_PATH),
        metavar="PATH",
        help="path to read entries from (default: %(default)s)",
    )
    parser.add_argument(
        "--target",
        type=_int64,
        default=DEFAULT_TARGET,
        metavar="N",
        help="sum the two entries must reach (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log decoding and search progress to stderr",
    )
    return parser


def _parse_args(
    argv: list[str] | None,
) -> tuple[argparse.Namespace, Parameters]:
    """Parse *argv* into the raw namespace and the run's :class:`Parameters`."""
    args = _build_parser().parse_args(argv)
    return args, Parameters.from_namespace(args)


def parse_parameters(argv: list[str] | None = None) -> Parameters:
    """Parse *argv* into :class:`Parameters`."""
    _, parameters = _parse_args(argv)
    return parameters


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the expense-report CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from expense_report.core.report_service import ReportService
    from expense_report.infra.file_source import FileLineSource

    args, parameters = _parse_args(argv)
    configure_logging(args.verbose)

    service = ReportService(FileLineSource())
    entries = service.find_entries(parameters)

    print(entries.product)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ExpenseReportError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
