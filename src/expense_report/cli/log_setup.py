"""Logging configuration for the CLI.

Library modules only create loggers; handlers are attached here, and
only when the user asks for ``--verbose`` output.  Records go to stderr
through Rich when it is installed.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "expense_report"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    return RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False,
    )


def configure_logging(verbose: bool) -> logging.Logger:
    """Attach a stderr handler to the package logger when *verbose*.

    Calling this repeatedly does not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not verbose:
        return logger

    if not logger.handlers:
        logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG)
    return logger
