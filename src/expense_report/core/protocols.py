"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the report service can run against files,
in-memory buffers, or any other line-oriented source.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol


class LineSourceOpener(Protocol):
    """Contract for backends that turn a path into a stream of lines.

    Any object that implements :meth:`open` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def open(self, path: Path) -> AbstractContextManager[Iterable[str]]:
        """Open *path* and yield its lines inside a context manager.

        Lines may keep their trailing line terminator; the decoder
        strips it.  The source is released when the context exits.

        Raises
        ------
        InputOpenError
            When *path* cannot be opened for reading.
        """
        ...  # pragma: no cover
