"""Run configuration: default values and the :class:`Parameters` object.

Defaults are plain module constants.  There is no process-wide mutable
state; each run builds its own frozen :class:`Parameters`.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_PATH: Path = Path("./day1.txt")
"""Input file read when ``--input`` is omitted."""

DEFAULT_TARGET: int = 2020
"""Sum the two entries must reach when ``--target`` is omitted."""

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Parameters:
    """Inputs for a single run."""

    input_path: Path = DEFAULT_INPUT_PATH
    """Path of the line-delimited integer file."""

    target: int = DEFAULT_TARGET
    """Sum the matched pair must add up to."""

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> Parameters:
        """Build parameters from parsed CLI arguments."""
        return cls(input_path=Path(args.input), target=int(args.target))


def in_int64_range(value: int) -> bool:
    """Return ``True`` when *value* fits a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX
