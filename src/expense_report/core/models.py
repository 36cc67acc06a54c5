"""Domain models for expense-report.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Entries:
    """The two entries that sum to a target.

    Constructed exactly once, at the moment the pair finder declares a
    match.  ``entry1`` is the earlier entry whose remainder was
    recorded; ``entry2`` is the entry that completed the pair.
    """

    entry1: int
    """Entry seen first, recovered as ``target - entry2``."""

    entry2: int
    """Entry that completed the pair."""

    target: int
    """Sum both entries add up to."""

    def __post_init__(self) -> None:
        if self.entry1 + self.entry2 != self.target:
            raise ValueError(
                f"entries {self.entry1} and {self.entry2} "
                f"do not sum to {self.target}"
            )

    @property
    def product(self) -> int:
        """Product of the two entries, the puzzle answer."""
        return self.entry1 * self.entry2
