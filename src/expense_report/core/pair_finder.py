"""Single-pass search for two entries that sum to a target.

Pure logic — no I/O, no side effects beyond pulling from the supplied
iterable.
"""

from __future__ import annotations

from collections.abc import Iterable

from expense_report.core.models import Entries


def two_entries_that_sum_to(entries: Iterable[int], target: int) -> Entries | None:
    """Return the first pair of *entries* summing to *target*.

    Each entry either completes a pair, when it is one of the remainders
    recorded so far, or records its own remainder ``target - entry`` for
    the entries that follow.  Pulling stops at the first match, so
    nothing past the completing entry is consumed.

    Returns ``None`` when *entries* is exhausted without a match.
    """
    remainders: set[int] = set()

    for entry in entries:
        remainder = target - entry
        if entry not in remainders:
            remainders.add(remainder)
        else:
            return Entries(remainder, entry, target)

    return None
