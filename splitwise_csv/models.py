"""Data models for expense CSV exports.

Two groups of types live here:

- Column maps (:class:`UserColumnSet`, :class:`ColumnMap`): 0-based column
  positions resolved from the header row, built once per read and never
  mutated afterwards.
- Entries (:class:`UserEntry`, :class:`Entry`): one validated expense row and
  the per-participant shares it carries.

All models are frozen ``dataclass`` instances so they compare by value and can
be shared freely between callers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal

# ---------------------------------------------------------------------------
# Column maps
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class UserColumnSet:
    """Column positions for one participant slot."""

    user_id: int
    paid_share: int
    owed_share: int


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Resolved 0-based positions of every column the decoder reads.

    ``users`` is sparse: keys are slot indexes (0..9) that appeared in the
    header, so slot 1 may exist without slot 0.
    """

    group_id: int
    date: int
    cost: int
    currency: int
    category_id: int
    description: int
    details: int
    users: Mapping[int, UserColumnSet]

    def iter_users(self) -> Iterator[tuple[int, UserColumnSet]]:
        """Yield ``(slot, columns)`` pairs in ascending slot order."""

        for slot in sorted(self.users):
            yield slot, self.users[slot]


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class UserEntry:
    """One participant's stake in an expense, in percentage points."""

    user_id: str
    paid_share: Decimal
    owed_share: Decimal


@dataclass(frozen=True, slots=True)
class Entry:
    """A single decoded expense row.

    ``date`` is kept as exported. ``users`` follows ascending slot order and
    its paid and owed shares each add up to exactly 100.
    """

    group_id: str
    date: str
    cost: Decimal
    currency: str
    category_id: str
    description: str
    details: str
    users: tuple[UserEntry, ...] = ()


__all__ = ["ColumnMap", "Entry", "UserColumnSet", "UserEntry"]
