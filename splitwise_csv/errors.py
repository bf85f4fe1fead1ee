"""Exception hierarchy for reading expense CSV exports.

Every error raised by this package derives from :class:`ExpenseCSVError`,
which itself subclasses :class:`csv.Error` so that callers already surfacing
``csv.Error`` as a parse failure keep doing so. File-system failures are not
wrapped: ``OSError`` propagates unchanged from ``open``.

Row-level failures (bad numbers, share totals) reach the caller wrapped in a
:class:`RowDecodeError` carrying the 1-based data row number. A
:class:`FieldCountError` is the exception: it comes from the row-reading layer
and is raised as-is, without row context.
"""

from __future__ import annotations

import csv
from decimal import Decimal


class ExpenseCSVError(csv.Error):
    """Base class for all expense CSV errors."""


class MissingHeaderError(ExpenseCSVError):
    """A required column name was not found in the header row."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f'missing "{header}" header')


class FieldCountError(ExpenseCSVError):
    """A record does not have as many fields as the header row."""

    def __init__(self, line: int, expected: int, actual: int) -> None:
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(f"record on line {line}: wrong number of fields")


class NumericParseError(ExpenseCSVError):
    """A cost or share value is not a valid decimal number."""

    def __init__(self, column: str, value: str) -> None:
        self.column = column
        self.value = value
        super().__init__(f'could not parse "{value}" as a decimal number in column "{column}"')


class ShareTotalError(ExpenseCSVError):
    """The paid or owed shares of a row do not add up to exactly 100."""

    def __init__(self, kind: str, total: Decimal) -> None:
        self.kind = kind
        self.total = total
        super().__init__(f"total {kind} share is not 100 ({total:.6f})")


class RowDecodeError(ExpenseCSVError):
    """A data row failed to decode; wraps the underlying cause."""

    def __init__(self, row: int, cause: Exception) -> None:
        self.row = row
        self.cause = cause
        super().__init__(f"{cause}: error on row {row}")


__all__ = [
    "ExpenseCSVError",
    "FieldCountError",
    "MissingHeaderError",
    "NumericParseError",
    "RowDecodeError",
    "ShareTotalError",
]
