"""Decode raw data rows into validated :class:`~splitwise_csv.models.Entry` items.

Each row is read through a resolved :class:`~splitwise_csv.models.ColumnMap`:
string columns are taken verbatim, ``cost`` and every share are parsed as
:class:`~decimal.Decimal`, and the paid and owed shares of a row must each add
up to exactly 100. Decimal arithmetic keeps that comparison exact, so
``33.33 + 33.33 + 33.34`` is accepted and ``33.3 + 33.3 + 33.3`` is not.

Parsed numbers are bounded to at most ``MAX_INTEGER_DIGITS`` digits before the
decimal point and ``MAX_FRACTION_DIGITS`` after it. Within those bounds the
sum of ten shares always fits the precision of the summing context, so no
share total is ever rounded.

Decoding is all-or-nothing. The first failing row aborts the whole decode with
a :class:`~splitwise_csv.errors.RowDecodeError` naming its 1-based data row
number; no entries are returned for earlier rows.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from decimal import (
    Context,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from .errors import ExpenseCSVError, NumericParseError, RowDecodeError, ShareTotalError
from .headers import MAX_USER_SLOTS, USER_HEADER_TEMPLATES, user_header
from .logging_setup import get_logger
from .models import ColumnMap, Entry, UserEntry

_HUNDRED = Decimal(100)

MAX_INTEGER_DIGITS: int = 18
MAX_FRACTION_DIGITS: int = 18

# Enough digits for the sum of every slot's share at the bounds above.
_SUM_CONTEXT = Context(
    prec=MAX_INTEGER_DIGITS + MAX_FRACTION_DIGITS + len(str(MAX_USER_SLOTS)),
    traps=[InvalidOperation, Inexact, Overflow],
)

# Plain or exponent notation only: no separators, whitespace, NaN or Infinity.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_PAID_TEMPLATE = dict(USER_HEADER_TEMPLATES)["paid_share"]
_OWED_TEMPLATE = dict(USER_HEADER_TEMPLATES)["owed_share"]

_logger = get_logger("splitwise_csv.decoder")


def parse_decimal(raw: str, *, column: str) -> Decimal:
    """Parse ``raw`` as a bounded, finite decimal or raise :class:`NumericParseError`.

    Values with more than ``MAX_INTEGER_DIGITS`` integer digits or more than
    ``MAX_FRACTION_DIGITS`` fractional digits (after applying any exponent)
    are rejected, as is anything that is not plain or exponent notation.
    """

    if not _DECIMAL_RE.fullmatch(raw):
        raise NumericParseError(column, raw)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:  # pragma: no cover - regex admits only valid input
        raise NumericParseError(column, raw) from exc
    exponent = value.as_tuple().exponent
    if value.adjusted() >= MAX_INTEGER_DIGITS or -exponent > MAX_FRACTION_DIGITS:
        raise NumericParseError(column, raw)
    return value


def _add(total: Decimal, value: Decimal, *, column: str) -> Decimal:
    try:
        with localcontext(_SUM_CONTEXT):
            return total + value
    except DecimalException as exc:
        raise NumericParseError(column, str(value)) from exc


def decode_row(record: Sequence[str], columns: ColumnMap) -> Entry:
    """Decode one record, checking that paid and owed shares each total 100.

    Errors are raised unwrapped; :func:`decode_rows` adds the row number.
    """

    cost = parse_decimal(record[columns.cost], column="cost")

    users: list[UserEntry] = []
    total_paid = Decimal(0)
    total_owed = Decimal(0)
    for slot, user_cols in columns.iter_users():
        paid_column = user_header(_PAID_TEMPLATE, slot)
        owed_column = user_header(_OWED_TEMPLATE, slot)
        paid = parse_decimal(record[user_cols.paid_share], column=paid_column)
        owed = parse_decimal(record[user_cols.owed_share], column=owed_column)
        total_paid = _add(total_paid, paid, column=paid_column)
        total_owed = _add(total_owed, owed, column=owed_column)
        users.append(
            UserEntry(user_id=record[user_cols.user_id], paid_share=paid, owed_share=owed)
        )

    if total_paid != _HUNDRED:
        raise ShareTotalError("paid", total_paid)
    if total_owed != _HUNDRED:
        raise ShareTotalError("owed", total_owed)

    return Entry(
        group_id=record[columns.group_id],
        date=record[columns.date],
        cost=cost,
        currency=record[columns.currency],
        category_id=record[columns.category_id],
        description=record[columns.description],
        details=record[columns.details],
        users=tuple(users),
    )


def _iter_entries(columns: ColumnMap, rows: Iterable[Sequence[str]]) -> Iterator[Entry]:
    for row, record in enumerate(rows, start=1):
        try:
            yield decode_row(record, columns)
        except ExpenseCSVError as exc:
            raise RowDecodeError(row, exc) from exc


def decode_rows(columns: ColumnMap, rows: Iterable[Sequence[str]]) -> list[Entry]:
    """Decode every data row, in order, into a list of entries.

    ``rows`` is consumed lazily and only once. Errors raised while pulling a
    row from ``rows`` itself (for example a
    :class:`~splitwise_csv.errors.FieldCountError` from the reader) propagate
    without row context.

    Raises
    ------
    RowDecodeError
        For the first row with an unparseable number or a share total other
        than 100. ``exc.row`` is the 1-based data row number and
        ``exc.cause`` the underlying error.
    """

    entries = list(_iter_entries(columns, rows))
    _logger.debug("Decoded %d entries", len(entries))
    return entries


__all__ = [
    "MAX_FRACTION_DIGITS",
    "MAX_INTEGER_DIGITS",
    "decode_row",
    "decode_rows",
    "parse_decimal",
]
