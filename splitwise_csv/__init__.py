"""Public interface for the ``splitwise_csv`` package.

This module exposes the package's reader functions, models and errors as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .decoder import decode_rows
from .errors import (
    ExpenseCSVError,
    FieldCountError,
    MissingHeaderError,
    NumericParseError,
    RowDecodeError,
    ShareTotalError,
)
from .headers import resolve_columns
from .models import ColumnMap, Entry, UserColumnSet, UserEntry
from .reader import read_expenses, read_expenses_from_file, read_expenses_from_text
from .serialization import dump_entries_json, load_entries_json

__all__ = [
    # Reading
    "read_expenses",
    "read_expenses_from_file",
    "read_expenses_from_text",
    "resolve_columns",
    "decode_rows",
    # JSON
    "dump_entries_json",
    "load_entries_json",
    # Models
    "ColumnMap",
    "Entry",
    "UserColumnSet",
    "UserEntry",
    # Errors
    "ExpenseCSVError",
    "FieldCountError",
    "MissingHeaderError",
    "NumericParseError",
    "RowDecodeError",
    "ShareTotalError",
]
