"""Read expense CSV exports from a path, an open stream or a string.

The pipeline is the same for every entry point:

1. The first non-blank record is the header row;
   :func:`~splitwise_csv.headers.resolve_columns` maps it to column positions.
   An empty input has an empty header row and therefore fails on the first
   required column.
2. Remaining records are pulled lazily from :func:`csv.reader`. Blank lines
   are skipped. Every other record must have exactly as many fields as the
   header, else :class:`~splitwise_csv.errors.FieldCountError` is raised with
   the physical line number.
3. :func:`~splitwise_csv.decoder.decode_rows` turns the records into entries.

Parsing follows RFC 4180 via the stdlib :mod:`csv` module (quoted fields with
embedded commas and newlines, doubled quotes).
"""

from __future__ import annotations

import csv
from collections.abc import Iterator
from io import StringIO
from os import PathLike
from pathlib import Path
from typing import Any, TextIO

from .decoder import decode_rows
from .errors import FieldCountError
from .headers import resolve_columns
from .logging_setup import get_logger
from .models import Entry

_logger = get_logger("splitwise_csv.reader")


def _iter_records(reader: Any, width: int) -> Iterator[list[str]]:
    """Yield non-blank records, enforcing ``width`` fields per record.

    A width mismatch reports the physical line the record starts on, which
    differs from ``reader.line_num`` (the line it ends on) when quoted fields
    span several lines.
    """

    while True:
        start_line = reader.line_num + 1
        record = next(reader, None)
        if record is None:
            return
        if not record:
            continue
        if len(record) != width:
            raise FieldCountError(start_line, width, len(record))
        yield record


def read_expenses_from_file(file: TextIO) -> list[Entry]:
    """Read every entry from an open text stream.

    The stream should be opened with ``newline=""`` so quoted fields keep
    their embedded line breaks. The caller owns (and closes) ``file``.
    """

    reader = csv.reader(file)
    header: list[str] = []
    for record in reader:
        if record:
            header = record
            break
    else:
        _logger.warning("CSV input is empty; no header row found")
    columns = resolve_columns(header)
    return decode_rows(columns, _iter_records(reader, len(header)))


def read_expenses_from_text(csv_text: str) -> list[Entry]:
    """Read every entry from CSV text held in memory."""

    with StringIO(csv_text, newline="") as f:
        return read_expenses_from_file(f)


def read_expenses(path: str | PathLike[str], *, encoding: str = "utf-8") -> list[Entry]:
    """Read every entry from the CSV file at ``path``.

    Raises
    ------
    OSError
        When the file cannot be opened or read (e.g. ``FileNotFoundError``).
    MissingHeaderError
        When a required column is absent from the header row.
    FieldCountError
        When a record's width differs from the header's (no row context).
    RowDecodeError
        When a data row has an invalid number or share totals other than 100.
    """

    p = Path(path)
    with p.open(encoding=encoding, newline="") as f:
        entries = read_expenses_from_file(f)
    _logger.debug("Read %d entries from %s", len(entries), p)
    return entries


__all__ = ["read_expenses", "read_expenses_from_file", "read_expenses_from_text"]
