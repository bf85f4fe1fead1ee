"""JSON representation of decoded entries.

Entries are dumped through a pydantic ``TypeAdapter`` so the nested
dataclasses round-trip without hand-written converters. Decimals are written
as JSON strings (``"87.5"``) to keep their exact value; on load, strings,
integers and floats are all accepted.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import TypeAdapter

from .models import Entry

_ENTRIES_ADAPTER: TypeAdapter[list[Entry]] = TypeAdapter(list[Entry])


def dump_entries_json(entries: Sequence[Entry], *, indent: int | None = 2) -> str:
    return _ENTRIES_ADAPTER.dump_json(list(entries), indent=indent).decode("utf-8")


def load_entries_json(data: str | bytes) -> list[Entry]:
    """Validate JSON produced by :func:`dump_entries_json` back into entries."""

    return _ENTRIES_ADAPTER.validate_json(data)


__all__ = ["dump_entries_json", "load_entries_json"]
