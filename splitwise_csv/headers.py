"""Header row resolution: column names to 0-based positions.

Column names are matched exactly (case-sensitive). Seven fixed columns are
always required:

``group_id, date, cost, currency, category_id, description, details``

Participants occupy up to ten slots (``0..9``), each contributing three
columns named ``users__<slot>__user_id``, ``users__<slot>__paid_share`` and
``users__<slot>__owed_share``. A slot exists as soon as any of its three
names appears; once it exists all three are required. Slots need not be
contiguous.

Column order in the file is irrelevant and unknown columns are ignored. When a
name appears more than once, the last occurrence wins.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from .errors import MissingHeaderError
from .logging_setup import get_logger
from .models import ColumnMap, UserColumnSet

MAX_USER_SLOTS: int = 10

# (ColumnMap attribute, header name), in validation order.
FIXED_HEADERS: tuple[tuple[str, str], ...] = (
    ("group_id", "group_id"),
    ("date", "date"),
    ("cost", "cost"),
    ("currency", "currency"),
    ("category_id", "category_id"),
    ("description", "description"),
    ("details", "details"),
)

# (UserColumnSet attribute, header template), in validation order.
USER_HEADER_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("user_id", "users__{slot}__user_id"),
    ("paid_share", "users__{slot}__paid_share"),
    ("owed_share", "users__{slot}__owed_share"),
)


def user_header(template: str, slot: int) -> str:
    return template.format(slot=slot)


_FIXED_BY_NAME = MappingProxyType({name: field for field, name in FIXED_HEADERS})

# Header name -> (slot, UserColumnSet attribute) for every slot.
_USER_BY_NAME = MappingProxyType(
    {
        user_header(template, slot): (slot, field)
        for slot in range(MAX_USER_SLOTS)
        for field, template in USER_HEADER_TEMPLATES
    }
)

_logger = get_logger("splitwise_csv.headers")


def resolve_columns(header_row: Sequence[str]) -> ColumnMap:
    """Map the header row to a validated :class:`ColumnMap`.

    Raises
    ------
    MissingHeaderError
        For the first required name that is absent, checking the fixed
        columns first and then each existing slot in ascending order
        (``user_id``, ``paid_share``, ``owed_share``).
    """

    fixed: dict[str, int] = {}
    users: dict[int, dict[str, int]] = {}

    for pos, name in enumerate(header_row):
        field = _FIXED_BY_NAME.get(name)
        if field is not None:
            fixed[field] = pos
            continue
        user_key = _USER_BY_NAME.get(name)
        if user_key is not None:
            slot, user_field = user_key
            users.setdefault(slot, {})[user_field] = pos

    for field, name in FIXED_HEADERS:
        if field not in fixed:
            raise MissingHeaderError(name)

    user_sets: dict[int, UserColumnSet] = {}
    for slot in sorted(users):
        found = users[slot]
        for field, template in USER_HEADER_TEMPLATES:
            if field not in found:
                raise MissingHeaderError(user_header(template, slot))
        user_sets[slot] = UserColumnSet(**found)

    column_map = ColumnMap(users=MappingProxyType(user_sets), **fixed)
    _logger.debug(
        "Resolved %d fixed columns and %d user slot(s): %s",
        len(fixed),
        len(user_sets),
        sorted(user_sets),
    )
    return column_map


__all__ = [
    "FIXED_HEADERS",
    "MAX_USER_SLOTS",
    "USER_HEADER_TEMPLATES",
    "resolve_columns",
    "user_header",
]
