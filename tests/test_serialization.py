import json
from decimal import Decimal

from splitwise_csv import Entry, UserEntry, dump_entries_json, load_entries_json

ENTRY = Entry(
    group_id="g1",
    date="2024-01-02",
    cost=Decimal("12.50"),
    currency="USD",
    category_id="c9",
    description="Lunch",
    details="",
    users=(
        UserEntry(user_id="u1", paid_share=Decimal("100"), owed_share=Decimal("33.33")),
        UserEntry(user_id="u2", paid_share=Decimal("0"), owed_share=Decimal("66.67")),
    ),
)


def test_dump_writes_decimals_as_strings():
    payload = json.loads(dump_entries_json([ENTRY]))

    assert payload == [
        {
            "group_id": "g1",
            "date": "2024-01-02",
            "cost": "12.50",
            "currency": "USD",
            "category_id": "c9",
            "description": "Lunch",
            "details": "",
            "users": [
                {"user_id": "u1", "paid_share": "100", "owed_share": "33.33"},
                {"user_id": "u2", "paid_share": "0", "owed_share": "66.67"},
            ],
        }
    ]


def test_load_restores_entries():
    assert load_entries_json(dump_entries_json([ENTRY], indent=None)) == [ENTRY]


def test_load_accepts_json_numbers():
    data = json.dumps(
        [
            {
                "group_id": "g1",
                "date": "2024-01-02",
                "cost": 12.5,
                "currency": "USD",
                "category_id": "c9",
                "description": "Lunch",
                "details": "",
                "users": [
                    {"user_id": "u1", "paid_share": 100, "owed_share": 33.33},
                    {"user_id": "u2", "paid_share": 0, "owed_share": 66.67},
                ],
            }
        ]
    )

    (entry,) = load_entries_json(data)

    assert entry == ENTRY
    assert isinstance(entry.users, tuple)
