from datetime import date

import pytest

from leavecalc.calendar import date_key, parse_date, predecessor, successor


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024-01-01", date(2024, 1, 1)),
        (" 2024-02-29\n", date(2024, 2, 29)),
        ("", None),
        ("   ", None),
        (None, None),
        ("2023-02-29", None),
        ("2024-13-01", None),
        ("20240101", None),
        ("2024-1-1", None),
        ("01.01.2024", None),
    ],
)
def test_parse_date(text, expected):
    assert parse_date(text) == expected


def test_date_key_is_iso():
    assert date_key(date(2024, 3, 5)) == "2024-03-05"


def test_successor_and_predecessor_cross_month_ends():
    assert successor(date(2024, 2, 28)) == date(2024, 2, 29)
    assert successor(date(2024, 12, 31)) == date(2025, 1, 1)
    assert predecessor(date(2024, 3, 1)) == date(2024, 2, 29)
    assert predecessor(successor(date(2024, 6, 15))) == date(2024, 6, 15)
