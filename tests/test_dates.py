from datetime import date

import pytest

from skosifier.dates import parse_date


def test_valid_dates():
    assert parse_date("01/01/2020") == date(2020, 1, 1)
    assert parse_date("31/12/2020") == date(2020, 12, 31)
    assert parse_date("29/02/2024") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "text",
    [
        "31/02/2020",  # no such day
        "29/02/2023",
        "01/13/2020",
        "00/01/2020",
        "1/1/2020",  # two digits required
        "2020-01-01",
        "01/01/20",
        "01/01/2020x",
        " 01/01/2020",
        "",
    ],
)
def test_invalid_dates(text):
    assert parse_date(text) is None
