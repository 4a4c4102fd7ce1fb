import re
from datetime import date

DATE_PATTERN = re.compile(r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})")


def parse_date(text: str) -> date | None:
    """
    Parse a date in the format DD/MM/YYYY.

    Returns None if the text does not have this exact format or does not
    denote a valid calendar date (e.g. "31/02/2020").
    """
    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        return None
    day, month, year = (int(match[part]) for part in ("day", "month", "year"))
    try:
        return date(year, month, day)
    except ValueError:
        return None
