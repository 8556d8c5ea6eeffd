"""
Date parsing for the M-D-Y inspection date field.
"""

import re

from ..config import DATE_PATTERN
from ..models.date import Date

_DATE_RE = re.compile(DATE_PATTERN)


def parse_date(date_str: str) -> Date:
    """
    Parse a date field written as month-day-year, e.g. "05-17-2022".

    Only the shape is checked: both separators must be '-' and every part
    must be an integer. Calendar ranges are not validated, so "13-40-2022"
    parses to Date(day=40, month=13, year=2022).

    Args:
        date_str: Raw date field

    Returns:
        Parsed Date

    Raises:
        ValueError: If date string does not match M-D-Y
    """
    match = _DATE_RE.fullmatch(date_str)
    if match is None:
        raise ValueError(f"Cannot parse date: {date_str}")

    month, day, year = (int(part) for part in match.groups())
    return Date(day=day, month=month, year=year)
