"""Period keys shared by the bucketing functions"""

import re
from datetime import date, timedelta

from cashpilot.domain.exceptions import InvalidDateError
from cashpilot.utils.date_utils import parse_date

_WEEK_KEY = re.compile(r"^(\d{4})-W(\d{1,2})$")
_YEAR_KEY = re.compile(r"^\d{4}$")


def get_iso_week(value: str | date) -> str:
    """
    ISO week key (YYYY-WNN) for a date.

    Weeks run Monday-Sunday and belong to the year holding their Thursday,
    so 2025-12-30 falls in 2026-W01.
    """
    day = parse_date(value)
    thursday = day + timedelta(days=3 - day.weekday())
    week_year = thursday.year
    past_days = (thursday - date(week_year, 1, 1)).days
    week_nr = past_days // 7 + 1
    return f"{week_year}-W{week_nr:02d}"


def get_year(value: str | date) -> str:
    """Calendar year key (YYYY) for a date"""
    return f"{parse_date(value).year:04d}"


def parse_date_from_key(key: str) -> date:
    """
    Approximate date for a week key, a year key or a plain date string.

    Week keys resolve to the Monday of that ISO week, year keys to Jan 1.
    """
    if not isinstance(key, str):
        raise InvalidDateError(key)

    week_match = _WEEK_KEY.match(key)
    if week_match:
        year, week = int(week_match.group(1)), int(week_match.group(2))
        # Week 1 is the week holding Jan 4
        try:
            jan4 = date(year, 1, 4)
        except ValueError as exc:
            raise InvalidDateError(key) from exc
        week1_monday = jan4 - timedelta(days=jan4.weekday())
        return week1_monday + timedelta(days=(week - 1) * 7)

    if _YEAR_KEY.match(key):
        try:
            return date(int(key), 1, 1)
        except ValueError as exc:
            raise InvalidDateError(key) from exc

    return parse_date(key)


def get_months_elapsed(start_key: str, current_key: str) -> int:
    """Calendar months between two period keys of any supported shape"""
    start = parse_date_from_key(start_key)
    current = parse_date_from_key(current_key)
    return (current.year - start.year) * 12 + (current.month - start.month)
