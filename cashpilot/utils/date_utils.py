"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from typing import List

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from cashpilot.domain.exceptions import InvalidDateError


def parse_date(value: str | date) -> date:
    """Parse an ISO date (or timestamp) string into a calendar date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc


def format_date_key(day: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD"""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def month_starts(start: date, count: int) -> List[date]:
    """First day of `count` successive months, beginning with start's month"""
    first = start.replace(day=1)
    return [first + relativedelta(months=i) for i in range(count)]
