"""Per-period cash in / cash out totals for bar charts"""

import math
from datetime import date
from typing import Dict, Iterable, List, Literal, Optional

from cashpilot.domain.events import expand_cash_events
from cashpilot.domain.models import CashFlowPeriod, TransactionForScoring

PeriodType = Literal["week", "month"]

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def get_period_label(day: date, period_type: PeriodType) -> str:
    """
    Bar-chart label for a date: "Jan 2024" for months, "Week N" for weeks.

    Week numbers count from Jan 1 offset by its weekday (Sunday = 0). This
    is not ISO numbering, so labels can disagree with get_iso_week.
    """
    if period_type == "month":
        return f"{_MONTH_ABBR[day.month - 1]} {day.year}"

    start_of_year = date(day.year, 1, 1)
    past_days = (day - start_of_year).days
    start_weekday = (start_of_year.weekday() + 1) % 7
    week_number = math.ceil((past_days + start_weekday + 1) / 7)
    return f"Week {week_number}"


def aggregate_cash_flow_by_period(
    transactions: Optional[Iterable[TransactionForScoring]],
    period_type: PeriodType,
) -> List[CashFlowPeriod]:
    """
    Sum cash in and cash out separately per week or month.

    Only legs with a positive amount and a date count. Periods come out in
    the order they are first reached walking the events by date.
    """
    events = expand_cash_events(transactions, positive_only=True)
    if not events:
        return []

    events.sort(key=lambda e: e.date)

    totals: Dict[str, List[float]] = {}
    for event in events:
        label = get_period_label(event.date, period_type)
        bucket = totals.setdefault(label, [0, 0])
        if event.amount > 0:
            bucket[0] += event.amount
        else:
            bucket[1] -= event.amount

    return [
        CashFlowPeriod(period=label, cash_in=cash_in, cash_out=cash_out, net=cash_in - cash_out)
        for label, (cash_in, cash_out) in totals.items()
    ]
