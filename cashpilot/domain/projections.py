"""Forward balance projections seeded by the current balance"""

import logging
import math
from datetime import date, timedelta
from typing import Iterable, List, Optional

from cashpilot.config import settings
from cashpilot.domain.events import expand_cash_events
from cashpilot.domain.models import ChartDataPoint, TransactionForScoring
from cashpilot.utils.date_utils import format_date_key, generate_date_range, month_starts, parse_date

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30


def calculate_average_daily_cash_flow(transactions: Optional[Iterable[TransactionForScoring]]) -> float:
    """
    Average signed cash flow per day over the span of dated events.

    The span is at least one day, so a single busy day is not divided by 0.
    """
    events = expand_cash_events(transactions)
    if not events:
        return 0

    events.sort(key=lambda e: e.date)
    days = max(1, (events[-1].date - events[0].date).days)
    total = sum(e.amount for e in events)
    return total / days


def _daily_points(
    current_balance: float,
    start: date,
    count: int,
    daily_cash_flow: float,
    fixed_cost_deduction: float,
) -> List[ChartDataPoint]:
    points = []
    running_balance = current_balance
    days = generate_date_range(start, start + timedelta(days=count - 1))
    for i, day in enumerate(days):
        # Day 0 is the starting day, no flow added yet
        if i > 0:
            running_balance += daily_cash_flow
        points.append(
            ChartDataPoint(
                date=format_date_key(day),
                balance=running_balance,
                networth=running_balance - fixed_cost_deduction,
            )
        )
    return points


def _monthly_points(
    current_balance: float,
    start: date,
    count: int,
    daily_cash_flow: float,
    fixed_cost: float,
) -> List[ChartDataPoint]:
    points = []
    running_balance = current_balance
    for i, month_start in enumerate(month_starts(start, count)):
        if i > 0:
            running_balance += daily_cash_flow * DAYS_PER_MONTH
        points.append(
            ChartDataPoint(
                date=format_date_key(month_start),
                balance=running_balance,
                networth=running_balance - i * (fixed_cost or 0),
            )
        )
    return points


def generate_week_projection(
    current_balance: float,
    fixed_cost: float = 0,
    avg_daily_cash_flow: Optional[float] = None,
    today: Optional[date] = None,
) -> List[ChartDataPoint]:
    """
    Next 7 days at 1-day intervals.

    Every point deducts a single day of fixed cost (fixed_cost / 30),
    not an amount that grows with the day index.
    """
    return _daily_points(
        current_balance,
        today or date.today(),
        7,
        avg_daily_cash_flow or 0,
        (fixed_cost or 0) / DAYS_PER_MONTH,
    )


def generate_month_projection(
    current_balance: float,
    fixed_cost: float = 0,
    avg_daily_cash_flow: Optional[float] = None,
    today: Optional[date] = None,
) -> List[ChartDataPoint]:
    """Next 30 days at 1-day intervals; every point deducts one month of fixed cost"""
    return _daily_points(
        current_balance,
        today or date.today(),
        30,
        avg_daily_cash_flow or 0,
        DAYS_PER_MONTH * ((fixed_cost or 0) / DAYS_PER_MONTH),
    )


def generate_year_projection(
    current_balance: float,
    fixed_cost: float = 0,
    avg_daily_cash_flow: Optional[float] = None,
    today: Optional[date] = None,
) -> List[ChartDataPoint]:
    """
    Next 12 months, one point on the 1st of each month.

    A month of flow is approximated as 30 days; point i deducts
    i months of fixed cost.
    """
    return _monthly_points(
        current_balance,
        today or date.today(),
        12,
        avg_daily_cash_flow or 0,
        fixed_cost,
    )


def generate_custom_projection(
    current_balance: float,
    fixed_cost: float,
    start_date: str | date,
    end_date: str | date,
    avg_daily_cash_flow: Optional[float] = None,
) -> List[ChartDataPoint]:
    """
    Projection over an explicit date range (both ends inclusive).

    Short ranges get daily points with the week/month single-day deduction;
    ranges beyond the daily limit get one point per month, ceil(days / 30)
    of them, deducting i months of fixed cost. An end before the start
    yields no points.

    Raises:
        InvalidDateError: start_date or end_date cannot be parsed
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    days = (end - start).days + 1
    daily_cash_flow = avg_daily_cash_flow or 0

    if days <= 0:
        logger.warning("Custom projection range ends before it starts", extra={"start": str(start), "end": str(end)})
        return []

    if days <= settings.custom_range_daily_limit_days:
        return _daily_points(current_balance, start, days, daily_cash_flow, (fixed_cost or 0) / DAYS_PER_MONTH)

    return _monthly_points(
        current_balance,
        start,
        math.ceil(days / DAYS_PER_MONTH),
        daily_cash_flow,
        fixed_cost,
    )


def generate_cashflow_chart_data(
    transactions: Optional[Iterable[TransactionForScoring]],
    current_balance: float,
    fixed_cost: float = 0,
    scope: Optional[str] = "month",
    today: Optional[date] = None,
) -> List[ChartDataPoint]:
    """
    Main entry point for projected chart series.

    The average daily flow comes from the transaction history; scope picks
    the week, month or year generator and falls back to month.
    """
    avg_daily_cash_flow = calculate_average_daily_cash_flow(transactions)
    logger.debug("Projecting %s scope at %.2f/day", scope, avg_daily_cash_flow)

    if scope == "week":
        return generate_week_projection(current_balance, fixed_cost, avg_daily_cash_flow, today)
    elif scope == "year":
        return generate_year_projection(current_balance, fixed_cost, avg_daily_cash_flow, today)
    else:
        return generate_month_projection(current_balance, fixed_cost, avg_daily_cash_flow, today)
