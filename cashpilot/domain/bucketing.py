"""Historical running-balance series grouped by ISO week or calendar year"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional

from cashpilot.domain.events import expand_cash_events
from cashpilot.domain.models import ChartDataPoint, TransactionForScoring
from cashpilot.domain.periods import get_iso_week, get_months_elapsed, get_year
from cashpilot.utils.date_utils import format_date_key

logger = logging.getLogger(__name__)


def _aggregate_running_balance(
    transactions: Optional[Iterable[TransactionForScoring]],
    key_fn: Callable[..., str],
    fixed_cost: Optional[float],
) -> List[ChartDataPoint]:
    events = expand_cash_events(transactions)
    if not events:
        return []

    changes: Dict[str, float] = defaultdict(float)
    for event in events:
        changes[key_fn(event.date)] += event.amount

    # YYYY-WNN and YYYY keys are fixed width, so lexical order is chronological
    sorted_keys = sorted(changes)
    first_date = format_date_key(min(e.date for e in events))

    running_balance = 0.0
    points = []
    for key in sorted_keys:
        running_balance += changes[key]
        months_elapsed = get_months_elapsed(first_date, key) if fixed_cost else 0
        networth = running_balance - months_elapsed * (fixed_cost or 0)
        points.append(ChartDataPoint(date=key, balance=running_balance, networth=networth))

    logger.debug("Aggregated %d events into %d buckets", len(events), len(points))
    return points


def aggregate_by_week(
    transactions: Optional[Iterable[TransactionForScoring]],
    fixed_cost: Optional[float] = None,
) -> List[ChartDataPoint]:
    """
    Running balance per ISO week.

    The balance carries over from week to week. With a fixed cost, networth
    subtracts fixed_cost for every calendar month between the first event
    and the start of the week.
    """
    return _aggregate_running_balance(transactions, get_iso_week, fixed_cost)


def aggregate_by_year(
    transactions: Optional[Iterable[TransactionForScoring]],
    fixed_cost: Optional[float] = None,
) -> List[ChartDataPoint]:
    """Running balance per calendar year, networth amortized as for weeks"""
    return _aggregate_running_balance(transactions, get_year, fixed_cost)
