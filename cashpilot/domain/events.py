"""Expansion of transactions into dated cash events"""

import logging
from typing import Iterable, List, Optional

from cashpilot.domain.exceptions import InvalidDateError
from cashpilot.domain.models import CashEvent, TransactionForScoring
from cashpilot.utils.date_utils import parse_date

logger = logging.getLogger(__name__)


def expand_cash_events(
    transactions: Optional[Iterable[TransactionForScoring]],
    positive_only: bool = False,
) -> List[CashEvent]:
    """
    Turn each transaction into 0, 1 or 2 signed cash events.

    A cash_in leg needs date_in and a cash_out leg needs date_out; legs
    without their date are left out here but still count in flat totals.
    With positive_only, legs whose amount is zero are skipped as well.
    Legs whose date cannot be parsed are dropped with a warning.
    """
    events: List[CashEvent] = []
    for txn in transactions or ():
        legs = ((txn.cash_in, txn.date_in, 1), (txn.cash_out, txn.date_out, -1))
        for amount, raw_date, sign in legs:
            if amount is None or not raw_date:
                continue
            if positive_only and not amount > 0:
                continue
            try:
                day = parse_date(raw_date)
            except InvalidDateError:
                logger.warning("Dropping cash event with unparseable date", extra={"date": raw_date})
                continue
            events.append(CashEvent(date=day, amount=sign * amount))
    return events
