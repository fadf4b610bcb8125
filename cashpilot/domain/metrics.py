"""Headline cashflow totals and runway"""

from typing import Iterable, Optional

from cashpilot.domain.models import CashflowMetrics, RunwayMetrics, TransactionForScoring


def calculate_cashflow_metrics(
    transactions: Optional[Iterable[TransactionForScoring]],
    initial_balance: float = 0,
) -> CashflowMetrics:
    """
    Sum cash in and cash out across all transactions.

    Dates play no part here: a leg without its date still counts.
    Missing amounts are treated as 0.
    """
    transactions = list(transactions or ())
    total_cash_in = sum(t.cash_in or 0 for t in transactions)
    total_cash_out = sum(t.cash_out or 0 for t in transactions)
    net_cash_flow = total_cash_in - total_cash_out

    return CashflowMetrics(
        total_cash_in=total_cash_in,
        total_cash_out=total_cash_out,
        net_cash_flow=net_cash_flow,
        current_balance=initial_balance + net_cash_flow,
    )


def calculate_runway(current_balance: float, monthly_burn_rate: float) -> RunwayMetrics:
    """Months of runway; 0 for a non-positive burn rate or a negative balance"""
    months = current_balance / monthly_burn_rate if monthly_burn_rate > 0 else 0

    return RunwayMetrics(
        months=max(0, months),
        burn_rate=monthly_burn_rate,
        available_cash=current_balance,
    )
