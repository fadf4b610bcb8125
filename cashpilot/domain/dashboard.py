"""Dashboard summary - ties metrics, runway and projections together"""

from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from cashpilot.config import settings
from cashpilot.domain.dashboard_settings import DashboardSettings
from cashpilot.domain.metrics import calculate_cashflow_metrics, calculate_runway
from cashpilot.domain.models import DashboardSummary, TransactionForScoring
from cashpilot.domain.projections import (
    calculate_average_daily_cash_flow,
    generate_cashflow_chart_data,
    generate_custom_projection,
)
from cashpilot.infrastructure.observability.logging import log_dashboard_summary
from cashpilot.utils.date_utils import format_date_key

DEFAULT_CUSTOM_RANGE_DAYS = 30


def default_date_range(today: Optional[date] = None) -> Tuple[str, str]:
    """Default custom range: today through 30 days from today"""
    start = today or date.today()
    end = start + timedelta(days=DEFAULT_CUSTOM_RANGE_DAYS)
    return format_date_key(start), format_date_key(end)


def build_dashboard_summary(
    transactions: Optional[Iterable[TransactionForScoring]],
    dashboard_settings: Optional[DashboardSettings] = None,
    scope: Optional[str] = None,
    custom_start: Optional[str] = None,
    custom_end: Optional[str] = None,
    today: Optional[date] = None,
) -> DashboardSummary:
    """
    Main entry point: compute everything the dashboard shows for one scope.

    Runway uses the monthly fixed cost as burn rate. The "custom" scope
    projects over custom_start..custom_end and falls back to the regular
    scopes when either end is missing.
    """
    transactions = list(transactions or ())
    dashboard_settings = dashboard_settings or DashboardSettings()
    scope = scope or settings.default_chart_scope
    fixed_cost = dashboard_settings.fixed_cost

    metrics = calculate_cashflow_metrics(transactions)
    runway = calculate_runway(metrics.current_balance, fixed_cost)

    if scope == "custom" and custom_start and custom_end:
        avg_daily_cash_flow = calculate_average_daily_cash_flow(transactions)
        chart_data = generate_custom_projection(
            metrics.current_balance, fixed_cost, custom_start, custom_end, avg_daily_cash_flow
        )
    else:
        chart_data = generate_cashflow_chart_data(transactions, metrics.current_balance, fixed_cost, scope, today)

    log_dashboard_summary(
        scope=scope,
        transaction_count=len(transactions),
        net_liquidity=metrics.current_balance,
        runway_months=runway.months,
        point_count=len(chart_data),
    )

    return DashboardSummary(
        net_liquidity=metrics.current_balance,
        runway_months=runway.months,
        total_inflow=metrics.total_cash_in,
        total_outflow=metrics.total_cash_out,
        baseline_amount=dashboard_settings.baseline_amount,
        chart_data=chart_data,
    )
