"""Unit tests for bar-chart period aggregation"""

from datetime import date
from cashpilot.domain.charting import aggregate_cash_flow_by_period, get_period_label
from cashpilot.domain.models import CashFlowPeriod, TransactionForScoring
from cashpilot.domain.periods import get_iso_week


def test_monthly_totals_across_two_months():
    """Test per-month sums and that zero or missing legs are skipped"""
    transactions = [
        TransactionForScoring(cash_in=500, date_in="2024-02-03", cash_out=200, date_out="2024-02-10"),
        TransactionForScoring(cash_in=1000, date_in="2024-01-05"),
        TransactionForScoring(cash_out=300, date_out="2024-01-20"),
        TransactionForScoring(cash_in=0, date_in="2024-03-15"),
        TransactionForScoring(cash_out=None, date_out="2024-03-01"),
    ]

    periods = aggregate_cash_flow_by_period(transactions, "month")

    assert periods == [
        CashFlowPeriod(period="Jan 2024", cash_in=1000, cash_out=300, net=700),
        CashFlowPeriod(period="Feb 2024", cash_in=500, cash_out=200, net=300),
    ]


def test_empty_input_returns_no_periods():
    """Test empty, None and all-zero input"""
    assert aggregate_cash_flow_by_period([], "month") == []
    assert aggregate_cash_flow_by_period(None, "week") == []
    assert aggregate_cash_flow_by_period([TransactionForScoring(cash_in=0, date_in="2024-01-01")], "week") == []


def test_weekly_totals_use_simple_week_numbers():
    """Test weekly labels and sums"""
    transactions = [
        TransactionForScoring(cash_in=100, date_in="2023-01-01"),
        TransactionForScoring(cash_out=40, date_out="2023-01-07"),
        TransactionForScoring(cash_in=60, date_in="2023-01-08"),
    ]

    periods = aggregate_cash_flow_by_period(transactions, "week")

    assert periods == [
        CashFlowPeriod(period="Week 1", cash_in=100, cash_out=40, net=60),
        CashFlowPeriod(period="Week 2", cash_in=60, cash_out=0, net=60),
    ]


def test_period_labels():
    """Test month and week label formats"""
    assert get_period_label(date(2024, 1, 31), "month") == "Jan 2024"
    assert get_period_label(date(2024, 12, 1), "month") == "Dec 2024"
    assert get_period_label(date(2024, 1, 1), "week") == "Week 1"


def test_simple_weeks_diverge_from_iso_weeks():
    """Test the bar-chart week numbering is not ISO numbering"""
    # Sunday Jan 7 2024 closes ISO week 1 but starts simple week 2
    assert get_iso_week("2024-01-07") == "2024-W01"
    assert get_period_label(date(2024, 1, 7), "week") == "Week 2"

    # Dec 30 2024 is ISO week 1 of 2025 but simple week 53 of 2024
    assert get_iso_week("2024-12-30") == "2025-W01"
    assert get_period_label(date(2024, 12, 30), "week") == "Week 53"
