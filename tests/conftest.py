"""Pytest fixtures for testing"""

import pytest
from datetime import date
from cashpilot.domain.models import InsightTransaction, TransactionForScoring


@pytest.fixture
def today() -> date:
    """Pinned clock for projections"""
    return date(2026, 10, 19)


@pytest.fixture
def sample_transactions() -> list[TransactionForScoring]:
    """Small history with both legs, a split transaction and an undated leg"""
    return [
        TransactionForScoring(cash_in=3000, date_in="2024-01-02"),
        TransactionForScoring(cash_out=1200, date_out="2024-01-05"),
        TransactionForScoring(
            cash_in=1500,
            date_in="2024-01-16",
            cash_out=400,
            date_out="2024-02-01",
        ),
        # Counts toward totals, never toward dated series
        TransactionForScoring(cash_out=250),
    ]


@pytest.fixture
def insight_transactions() -> list[InsightTransaction]:
    """Transactions linked to suppliers, customers and SKUs"""
    return [
        InsightTransaction(cash_out=500, date_out="2024-03-01", supplier_id="s1", sku_id="k1", status="pending"),
        InsightTransaction(cash_out=200, date_out="2024-03-04", supplier_id="s1", status="completed"),
        InsightTransaction(cash_out=1000, date_out="2024-03-05", supplier_id="s2", status="completed"),
        InsightTransaction(cash_in=300, date_in="2024-03-06", customer_id="c1", sku_id="k1", status="pending"),
        InsightTransaction(cash_in=900, date_in="2024-03-07", customer_id="c2", sku_id="k2", status="completed"),
    ]
