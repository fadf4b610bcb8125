"""Domain models - pure Python dataclasses representing dashboard entities"""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, List, Literal, Mapping, Optional

RiskCategory = Literal["low", "medium", "high"]


@dataclass
class TransactionForScoring:
    """Minimal transaction shape consumed by the cashflow engine"""

    cash_in: Optional[float] = None
    cash_out: Optional[float] = None
    date_in: Optional[str] = None
    date_out: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "TransactionForScoring":
        """Build from a plain record, ignoring keys this shape does not carry"""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in record.items() if k in names})


@dataclass
class InsightTransaction(TransactionForScoring):
    """Transaction with the entity links used for dashboard insights"""

    supplier_id: Optional[str] = None
    customer_id: Optional[str] = None
    sku_id: Optional[str] = None
    status: Optional[str] = None  # "pending" | "completed" | ...


@dataclass
class CashEvent:
    """Single dated cash movement; positive for cash in, negative for cash out"""

    date: date
    amount: float


@dataclass
class ChartDataPoint:
    """Balance series point for line charts"""

    date: str  # YYYY-MM-DD or a period key
    balance: float
    networth: float


@dataclass
class CashFlowPeriod:
    """Per-period totals for bar charts (not running totals)"""

    period: str
    cash_in: float
    cash_out: float
    net: float


@dataclass
class RiskScoreResult:
    """Risk score from 0-100 (higher = more risk) with its category"""

    score: int
    category: RiskCategory


@dataclass
class CashflowMetrics:
    """Headline totals across a transaction list"""

    total_cash_in: float
    total_cash_out: float
    net_cash_flow: float
    current_balance: float


@dataclass
class RunwayMetrics:
    """Months of operation fundable at the given burn rate"""

    months: float
    burn_rate: float
    available_cash: float


@dataclass
class EntityStats:
    """Aggregated activity for one supplier, customer or SKU"""

    id: str
    name: str
    value: float = 0
    count: int = 0
    pending_value: float = 0


@dataclass
class DashboardInsights:
    """Top-N rankings shown next to the dashboard charts"""

    top_suppliers_by_value: List[EntityStats] = field(default_factory=list)
    top_suppliers_by_freq: List[EntityStats] = field(default_factory=list)
    risk_suppliers: List[EntityStats] = field(default_factory=list)
    top_customers_by_value: List[EntityStats] = field(default_factory=list)
    top_customers_by_freq: List[EntityStats] = field(default_factory=list)
    risk_customers: List[EntityStats] = field(default_factory=list)
    top_skus_by_value: List[EntityStats] = field(default_factory=list)
    top_skus_by_freq: List[EntityStats] = field(default_factory=list)


@dataclass
class DashboardSummary:
    """Everything the dashboard page renders for one scope"""

    net_liquidity: float
    runway_months: float
    total_inflow: float
    total_outflow: float
    baseline_amount: float
    chart_data: List[ChartDataPoint]
