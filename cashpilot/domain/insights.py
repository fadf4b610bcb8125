"""Supplier, customer and SKU rankings for the dashboard"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from cashpilot.config import settings
from cashpilot.domain.models import DashboardInsights, EntityStats, InsightTransaction

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"


def _stats_for(stats: Dict[str, EntityStats], entity_id: str, names: Mapping[str, str]) -> EntityStats:
    if entity_id not in stats:
        stats[entity_id] = EntityStats(id=entity_id, name=names.get(entity_id) or UNKNOWN_NAME)
    return stats[entity_id]


def _top(items: Iterable[EntityStats], key: str, top_n: int) -> List[EntityStats]:
    # sorted() is stable: ties keep first-seen order
    return sorted(items, key=lambda s: getattr(s, key), reverse=True)[:top_n]


def build_dashboard_insights(
    transactions: Optional[Iterable[InsightTransaction]],
    suppliers: Optional[Mapping[str, str]] = None,
    customers: Optional[Mapping[str, str]] = None,
    skus: Optional[Mapping[str, str]] = None,
    top_n: Optional[int] = None,
) -> DashboardInsights:
    """
    Rank suppliers, customers and SKUs by value, frequency and pending exposure.

    - Suppliers aggregate cash-out legs, customers cash-in legs; pending
      value counts only transactions with status "pending".
    - SKUs aggregate cash in plus cash out of every linked transaction.
    - suppliers/customers/skus map ids to display names; unmapped ids are
      named "Unknown".
    """
    transactions = list(transactions or ())
    if not transactions:
        return DashboardInsights()

    top_n = settings.insights_top_n if top_n is None else top_n
    supplier_stats: Dict[str, EntityStats] = {}
    customer_stats: Dict[str, EntityStats] = {}
    sku_stats: Dict[str, EntityStats] = {}

    for txn in transactions:
        pending = txn.status == "pending"

        if txn.supplier_id and txn.cash_out:
            current = _stats_for(supplier_stats, txn.supplier_id, suppliers or {})
            current.value += txn.cash_out
            current.count += 1
            if pending:
                current.pending_value += txn.cash_out

        if txn.customer_id and txn.cash_in:
            current = _stats_for(customer_stats, txn.customer_id, customers or {})
            current.value += txn.cash_in
            current.count += 1
            if pending:
                current.pending_value += txn.cash_in

        if txn.sku_id:
            current = _stats_for(sku_stats, txn.sku_id, skus or {})
            current.value += (txn.cash_in or 0) + (txn.cash_out or 0)
            current.count += 1

    logger.debug(
        "Insights over %d transactions: %d suppliers, %d customers, %d skus",
        len(transactions),
        len(supplier_stats),
        len(customer_stats),
        len(sku_stats),
    )

    supplier_list = list(supplier_stats.values())
    customer_list = list(customer_stats.values())
    sku_list = list(sku_stats.values())

    return DashboardInsights(
        top_suppliers_by_value=_top(supplier_list, "value", top_n),
        top_suppliers_by_freq=_top(supplier_list, "count", top_n),
        risk_suppliers=_top([s for s in supplier_list if s.pending_value > 0], "pending_value", top_n),
        top_customers_by_value=_top(customer_list, "value", top_n),
        top_customers_by_freq=_top(customer_list, "count", top_n),
        risk_customers=_top([c for c in customer_list if c.pending_value > 0], "pending_value", top_n),
        top_skus_by_value=_top(sku_list, "value", top_n),
        top_skus_by_freq=_top(sku_list, "count", top_n),
    )
