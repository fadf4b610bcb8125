"""Risk scoring for suppliers (DPO) and customers (DSO)"""

import math

from cashpilot.domain.models import RiskCategory, RiskScoreResult


def _round_half_up(value: float) -> int:
    # 6.5 -> 7, not the banker's 6 that round() would give
    return math.floor(value + 0.5)


def get_risk_category(score: float) -> RiskCategory:
    """Map a 0-100 score to low (<40), medium (<70) or high"""
    if score < 40:
        return "low"
    elif score < 70:
        return "medium"
    else:
        return "high"


def calculate_supplier_score(dpo: float) -> RiskScoreResult:
    """
    Calculate supplier risk from Days Payable Outstanding.

    Lower DPO means stricter payment terms and more cash pressure:
    - DPO < 15:   high risk (70-100), dpo=0 -> 100, dpo=14 -> 72
    - DPO 15-30:  medium risk, linear from 69 (dpo=15) down to 40 (dpo=30)
    - DPO > 30:   low risk (0-39), reaching 0 at dpo=50
    """
    if dpo < 15:
        score = max(70, 100 - dpo * 2)
    elif dpo <= 30:
        score = _round_half_up(69 + (dpo - 15) * (-29 / 15))
    else:
        score = max(0, 100 - dpo * 2)

    return RiskScoreResult(score=score, category=get_risk_category(score))


def calculate_customer_score(dso: float) -> RiskScoreResult:
    """
    Calculate customer risk from Days Sales Outstanding.

    Higher DSO means a slower payer:
    - DSO < 30:   low risk (0-39), dso=0 -> 0, dso=29 -> 38
    - DSO 30-50:  medium risk, linear from 40 (dso=30) to 69 (dso=50)
    - DSO > 50:   high risk, 70 plus 0.6 per day past 50, capped at 100
    """
    if dso < 30:
        score = max(0, _round_half_up(dso * 1.3))
    elif dso <= 50:
        score = _round_half_up(40 + (dso - 30) * 1.45)
    else:
        score = min(100, _round_half_up(70 + (dso - 50) * 0.6))

    return RiskScoreResult(score=score, category=get_risk_category(score))


def calculate_supplier_risk_score(dpo: float) -> int:
    """Bare supplier score, for records that only store risk_score"""
    return calculate_supplier_score(dpo).score


def calculate_customer_risk_score(dso: float) -> int:
    """Bare customer score, for records that only store risk_score"""
    return calculate_customer_score(dso).score
