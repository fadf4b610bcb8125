"""Unit tests for supplier and customer risk scoring"""

from cashpilot.domain.scoring import (
    calculate_customer_risk_score,
    calculate_customer_score,
    calculate_supplier_risk_score,
    calculate_supplier_score,
    get_risk_category,
)


def test_get_risk_category_thresholds():
    """Test category boundaries at 40 and 70"""
    assert get_risk_category(0) == "low"
    assert get_risk_category(39) == "low"
    assert get_risk_category(40) == "medium"
    assert get_risk_category(69) == "medium"
    assert get_risk_category(70) == "high"
    assert get_risk_category(100) == "high"


def test_supplier_score_strict_terms_are_high_risk():
    """Test DPO below 15 stays in the high band"""
    result = calculate_supplier_score(0)
    assert result.score == 100
    assert result.category == "high"

    result = calculate_supplier_score(14)
    assert result.score == 72
    assert result.category == "high"


def test_supplier_score_medium_band_interpolates():
    """Test DPO 15-30 runs linearly from 69 down to 40"""
    assert calculate_supplier_score(15).score == 69
    assert calculate_supplier_score(30).score == 40
    assert calculate_supplier_score(30).category == "medium"
    assert 40 < calculate_supplier_score(22).score < 69


def test_supplier_score_generous_terms_are_low_risk():
    """Test DPO above 30 decays to 0 and stays there"""
    result = calculate_supplier_score(31)
    assert result.score == 38
    assert result.category == "low"
    assert calculate_supplier_score(50).score == 0
    assert calculate_supplier_score(365).score == 0


def test_supplier_score_monotonic_past_15():
    """Test score never increases as DPO grows past 15"""
    scores = [calculate_supplier_score(dpo).score for dpo in range(15, 120)]
    assert all(a >= b for a, b in zip(scores, scores[1:]))


def test_supplier_category_matches_score():
    """Test category is always derived from the final score"""
    for dpo in range(0, 200):
        result = calculate_supplier_score(dpo)
        assert result.category == get_risk_category(result.score)


def test_customer_score_bands():
    """Test DSO bands and their end points"""
    assert calculate_customer_score(0).score == 0
    assert calculate_customer_score(0).category == "low"
    assert calculate_customer_score(29).score == 38
    assert calculate_customer_score(30).score == 40
    assert calculate_customer_score(30).category == "medium"
    assert calculate_customer_score(50).score == 69
    assert calculate_customer_score(51).score == 71
    assert calculate_customer_score(51).category == "high"


def test_customer_score_rounds_half_up():
    """Test 6.5 rounds to 7"""
    assert calculate_customer_score(5).score == 7


def test_customer_score_capped_at_100():
    """Test slow payers saturate at 100"""
    assert calculate_customer_score(100).score == 100
    assert calculate_customer_score(400).score == 100


def test_customer_score_monotonic():
    """Test score never decreases as DSO grows"""
    results = [calculate_customer_score(dso) for dso in range(0, 200)]
    scores = [r.score for r in results]
    assert all(a <= b for a, b in zip(scores, scores[1:]))
    assert all(r.category == get_risk_category(r.score) for r in results)


def test_bare_risk_scores_match_full_results():
    """Test score-only helpers agree with the full results"""
    assert calculate_supplier_risk_score(20) == calculate_supplier_score(20).score
    assert calculate_customer_risk_score(45) == calculate_customer_score(45).score
