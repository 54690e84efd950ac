"""Unit tests for the Risk Scorer.

Scores are bounded to [0, 100] and independent of signal order.
"""

import itertools

import pytest

from gearguard.core.types import Severity, SignalType
from gearguard.data.schemas.signal import FraudSignal
from gearguard.scoring.scorer import (
    RiskScorer,
    base_adjustment,
    clamp_score,
    positive_discount,
    severity_points,
    weighted_signal_sum,
)

from tests.fixtures.marketplace import make_profile


def _signal(severity, confidence, signal_type=SignalType.USER_BEHAVIOR):
    return FraudSignal(
        type=signal_type,
        severity=severity,
        confidence=confidence,
        description=f"{severity.value} signal",
    )


@pytest.fixture
def scorer():
    return RiskScorer()


@pytest.fixture
def neutral_profile():
    """Profile with no base adjustment and no discount."""
    return make_profile(account_age=100, total_transactions=5, successful_transactions=5)


class TestSeverityPoints:
    """Tests for the severity weight table."""
    
    def test_points_table(self):
        assert severity_points(Severity.LOW) == 5
        assert severity_points(Severity.MEDIUM) == 15
        assert severity_points(Severity.HIGH) == 30
        assert severity_points(Severity.CRITICAL) == 50
    
    def test_weighted_sum(self):
        signals = [_signal(Severity.HIGH, 0.9), _signal(Severity.LOW, 0.5)]
        assert weighted_signal_sum(signals) == pytest.approx(29.5)
    
    def test_empty_sum(self):
        assert weighted_signal_sum([]) == 0


class TestBaseAdjustment:
    """Tests for profile-only points."""
    
    @pytest.mark.parametrize("age,expected", [(0, 20), (6, 10), (29, 5), (30, 0)])
    def test_age_brackets(self, age, expected):
        assert base_adjustment(make_profile(account_age=age)) == expected
    
    @pytest.mark.parametrize("total,expected", [(0, 15), (1, 10), (2, 10), (3, 0)])
    def test_transaction_brackets(self, total, expected):
        profile = make_profile(account_age=100, total_transactions=total, successful_transactions=total)
        assert base_adjustment(profile) == expected


class TestPositiveDiscount:
    """Tests for established-account discounts."""
    
    def test_all_discounts(self):
        profile = make_profile(
            account_age=400,
            total_transactions=20,
            successful_transactions=19,
            politeness_score=0.9,
        )
        assert positive_discount(profile) == 25
    
    def test_discount_thresholds_are_strict(self):
        profile = make_profile(
            account_age=365,
            total_transactions=10,
            successful_transactions=10,
            politeness_score=0.8,
        )
        assert positive_discount(profile) == 0


class TestRiskScorer:
    """Tests for the aggregate score."""
    
    def test_brand_new_account_high_value_payment(self, scorer):
        profile = make_profile(
            account_age=0,
            total_transactions=0,
            successful_transactions=0,
            average_transaction_value=0,
        )
        signals = [_signal(Severity.HIGH, 0.9), _signal(Severity.HIGH, 0.9, SignalType.PAYMENT)]
        
        assert scorer.score(signals, profile) == pytest.approx(89)
    
    def test_clamped_at_zero(self, scorer):
        profile = make_profile(
            account_age=400,
            total_transactions=20,
            successful_transactions=19,
            politeness_score=0.9,
        )
        assert scorer.score([], profile) == 0
    
    def test_clamped_at_hundred(self, scorer, neutral_profile):
        signals = [_signal(Severity.CRITICAL, 1.0) for _ in range(5)]
        assert scorer.score(signals, neutral_profile) == 100
    
    def test_order_independent(self, scorer, neutral_profile):
        signals = [
            _signal(Severity.HIGH, 0.7),
            _signal(Severity.MEDIUM, 0.6),
            _signal(Severity.LOW, 0.4),
            _signal(Severity.MEDIUM, 0.1),
        ]
        scores = {scorer.score(list(p), neutral_profile) for p in itertools.permutations(signals)}
        
        assert len(scores) == 1
    
    @pytest.mark.parametrize("count", [0, 1, 3, 10])
    def test_always_bounded(self, scorer, count):
        profile = make_profile(account_age=0, total_transactions=0, successful_transactions=0)
        signals = [_signal(Severity.CRITICAL, 0.9)] * count
        
        assert 0 <= scorer.score(signals, profile) <= 100
    
    def test_clamp_score(self):
        assert clamp_score(-12.5) == 0
        assert clamp_score(140) == 100
        assert clamp_score(55.5) == 55.5
