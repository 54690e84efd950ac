"""Risk Scorer - aggregates profile adjustments and signals into [0, 100].

Signal contributions are summed with math.fsum, so analyzer execution order
never changes the result.
"""

import math
from typing import Iterable

from gearguard.common.constants import ScoringConstants as C
from gearguard.core.types import Severity
from gearguard.data.schemas.profile import UserBehaviorProfile
from gearguard.data.schemas.signal import FraudSignal


def severity_points(severity: Severity) -> int:
    return C.SEVERITY_POINTS[severity.value]


def weighted_signal_sum(signals: Iterable[FraudSignal]) -> float:
    """Sum of points(severity) x confidence over all signals."""
    return math.fsum(severity_points(s.severity) * s.confidence for s in signals)


def base_adjustment(profile: UserBehaviorProfile) -> int:
    """Points from account age and transaction count alone."""
    points = 0
    
    if profile.account_age < 1:
        points += C.AGE_UNDER_1_DAY_POINTS
    elif profile.account_age < 7:
        points += C.AGE_UNDER_7_DAYS_POINTS
    elif profile.account_age < 30:
        points += C.AGE_UNDER_30_DAYS_POINTS
    
    if profile.total_transactions == 0:
        points += C.NO_TRANSACTIONS_POINTS
    elif profile.total_transactions < C.FEW_TRANSACTIONS_LIMIT:
        points += C.FEW_TRANSACTIONS_POINTS
    
    return points


def positive_discount(profile: UserBehaviorProfile) -> int:
    """Points removed for established, well-behaved accounts."""
    discount = 0
    
    if profile.account_age > C.ESTABLISHED_ACCOUNT_DAYS:
        discount += C.ESTABLISHED_ACCOUNT_DISCOUNT
    if profile.successful_transactions > C.SUCCESSFUL_TRANSACTIONS_LIMIT:
        discount += C.SUCCESSFUL_TRANSACTIONS_DISCOUNT
    if profile.communication_patterns.politeness_score > C.POLITENESS_THRESHOLD:
        discount += C.POLITENESS_DISCOUNT
    
    return discount


def clamp_score(score: float) -> float:
    return max(C.MIN_SCORE, min(C.MAX_SCORE, score))


class RiskScorer:
    """Computes the bounded risk score for one assessment."""
    
    def score(self, signals: Iterable[FraudSignal], profile: UserBehaviorProfile) -> float:
        raw = base_adjustment(profile) + weighted_signal_sum(signals) - positive_discount(profile)
        return clamp_score(raw)
