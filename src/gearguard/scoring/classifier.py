"""Risk Level Classifier - maps a risk score to a tier and gate booleans.

These functions are the only source of the tier and of the allow/action
flags. FraudAssessment derives its computed fields from them.
"""

from gearguard.common.constants import RiskThresholds
from gearguard.core.types import RiskLevel


def classify_risk_level(score: float) -> RiskLevel:
    """Map a score in [0, 100] to a risk tier, evaluated high to low."""
    if score >= RiskThresholds.CRITICAL:
        return RiskLevel.CRITICAL
    if score >= RiskThresholds.HIGH:
        return RiskLevel.HIGH
    if score >= RiskThresholds.MEDIUM:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def allows_transaction(score: float) -> bool:
    return score < RiskThresholds.HIGH


def requires_action(score: float) -> bool:
    return score >= RiskThresholds.MEDIUM
