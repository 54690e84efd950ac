"""Scoring - aggregation, classification and recommendations."""

from gearguard.scoring.classifier import allows_transaction, classify_risk_level, requires_action
from gearguard.scoring.recommendations import generate_recommendations
from gearguard.scoring.scorer import RiskScorer, severity_points, weighted_signal_sum

__all__ = [
    "allows_transaction",
    "classify_risk_level",
    "requires_action",
    "generate_recommendations",
    "RiskScorer",
    "severity_points",
    "weighted_signal_sum",
]
