"""Orchestration - analyzer fan-out and the assessment entry points."""

from gearguard.orchestration.engine import (
    EngineSettings,
    FraudDetectionEngine,
    classify_trust_level,
)
from gearguard.orchestration.fanout import AnalyzerTask, gather_signals
from gearguard.orchestration.gates import check_fraud_risk, get_user_risk_profile

__all__ = [
    "EngineSettings",
    "FraudDetectionEngine",
    "classify_trust_level",
    "AnalyzerTask",
    "gather_signals",
    "check_fraud_risk",
    "get_user_risk_profile",
]
