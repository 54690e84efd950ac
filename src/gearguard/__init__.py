"""GearGuard - Fraud risk assessment for peer-to-peer gear rentals."""

__version__ = "0.1.0"
__author__ = "GearGuard Team"

from gearguard.core.types import ActionType, RiskLevel, Severity, SignalType, TrustLevel
from gearguard.data.schemas.assessment import FraudAssessment
from gearguard.data.schemas.signal import FraudSignal
from gearguard.orchestration.engine import FraudDetectionEngine
from gearguard.orchestration.gates import check_fraud_risk, get_user_risk_profile

__all__ = [
    "ActionType",
    "RiskLevel",
    "Severity",
    "SignalType",
    "TrustLevel",
    "FraudAssessment",
    "FraudSignal",
    "FraudDetectionEngine",
    "check_fraud_risk",
    "get_user_risk_profile",
]
