"""Data schemas - pydantic models shared across GearGuard."""

from gearguard.data.schemas.signal import FraudSignal
from gearguard.data.schemas.assessment import (
    DeviceTrustResult,
    FraudAssessment,
    UserRiskProfile,
)
from gearguard.data.schemas.profile import (
    CommunicationPatterns,
    DeviceFingerprint,
    LocationData,
    TimePattern,
    UserBehaviorProfile,
)
from gearguard.data.schemas.records import Listing, Transaction, User
from gearguard.data.schemas.context import AssessmentContext

__all__ = [
    "FraudSignal",
    "DeviceTrustResult",
    "FraudAssessment",
    "UserRiskProfile",
    "CommunicationPatterns",
    "DeviceFingerprint",
    "LocationData",
    "TimePattern",
    "UserBehaviorProfile",
    "Listing",
    "Transaction",
    "User",
    "AssessmentContext",
]
