"""Core types."""

from gearguard.core.types import (
    ActionType,
    ActivityType,
    LocationSource,
    RiskLevel,
    Severity,
    SignalType,
    TransactionStatus,
    TrustLevel,
)

__all__ = [
    "ActionType",
    "ActivityType",
    "LocationSource",
    "RiskLevel",
    "Severity",
    "SignalType",
    "TransactionStatus",
    "TrustLevel",
]
