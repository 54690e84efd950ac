"""Recommendation Generator - advisory actions per tier and signal type."""

from typing import Dict, Iterable, List, Tuple

from gearguard.core.types import RiskLevel, SignalType
from gearguard.data.schemas.signal import FraudSignal


TIER_RECOMMENDATIONS: Dict[RiskLevel, Tuple[str, ...]] = {
    RiskLevel.CRITICAL: (
        "Block transaction immediately",
        "Flag account for manual review",
        "Consider permanent account suspension",
    ),
    RiskLevel.HIGH: (
        "Require additional verification",
        "Limit transaction amounts",
        "Enable enhanced monitoring",
    ),
    RiskLevel.MEDIUM: (
        "Request additional documentation",
        "Monitor subsequent activities closely",
        "Consider temporary restrictions",
    ),
    RiskLevel.LOW: (
        "Proceed with standard verification",
        "Continue routine monitoring",
    ),
}

# Appended once per signal type present, in this order
SIGNAL_TYPE_RECOMMENDATIONS: Tuple[Tuple[SignalType, str], ...] = (
    (SignalType.COMMUNICATION, "Review all user communications"),
    (SignalType.DEVICE_FINGERPRINT, "Require device verification"),
    (SignalType.LISTING_QUALITY, "Review listing quality and pricing"),
)


def generate_recommendations(signals: Iterable[FraudSignal], risk_level: RiskLevel) -> List[str]:
    present = {s.type for s in signals}
    recommendations = list(TIER_RECOMMENDATIONS[risk_level])
    recommendations.extend(
        text for signal_type, text in SIGNAL_TYPE_RECOMMENDATIONS if signal_type in present
    )
    return recommendations
