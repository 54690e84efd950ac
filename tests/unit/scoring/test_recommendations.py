"""Unit tests for recommendation generation."""

import pytest

from gearguard.core.types import RiskLevel, Severity, SignalType
from gearguard.data.schemas.signal import FraudSignal
from gearguard.scoring.recommendations import generate_recommendations


def _signal(signal_type):
    return FraudSignal(
        type=signal_type,
        severity=Severity.MEDIUM,
        confidence=0.5,
        description="test signal",
    )


class TestTierRecommendations:
    """Tests for per-tier text."""
    
    def test_critical(self):
        assert generate_recommendations([], RiskLevel.CRITICAL) == [
            "Block transaction immediately",
            "Flag account for manual review",
            "Consider permanent account suspension",
        ]
    
    def test_high(self):
        assert generate_recommendations([], RiskLevel.HIGH)[0] == "Require additional verification"
    
    def test_medium(self):
        assert "Monitor subsequent activities closely" in generate_recommendations([], RiskLevel.MEDIUM)
    
    def test_low(self):
        assert generate_recommendations([], RiskLevel.LOW) == [
            "Proceed with standard verification",
            "Continue routine monitoring",
        ]


class TestSignalTypeRecommendations:
    """Tests for signal-type follow-ups."""
    
    def test_appended_once_per_type(self):
        signals = [_signal(SignalType.LISTING_QUALITY), _signal(SignalType.LISTING_QUALITY)]
        
        recommendations = generate_recommendations(signals, RiskLevel.LOW)
        
        assert recommendations.count("Review listing quality and pricing") == 1
    
    def test_fixed_order(self):
        """Follow-ups use a fixed type order regardless of signal order."""
        signals = [
            _signal(SignalType.LISTING_QUALITY),
            _signal(SignalType.DEVICE_FINGERPRINT),
            _signal(SignalType.COMMUNICATION),
        ]
        
        recommendations = generate_recommendations(signals, RiskLevel.MEDIUM)
        
        assert recommendations[-3:] == [
            "Review all user communications",
            "Require device verification",
            "Review listing quality and pricing",
        ]
    
    @pytest.mark.parametrize("signal_type", [SignalType.USER_BEHAVIOR, SignalType.PAYMENT])
    def test_types_without_follow_up(self, signal_type):
        recommendations = generate_recommendations([_signal(signal_type)], RiskLevel.LOW)
        assert len(recommendations) == 2
