"""Signal analyzers. Each returns a list of FraudSignal and has no side effects."""

from gearguard.analyzers.behavior import BehaviorAnalyzer
from gearguard.analyzers.communication import CommunicationAnalyzer
from gearguard.analyzers.device import DeviceLocationAnalyzer
from gearguard.analyzers.listing import ListingQualityAnalyzer
from gearguard.analyzers.payment import PaymentAnalyzer
from gearguard.analyzers.velocity import VelocityPatternAnalyzer

__all__ = [
    "BehaviorAnalyzer",
    "CommunicationAnalyzer",
    "DeviceLocationAnalyzer",
    "ListingQualityAnalyzer",
    "PaymentAnalyzer",
    "VelocityPatternAnalyzer",
]
