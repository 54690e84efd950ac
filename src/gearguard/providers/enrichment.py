"""Enrichment providers - pluggable lookups behind the analyzers.

Real IP reputation, device-fingerprint and message-history services are
external. The defaults here are no-op implementations so that a provider
can be substituted without touching the analyzers or the scorer.

Providers signal a failed best-effort lookup by raising EnrichmentFailure.
"""

from abc import ABC, abstractmethod
from typing import List

from gearguard.common.constants import CommunicationDefaults
from gearguard.data.schemas.profile import CommunicationPatterns, DeviceFingerprint
from gearguard.data.schemas.signal import FraudSignal


class IPReputationProvider(ABC):
    """VPN/proxy detection and IP location risk."""
    
    name: str = "ip_reputation"
    
    @abstractmethod
    async def is_vpn_or_proxy(self, ip_address: str) -> bool:
        """Return True when the address belongs to a VPN or proxy service."""
    
    @abstractmethod
    async def location_signals(self, ip_address: str, user_id: str) -> List[FraudSignal]:
        """Signals for location mismatches against the user's history."""


class DeviceFingerprintProvider(ABC):
    """Device fingerprint reputation and history."""
    
    name: str = "device_fingerprint"
    
    @abstractmethod
    async def analyze(self, fingerprint: str) -> List[FraudSignal]:
        """Signals for a fingerprint, e.g. reuse across many accounts."""
    
    @abstractmethod
    async def fingerprints_for_user(self, user_id: str) -> List[DeviceFingerprint]:
        """Devices previously observed for the user."""


class CommunicationPatternProvider(ABC):
    """Aggregated message-history statistics."""
    
    name: str = "communication_patterns"
    
    @abstractmethod
    async def patterns_for_user(self, user_id: str) -> CommunicationPatterns:
        """Average response time, message length and politeness."""


class NullIPReputationProvider(IPReputationProvider):
    """Reports every address as clean."""
    
    async def is_vpn_or_proxy(self, ip_address: str) -> bool:
        return False
    
    async def location_signals(self, ip_address: str, user_id: str) -> List[FraudSignal]:
        return []


class NullDeviceFingerprintProvider(DeviceFingerprintProvider):
    """Knows no devices."""
    
    async def analyze(self, fingerprint: str) -> List[FraudSignal]:
        return []
    
    async def fingerprints_for_user(self, user_id: str) -> List[DeviceFingerprint]:
        return []


class StaticCommunicationPatternProvider(CommunicationPatternProvider):
    """Returns the same patterns for every user."""
    
    def __init__(
        self,
        response_time_hours: float = CommunicationDefaults.RESPONSE_TIME_HOURS,
        message_length: float = CommunicationDefaults.MESSAGE_LENGTH,
        politeness_score: float = CommunicationDefaults.POLITENESS_SCORE,
    ):
        self._patterns = CommunicationPatterns(
            response_time_hours=response_time_hours,
            message_length=message_length,
            politeness_score=politeness_score,
        )
    
    async def patterns_for_user(self, user_id: str) -> CommunicationPatterns:
        return self._patterns
