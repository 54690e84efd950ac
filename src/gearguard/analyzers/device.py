"""Device & Location Analyzer - IP, user agent and fingerprint checks.

Reputation lookups are best-effort. A provider raising EnrichmentFailure
costs only its own signal; the rest of the analysis continues.
"""

import ipaddress
import re
from typing import List, Optional

from gearguard.common.constants import DeviceTrustConstants
from gearguard.common.exceptions import EnrichmentFailure
from gearguard.common.logging import get_logger
from gearguard.core.types import Severity, SignalType
from gearguard.data.schemas.signal import FraudSignal
from gearguard.providers.enrichment import (
    DeviceFingerprintProvider,
    IPReputationProvider,
    NullDeviceFingerprintProvider,
    NullIPReputationProvider,
)


logger = get_logger(__name__)


SUSPICIOUS_USER_AGENT_PATTERNS = [
    re.compile(r"bot", re.IGNORECASE),
    re.compile(r"crawler", re.IGNORECASE),
    re.compile(r"spider", re.IGNORECASE),
    re.compile(r"scraper", re.IGNORECASE),
    re.compile(r"^$"),
]


def mask_ip(ip_address: str) -> str:
    """Keep only the first two octets of an IPv4 address."""
    parts = ip_address.split(".")
    if len(parts) == 4:
        return f"{parts[0]}.{parts[1]}.xxx.xxx"
    return "xxx.xxx.xxx.xxx"


def is_private_or_reserved(ip_address: str) -> bool:
    """True for private, loopback, link-local or reserved addresses."""
    try:
        address = ipaddress.ip_address(ip_address.strip())
    except ValueError:
        return False
    
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_reserved
    )


class DeviceLocationAnalyzer:
    """Surfaces device and network evidence.
    
    Responsibilities:
    - Private/reserved IP detection
    - VPN/proxy and location checks via IPReputationProvider
    - Fingerprint checks via DeviceFingerprintProvider
    - Automated user agent detection
    """
    
    def __init__(
        self,
        ip_provider: Optional[IPReputationProvider] = None,
        device_provider: Optional[DeviceFingerprintProvider] = None,
    ):
        self._ip_provider = ip_provider or NullIPReputationProvider()
        self._device_provider = device_provider or NullDeviceFingerprintProvider()
    
    async def analyze(
        self,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        device_fingerprint: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[FraudSignal]:
        """Run every check whose input is present.
        
        Args:
            ip_address: Client IP
            user_agent: Client user agent; None skips the check, "" is suspicious
            device_fingerprint: Client fingerprint
            user_id: Acting user, enables location history checks
            
        Returns:
            Signals in check order: IP, fingerprint, user agent
        """
        signals: List[FraudSignal] = []
        
        if ip_address is not None:
            signals.extend(await self.analyze_ip(ip_address, user_id))
        
        if device_fingerprint:
            signals.extend(await self.analyze_fingerprint(device_fingerprint))
        
        if user_agent is not None:
            signals.extend(self.analyze_user_agent(user_agent))
        
        return signals
    
    async def analyze_ip(self, ip_address: str, user_id: Optional[str] = None) -> List[FraudSignal]:
        signals: List[FraudSignal] = []
        masked = mask_ip(ip_address)
        
        if is_private_or_reserved(ip_address):
            signals.append(FraudSignal(
                type=SignalType.DEVICE_FINGERPRINT,
                severity=Severity.LOW,
                confidence=0.5,
                description="Private IP address detected",
                metadata={"ip_address": masked},
            ))
        
        try:
            if await self._ip_provider.is_vpn_or_proxy(ip_address):
                signals.append(FraudSignal(
                    type=SignalType.DEVICE_FINGERPRINT,
                    severity=Severity.MEDIUM,
                    confidence=0.8,
                    description="Using VPN or proxy service",
                    metadata={"ip_address": masked},
                ))
        except EnrichmentFailure as e:
            self._log_enrichment_failure(e, "vpn_check")
        
        if user_id is not None:
            try:
                signals.extend(await self._ip_provider.location_signals(ip_address, user_id))
            except EnrichmentFailure as e:
                self._log_enrichment_failure(e, "location_check")
        
        return signals
    
    async def analyze_fingerprint(self, device_fingerprint: str) -> List[FraudSignal]:
        try:
            return list(await self._device_provider.analyze(device_fingerprint))
        except EnrichmentFailure as e:
            self._log_enrichment_failure(e, "fingerprint_check")
            return []
    
    def analyze_user_agent(self, user_agent: str) -> List[FraudSignal]:
        if not any(p.search(user_agent) for p in SUSPICIOUS_USER_AGENT_PATTERNS):
            return []
        
        return [FraudSignal(
            type=SignalType.DEVICE_FINGERPRINT,
            severity=Severity.HIGH,
            confidence=0.9,
            description="Suspicious user agent detected",
            metadata={"user_agent": user_agent[:DeviceTrustConstants.USER_AGENT_METADATA_LENGTH]},
        )]
    
    def _log_enrichment_failure(self, error: EnrichmentFailure, check: str) -> None:
        logger.warning(
            f"Enrichment lookup failed, omitting {check} signal: {error.message}",
            extra={"check": check, **error.details},
        )
