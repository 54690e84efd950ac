"""Pluggable enrichment providers."""

from gearguard.providers.enrichment import (
    CommunicationPatternProvider,
    DeviceFingerprintProvider,
    IPReputationProvider,
    NullDeviceFingerprintProvider,
    NullIPReputationProvider,
    StaticCommunicationPatternProvider,
)

__all__ = [
    "CommunicationPatternProvider",
    "DeviceFingerprintProvider",
    "IPReputationProvider",
    "NullDeviceFingerprintProvider",
    "NullIPReputationProvider",
    "StaticCommunicationPatternProvider",
]
