"""Configuration module - settings from the environment, rules from YAML."""

from gearguard.common.config.settings import (
    CacheBackend,
    Config,
    Environment,
    LogLevel,
    get_config,
    reset_config,
)
from gearguard.common.config.rules import (
    CommunicationRules,
    DetectionRules,
    ListingRules,
    load_detection_rules,
)

__all__ = [
    "CacheBackend",
    "Config",
    "Environment",
    "LogLevel",
    "get_config",
    "reset_config",
    "CommunicationRules",
    "DetectionRules",
    "ListingRules",
    "load_detection_rules",
]
