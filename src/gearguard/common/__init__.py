"""Common utilities - logging, config, exceptions."""

from gearguard.common.logging.logger import get_logger
from gearguard.common.config import Config, get_config, reset_config
from gearguard.common.exceptions import (
    GearGuardException,
    ConfigurationError,
    ValidationError,
    NotFoundError,
    TransientError,
    EnrichmentFailure,
)

__all__ = [
    # Logging
    "get_logger",
    # Config
    "Config",
    "get_config",
    "reset_config",
    # Exceptions
    "GearGuardException",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "TransientError",
    "EnrichmentFailure",
]
