"""Configuration management - Centralized configuration for GearGuard.

Provides environment-aware configuration with sensible defaults.
All configuration is loaded from environment variables with fallbacks.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from gearguard.common.constants import CacheConstants
from gearguard.common.exceptions import ConfigurationError


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CacheBackend(str, Enum):
    """Cache store backends."""
    MEMORY = "memory"
    REDIS = "redis"


def _env_enum(enum_cls, name: str, default: str):
    raw = os.getenv(name, default)
    try:
        return enum_cls(raw)
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for {name}: {raw!r}",
            details={"allowed": [member.value for member in enum_cls]},
        )


def _env_number(cast, name: str, default: Optional[str]):
    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be numeric, got {raw!r}")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    return Path(raw) if raw else None


@dataclass
class Config:
    """Central configuration object for GearGuard.
    
    All settings can be overridden via environment variables prefixed with GEARGUARD_.
    
    Example:
        GEARGUARD_ENVIRONMENT=production
        GEARGUARD_CACHE_BACKEND=redis
        GEARGUARD_REDIS_URL=redis://cache:6379/0
        GEARGUARD_ASSESSMENT_TIMEOUT_SECONDS=2.5
    """
    
    # Core settings
    environment: Environment = field(
        default_factory=lambda: _env_enum(
            Environment, "GEARGUARD_ENVIRONMENT", "development"
        )
    )
    debug: bool = field(
        default_factory=lambda: _env_flag("GEARGUARD_DEBUG", "false")
    )
    log_level: LogLevel = field(
        default_factory=lambda: _env_enum(LogLevel, "GEARGUARD_LOG_LEVEL", "INFO")
    )
    
    # Cache settings
    cache_backend: CacheBackend = field(
        default_factory=lambda: _env_enum(
            CacheBackend, "GEARGUARD_CACHE_BACKEND", "memory"
        )
    )
    redis_url: Optional[str] = field(
        default_factory=lambda: os.getenv("GEARGUARD_REDIS_URL")
    )
    cache_ttl_seconds: int = field(
        default_factory=lambda: _env_number(
            int, "GEARGUARD_CACHE_TTL_SECONDS", str(CacheConstants.DEFAULT_TTL_SECONDS)
        )
    )
    cache_key_prefix: str = field(
        default_factory=lambda: os.getenv("GEARGUARD_CACHE_KEY_PREFIX", "")
    )
    
    # Audit settings
    audit_log_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("GEARGUARD_AUDIT_LOG_DIR", "./logs/audit")
        )
    )
    audit_hash_chain: bool = field(
        default_factory=lambda: _env_flag("GEARGUARD_AUDIT_HASH_CHAIN", "true")
    )
    
    # Assessment settings
    assessment_timeout_seconds: Optional[float] = field(
        default_factory=lambda: _env_number(
            float, "GEARGUARD_ASSESSMENT_TIMEOUT_SECONDS", None
        )
    )
    rules_file: Optional[Path] = field(
        default_factory=lambda: _optional_path("GEARGUARD_RULES_FILE")
    )
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.cache_ttl_seconds is None or self.cache_ttl_seconds <= 0:
            raise ConfigurationError(
                "GEARGUARD_CACHE_TTL_SECONDS must be a positive integer"
            )
        
        if self.cache_backend == CacheBackend.REDIS and not self.redis_url:
            raise ConfigurationError(
                "GEARGUARD_REDIS_URL must be set when using the redis cache backend"
            )
        
        if self.assessment_timeout_seconds is not None and self.assessment_timeout_seconds <= 0:
            raise ConfigurationError(
                "GEARGUARD_ASSESSMENT_TIMEOUT_SECONDS must be positive when set"
            )
        
        # Warn about debug in production
        if self.environment == Environment.PRODUCTION and self.debug:
            import warnings
            warnings.warn(
                "Debug mode is enabled in production environment",
                RuntimeWarning,
                stacklevel=2
            )
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION
    
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.
    
    Returns:
        Config: The global configuration singleton.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
