"""Engine wiring from configuration.

Environment variables (see gearguard.common.config.settings):
- GEARGUARD_CACHE_BACKEND: "memory" (default) or "redis"
- GEARGUARD_REDIS_URL: Redis URL for the redis backend
- GEARGUARD_AUDIT_LOG_DIR: Directory for JSONL audit files
- GEARGUARD_RULES_FILE: Optional detection rules YAML
"""

from typing import Optional

from gearguard.cache.store import CacheStore, MemoryCacheStore, RedisCacheStore
from gearguard.common.config.rules import load_detection_rules
from gearguard.common.config.settings import CacheBackend, Config, get_config
from gearguard.common.logging import get_logger
from gearguard.core.clock import Clock, utc_now
from gearguard.data.repository import AccountRepository
from gearguard.governance.audit.store import AuditSink, FileAuditSink
from gearguard.orchestration.engine import EngineSettings, FraudDetectionEngine
from gearguard.providers.enrichment import (
    CommunicationPatternProvider,
    DeviceFingerprintProvider,
    IPReputationProvider,
)


logger = get_logger(__name__)


def create_cache_store(config: Config, clock: Clock = utc_now) -> CacheStore:
    """Factory method to create the cache backend named by configuration."""
    if config.cache_backend == CacheBackend.REDIS:
        logger.info("Using Redis cache store")
        return RedisCacheStore.from_url(config.redis_url)
    return MemoryCacheStore(clock=clock)


def create_audit_sink(config: Config) -> AuditSink:
    return FileAuditSink(
        log_dir=config.audit_log_dir,
        enable_hash_chain=config.audit_hash_chain,
    )


def create_engine(
    repository: AccountRepository,
    config: Optional[Config] = None,
    clock: Clock = utc_now,
    cache: Optional[CacheStore] = None,
    audit_sink: Optional[AuditSink] = None,
    ip_provider: Optional[IPReputationProvider] = None,
    device_provider: Optional[DeviceFingerprintProvider] = None,
    communication_provider: Optional[CommunicationPatternProvider] = None,
) -> FraudDetectionEngine:
    """Build a FraudDetectionEngine from configuration.
    
    Args:
        repository: Marketplace history access
        config: Configuration; the process default when omitted
        clock: Time source shared by cache and analyzers
        cache: Overrides the configured cache backend
        audit_sink: Overrides the configured file sink
        ip_provider: VPN/IP reputation provider (no-op default)
        device_provider: Device fingerprint provider (no-op default)
        communication_provider: Message statistics provider (static default)
        
    Returns:
        Configured engine
    """
    config = config or get_config()
    
    return FraudDetectionEngine(
        repository=repository,
        cache=cache or create_cache_store(config, clock),
        audit_sink=audit_sink or create_audit_sink(config),
        clock=clock,
        settings=EngineSettings(
            cache_ttl_seconds=config.cache_ttl_seconds,
            cache_key_prefix=config.cache_key_prefix,
            assessment_timeout_seconds=config.assessment_timeout_seconds,
        ),
        rules=load_detection_rules(config.rules_file),
        ip_provider=ip_provider,
        device_provider=device_provider,
        communication_provider=communication_provider,
    )
