"""Shared pytest fixtures."""

import pytest

from gearguard.cache.store import MemoryCacheStore
from gearguard.governance.audit.store import InMemoryAuditSink
from gearguard.orchestration.engine import FraudDetectionEngine
from gearguard.providers.enrichment import StaticCommunicationPatternProvider

from tests.fixtures.marketplace import FakeClock


@pytest.fixture
def clock():
    """Clock frozen at the fixture NOW."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def audit_sink():
    return InMemoryAuditSink()


@pytest.fixture
def build_engine(clock, cache, audit_sink):
    """Factory for engines over a given repository."""
    
    def _build(repository, politeness_score: float = 0.7, **kwargs):
        return FraudDetectionEngine(
            repository=repository,
            cache=cache,
            audit_sink=audit_sink,
            clock=clock,
            communication_provider=StaticCommunicationPatternProvider(
                politeness_score=politeness_score
            ),
            **kwargs,
        )
    
    return _build
