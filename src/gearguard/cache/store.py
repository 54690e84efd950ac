"""Cache Store - TTL key/value storage for profiles and monitoring sweeps.

Values are JSON strings so that in-process and Redis backends behave the
same. Concurrent misses for one key may recompute twice; entries are
idempotent so no lock is taken.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from redis import asyncio as redis_asyncio
from redis.exceptions import RedisError

from gearguard.common.exceptions import TransientError
from gearguard.core.clock import Clock, utc_now


class CacheStore(ABC):
    """Abstract base class for cache backends."""
    
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the cached value or None when absent or expired."""
    
    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ttl_seconds."""
    
    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""


class MemoryCacheStore(CacheStore):
    """In-process TTL cache driven by an injectable clock."""
    
    def __init__(self, clock: Clock = utc_now):
        self._clock = clock
        self._entries: Dict[str, Tuple[str, datetime]] = {}
    
    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        
        value, expires_at = entry
        if self._clock() >= expires_at:
            # Lazy expiry
            self._entries.pop(key, None)
            return None
        return value
    
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        now = self._clock()
        self._sweep(now)
        self._entries[key] = (value, now + timedelta(seconds=ttl_seconds))
    
    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)
    
    def _sweep(self, now: datetime) -> None:
        """Drop every expired entry, not just the key being touched."""
        expired = [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
    
    def __len__(self) -> int:
        return len(self._entries)


class RedisCacheStore(CacheStore):
    """Redis-backed cache using the asyncio client.
    
    Redis failures surface as TransientError so callers choose their own
    fail-open or fail-closed policy.
    """
    
    def __init__(self, client: redis_asyncio.Redis):
        self._client = client
    
    @classmethod
    def from_url(cls, url: str) -> "RedisCacheStore":
        return cls(redis_asyncio.from_url(url, decode_responses=True))
    
    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self._client.get(key)
        except RedisError as e:
            raise TransientError(f"Cache read failed for {key}", details={"error": str(e)})
        
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value
    
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self._client.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            raise TransientError(f"Cache write failed for {key}", details={"error": str(e)})
    
    async def delete(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except RedisError as e:
            raise TransientError(f"Cache delete failed for {key}", details={"error": str(e)})
    
    async def close(self) -> None:
        await self._client.aclose()


def cache_key(namespace: str, user_id: str, prefix: str = "") -> str:
    """Build a namespaced key such as user_profile:{user_id}."""
    key = f"{namespace}:{user_id}"
    return f"{prefix}:{key}" if prefix else key
