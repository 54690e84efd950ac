"""Cache backends."""

from gearguard.cache.store import CacheStore, MemoryCacheStore, RedisCacheStore, cache_key

__all__ = ["CacheStore", "MemoryCacheStore", "RedisCacheStore", "cache_key"]
