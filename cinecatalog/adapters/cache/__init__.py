"""Backends du cache cle-valeur."""

from cinecatalog.adapters.cache.disk_cache import DiskKeyValueCache
from cinecatalog.adapters.cache.redis_cache import RedisKeyValueCache

__all__ = ["DiskKeyValueCache", "RedisKeyValueCache"]
