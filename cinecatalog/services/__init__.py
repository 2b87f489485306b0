"""
Couche application : orchestration du catalogue.

- CacheGateway : cles, serialisation et tolerance aux pannes du cache
- CatalogService : lecture cache-aside et invalidation sur ecriture
"""

from cinecatalog.services.cache_gateway import (
    ALL_MOVIES_KEY,
    CACHE_KEY_PREFIX,
    CacheGateway,
    CacheResult,
    CacheStatus,
)
from cinecatalog.services.catalog import CatalogService

__all__ = [
    "ALL_MOVIES_KEY",
    "CACHE_KEY_PREFIX",
    "CacheGateway",
    "CacheResult",
    "CacheStatus",
    "CatalogService",
]
