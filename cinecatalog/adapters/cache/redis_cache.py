"""
Backend Redis du cache cle-valeur.

Active avec CINECATALOG_CACHE_BACKEND=redis et CINECATALOG_REDIS_URL.
Le client redis.asyncio est natif asynchrone ; il est cree paresseusement
au premier appel pour etre lie a la boucle d'evenements courante.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import redis.asyncio as redis
from loguru import logger
from redis.exceptions import RedisError

from cinecatalog.core.exceptions import CacheBackendError
from cinecatalog.core.ports.cache import IKeyValueCache


class RedisKeyValueCache(IKeyValueCache):
    """
    Cache Redis avec TTL.

    Les erreurs Redis (connexion refusee, timeout, ...) sont converties
    en CacheBackendError.
    """

    SCAN_COUNT = 100

    def __init__(self, redis_url: str, client: Optional[Any] = None) -> None:
        """
        Initialise le backend Redis.

        Args:
            redis_url: URL de connexion (ex: redis://localhost:6379/0)
            client: Client deja construit (tests : fakeredis)
        """
        self._redis_url = redis_url
        self._client = client

    def _get_client(self) -> Any:
        """Retourne le client Redis, le cree si necessaire (lazy init)."""
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                health_check_interval=30,
            )
        return self._client

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self._get_client().get(key)
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis GET {key}: {e}") from e

    async def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            return bool(await self._get_client().set(key, value, ex=ttl))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis SET {key}: {e}") from e

    async def delete(self, key: str) -> int:
        try:
            return int(await self._get_client().delete(key))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis DEL {key}: {e}") from e

    async def delete_many(self, keys: Iterable[str]) -> int:
        """Supprime le lot en une seule commande DEL."""
        keys = list(keys)
        if not keys:
            return 0
        try:
            return int(await self._get_client().delete(*keys))
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis DEL ({len(keys)} cles): {e}") from e

    async def keys_matching(self, pattern: str) -> set[str]:
        """Parcourt l'espace de cles avec SCAN (non bloquant pour le serveur)."""
        try:
            return {
                key
                async for key in self._get_client().scan_iter(
                    match=pattern, count=self.SCAN_COUNT
                )
            }
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis SCAN {pattern}: {e}") from e

    async def exists(self, key: str) -> bool:
        try:
            return await self._get_client().exists(key) > 0
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis EXISTS {key}: {e}") from e

    async def ping(self) -> bool:
        """Verifie la disponibilite du serveur."""
        try:
            return bool(await self._get_client().ping())
        except (RedisError, OSError) as e:
            raise CacheBackendError(f"redis PING: {e}") from e

    async def close(self) -> None:
        """Ferme la connexion Redis."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Client Redis ferme")
