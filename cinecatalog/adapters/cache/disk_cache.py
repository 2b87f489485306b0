"""
Cache cle-valeur persistant sur disque avec TTL.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de conserver les donnees entre les redemarrages de l'application, et
run_in_executor pour ne pas bloquer la boucle d'evenements.

C'est le backend par defaut (CINECATALOG_CACHE_BACKEND=disk).
"""

from __future__ import annotations

import asyncio
import fnmatch
from functools import partial
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar

from diskcache import Cache
from loguru import logger

from cinecatalog.core.exceptions import CacheBackendError
from cinecatalog.core.ports.cache import IKeyValueCache

T = TypeVar("T")


class DiskKeyValueCache(IKeyValueCache):
    """
    Cache asynchrone avec TTL adosse a diskcache.

    Toute erreur du backend (sqlite verrouille, disque plein, timeout)
    est convertie en CacheBackendError.

    Example:
        cache = DiskKeyValueCache(cache_dir=".cache/catalog")
        await cache.set("movie:1", '{"id": 1}', ttl=1800)
        data = await cache.get("movie:1")
    """

    def __init__(self, cache_dir: str | Path = ".cache/catalog") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def _run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args, **kwargs))
        except Exception as e:
            raise CacheBackendError(f"diskcache: {e}") from e

    async def get(self, key: str) -> Optional[str]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        return await self._run(self._cache.get, key)

    async def set(self, key: str, value: str, ttl: int) -> bool:
        """
        Stocke une valeur dans le cache avec un TTL.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker (texte JSON)
            ttl: Duree de vie en secondes
        """
        return await self._run(self._cache.set, key, value, expire=ttl)

    async def delete(self, key: str) -> int:
        """Supprime une cle. Retourne 1 si une entree vivante a ete supprimee."""
        removed = await self._run(self._cache.delete, key)
        return 1 if removed else 0

    def _delete_many(self, keys: list[str]) -> int:
        removed = 0
        with self._cache.transact():
            for key in keys:
                if self._cache.delete(key):
                    removed += 1
        return removed

    async def delete_many(self, keys: Iterable[str]) -> int:
        """Supprime un lot de cles dans une seule transaction diskcache."""
        keys = list(keys)
        if not keys:
            return 0
        return await self._run(self._delete_many, keys)

    def _keys_matching(self, pattern: str) -> set[str]:
        # iterkeys() liste aussi les entrees expirees non encore purgees
        candidates = [
            key
            for key in self._cache.iterkeys()
            if isinstance(key, str) and fnmatch.fnmatchcase(key, pattern)
        ]
        return {key for key in candidates if key in self._cache}

    async def keys_matching(self, pattern: str) -> set[str]:
        """Retourne les cles vivantes correspondant au motif glob."""
        return await self._run(self._keys_matching, pattern)

    async def exists(self, key: str) -> bool:
        """Indique si la cle est presente et non expiree."""
        return await self._run(self._cache.__contains__, key)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        await self._run(self._cache.clear)

    async def close(self) -> None:
        """Ferme la connexion au cache (a appeler a l'arret)."""
        self._cache.close()
        logger.debug("Cache disque ferme")
