"""
Passerelle de cache du catalogue.

Seul point de contact avec le backend cle-valeur. Elle possede :
- le nommage des cles (movie:{id} et la cle fixe movies:all)
- la serialisation JSON des projections (pydantic)
- la tolerance aux pannes : chaque operation est fail-open

Chaque appel retourne un CacheResult qui distingue explicitement
succes, absence et echec. Aucune exception du backend ni aucune
erreur de deserialisation ne traverse cette classe : une entree
illisible est traitee comme un miss.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger
from pydantic import TypeAdapter

from cinecatalog.core.ports.cache import IKeyValueCache
from cinecatalog.core.value_objects.projections import MovieResponse

CACHE_KEY_PREFIX = "movie:"
ALL_MOVIES_KEY = "movies:all"

_MOVIE_LIST = TypeAdapter(list[MovieResponse])


class CacheStatus(Enum):
    """Issue d'une operation de cache.

    Valeurs:
        HIT: Valeur trouvee et deserialisee
        MISS: Cle absente (ou rien a supprimer)
        STORED: Valeur ecrite
        REMOVED: Cle(s) supprimee(s)
        FAILED: Erreur du backend ou de (de)serialisation, absorbee
    """

    HIT = "hit"
    MISS = "miss"
    STORED = "stored"
    REMOVED = "removed"
    FAILED = "failed"


@dataclass(frozen=True)
class CacheResult:
    """Resultat d'une operation de cache et valeur eventuelle."""

    status: CacheStatus
    value: Any = None

    @property
    def hit(self) -> bool:
        return self.status is CacheStatus.HIT

    @property
    def ok(self) -> bool:
        """True sauf en cas d'echec absorbe."""
        return self.status is not CacheStatus.FAILED


_MISS = CacheResult(CacheStatus.MISS)


def movie_key(movie_id: int) -> str:
    """Cle de cache d'un film seul."""
    return f"{CACHE_KEY_PREFIX}{movie_id}"


class CacheGateway:
    """
    Cache des projections de films, tolerant aux pannes.

    Example:
        gateway = CacheGateway(DiskKeyValueCache(".cache/catalog"))
        await gateway.cache_movie(1, response, ttl=1800)
        result = await gateway.get_cached_movie(1)
        if result.hit:
            return result.value
    """

    def __init__(self, cache: IKeyValueCache) -> None:
        """
        Args:
            cache: Backend cle-valeur (disque, Redis, ...)
        """
        self._cache = cache

    async def cache_movie(
        self, movie_id: int, response: MovieResponse, ttl: int
    ) -> CacheResult:
        """Met en cache un film seul sous movie:{id}."""
        key = movie_key(movie_id)
        try:
            payload = response.model_dump_json()
            await self._cache.set(key, payload, ttl)
        except Exception as e:
            logger.warning(f"Echec de mise en cache du film {movie_id}: {e}")
            return CacheResult(CacheStatus.FAILED)
        logger.debug(f"Film {movie_id} mis en cache (ttl={ttl}s)")
        return CacheResult(CacheStatus.STORED)

    async def get_cached_movie(self, movie_id: int) -> CacheResult:
        """Lit un film seul ; HIT avec la projection, MISS ou FAILED sinon."""
        key = movie_key(movie_id)
        try:
            payload = await self._cache.get(key)
            if payload is None:
                return _MISS
            movie = MovieResponse.model_validate_json(payload)
        except Exception as e:
            logger.warning(f"Erreur de cache pour le film {movie_id}: {e}")
            return CacheResult(CacheStatus.FAILED)
        logger.debug(f"Cache hit pour le film {movie_id}")
        return CacheResult(CacheStatus.HIT, movie)

    async def cache_all_movies(
        self, responses: list[MovieResponse], ttl: int
    ) -> CacheResult:
        """Met en cache la liste complete, ordonnee, sous la cle fixe."""
        try:
            payload = _MOVIE_LIST.dump_json(responses).decode("utf-8")
            await self._cache.set(ALL_MOVIES_KEY, payload, ttl)
        except Exception as e:
            logger.warning(f"Echec de mise en cache de la liste des films: {e}")
            return CacheResult(CacheStatus.FAILED)
        logger.debug(f"Liste de {len(responses)} films mise en cache (ttl={ttl}s)")
        return CacheResult(CacheStatus.STORED)

    async def get_all_cached_movies(self) -> CacheResult:
        """Lit la liste complete dans l'ordre ou elle a ete stockee."""
        try:
            payload = await self._cache.get(ALL_MOVIES_KEY)
            if payload is None:
                return _MISS
            movies = _MOVIE_LIST.validate_json(payload)
        except Exception as e:
            logger.warning(f"Liste des films en cache illisible: {e}")
            return CacheResult(CacheStatus.FAILED)
        logger.debug(f"Cache hit pour la liste des films ({len(movies)})")
        return CacheResult(CacheStatus.HIT, movies)

    async def invalidate_movie(self, movie_id: int) -> CacheResult:
        """Supprime movie:{id} ; REMOVED seulement si une cle existait."""
        return await self._delete(movie_key(movie_id))

    async def invalidate_all_movies(self) -> CacheResult:
        """Supprime la liste complete."""
        return await self._delete(ALL_MOVIES_KEY)

    async def _delete(self, key: str) -> CacheResult:
        try:
            removed = await self._cache.delete(key)
        except Exception as e:
            logger.warning(f"Echec d'invalidation de {key}: {e}")
            return CacheResult(CacheStatus.FAILED)
        if removed:
            logger.debug(f"Cle {key} invalidee")
            return CacheResult(CacheStatus.REMOVED, removed)
        return _MISS

    async def clear_all_movie_caches(self) -> CacheResult:
        """
        Vide toutes les entrees du catalogue.

        Collecte d'abord les cles movie:* plus la cle de liste, puis les
        supprime en un seul lot : aucune suppression pendant le parcours.
        value contient le nombre de cles supprimees (0 en cas d'echec).
        """
        try:
            keys = set(await self._cache.keys_matching(f"{CACHE_KEY_PREFIX}*"))
            keys.add(ALL_MOVIES_KEY)
            count = await self._cache.delete_many(sorted(keys))
        except Exception as e:
            logger.warning(f"Echec du vidage du cache: {e}")
            return CacheResult(CacheStatus.FAILED, 0)
        logger.info(f"{count} entrees de cache supprimees")
        return CacheResult(CacheStatus.REMOVED if count else CacheStatus.MISS, count)

    async def is_movie_cached(self, movie_id: int) -> bool:
        """Indique si un film est en cache (False si le backend echoue)."""
        try:
            return await self._cache.exists(movie_key(movie_id))
        except Exception as e:
            logger.warning(f"Impossible de verifier le cache du film {movie_id}: {e}")
            return False

    async def list_movie_keys(self) -> list[str]:
        """Cles des films en cache, triees ([] si le backend echoue)."""
        try:
            keys = await self._cache.keys_matching(f"{CACHE_KEY_PREFIX}*")
        except Exception as e:
            logger.warning(f"Impossible de lister les cles de cache: {e}")
            return []
        return sorted(keys)

    async def close(self) -> None:
        """Ferme le backend sous-jacent."""
        await self._cache.close()

