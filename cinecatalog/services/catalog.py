"""
Service de catalogue : lecture cache-aside et invalidation sur ecriture.

Orchestre les repositories (source de verite) et la passerelle de cache.

Lectures :
- un film : cache d'abord, store en cas de miss puis remplissage (TTL film)
- la liste : meme principe avec la cle de liste (TTL liste < TTL film)
- un film avec ses critiques : toujours depuis le store, jamais en cache

Ecritures (create/update/delete) :
- le store d'abord ; un echec du store interrompt l'operation sans toucher au cache
- puis invalidation de l'entree du film et de la liste, chacune tentee
  independamment, avant de rendre la main
- une fois le store sollicite, le reste du pipeline tourne sous
  asyncio.shield : une annulation de l'appelant ne peut pas laisser
  une ecriture commitee sans son invalidation

Les erreurs de cache ne remontent jamais (absorbees par CacheGateway) ;
StoreError et MovieNotFoundError remontent telles quelles.
"""

import asyncio
import dataclasses
from datetime import datetime, timezone
from typing import Any, Coroutine, TypeVar

from loguru import logger

from cinecatalog.core.entities.media import Movie
from cinecatalog.core.exceptions import InvalidRequestError, MovieNotFoundError
from cinecatalog.core.ports.repositories import IMovieRepository, IReviewRepository
from cinecatalog.core.value_objects.cache_policy import CachePolicy
from cinecatalog.core.value_objects.projections import (
    MovieResponse,
    ReviewResponse,
    ReviewSummary,
)
from cinecatalog.core.value_objects.requests import MovieRequest, ReviewRequest
from cinecatalog.services.cache_gateway import CacheGateway

T = TypeVar("T")


def _log_abandoned_failure(task: asyncio.Task) -> None:
    """Journalise l'echec d'une ecriture dont l'appelant a ete annule."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error(f"Ecriture abandonnee par l'appelant en echec: {error!r}")


class CatalogService:
    """
    Point d'entree unique des operations du catalogue.

    Les collaborateurs sont injectes (container DI ou tests) : le service
    ne reference aucun singleton global.
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        review_repo: IReviewRepository,
        cache: CacheGateway,
        policy: CachePolicy = CachePolicy(),
    ) -> None:
        """
        Initialise le service.

        Args:
            movie_repo: Repository des films
            review_repo: Repository des critiques
            cache: Passerelle de cache
            policy: TTL des entrees (film seul, liste complete)
        """
        self._movie_repo = movie_repo
        self._review_repo = review_repo
        self._cache = cache
        self._policy = policy
        self._pending: set[asyncio.Task] = set()

    @property
    def policy(self) -> CachePolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Ecritures
    # ------------------------------------------------------------------

    async def create_movie(self, request: MovieRequest) -> MovieResponse:
        """
        Cree un film.

        Le film cree est mis en cache (best-effort) et la liste complete
        est invalidee dans tous les cas, meme si la mise en cache a echoue.
        """
        logger.info(f"Creation du film: {request.title}")
        return await self._shielded(self._create(request.to_entity()))

    async def _create(self, movie: Movie) -> MovieResponse:
        saved = await self._movie_repo.save(movie)
        logger.info(f"Film cree avec l'ID: {saved.id}")

        response = MovieResponse.from_entity(saved)
        await self._cache.cache_movie(saved.id, response, self._policy.movie_ttl)
        await self._cache.invalidate_all_movies()
        return response

    async def update_movie(self, movie_id: int, request: MovieRequest) -> MovieResponse:
        """
        Remplace integralement un film existant.

        created_at est conserve, updated_at vaut maintenant ; tous les
        autres champs proviennent de la requete.

        Raises:
            MovieNotFoundError: si le film n'existe pas
        """
        logger.info(f"Mise a jour du film {movie_id}")
        existing = await self._get_existing(movie_id)

        updated = dataclasses.replace(
            request.to_entity(),
            id=movie_id,
            created_at=existing.created_at,
            updated_at=datetime.now(timezone.utc),
        )
        response = await self._shielded(self._update(movie_id, updated))
        logger.info(f"Film mis a jour: {response.title}")
        return response

    async def _update(self, movie_id: int, movie: Movie) -> MovieResponse:
        saved = await self._movie_repo.save(movie)
        if saved is None:
            # Supprime entre la lecture et l'ecriture
            logger.info(f"Film {movie_id} supprime avant sa mise a jour")
            raise MovieNotFoundError(movie_id)
        await self._invalidate(movie_id)
        return MovieResponse.from_entity(saved)

    async def delete_movie(self, movie_id: int) -> None:
        """
        Supprime un film et ses critiques.

        Les critiques sont supprimees avant le film ; si leur suppression
        echoue, le film n'est pas touche.

        Raises:
            MovieNotFoundError: si le film n'existe pas (pas de suppression idempotente)
        """
        logger.info(f"Suppression du film {movie_id}")
        await self._get_existing(movie_id)
        await self._shielded(self._delete(movie_id))
        logger.info(f"Film {movie_id} supprime")

    async def _delete(self, movie_id: int) -> None:
        removed_reviews = await self._review_repo.delete_by_movie(movie_id)
        logger.debug(f"{removed_reviews} critiques supprimees pour le film {movie_id}")
        await self._movie_repo.delete_by_id(movie_id)
        await self._invalidate(movie_id)

    async def _shielded(self, pipeline: Coroutine[Any, Any, T]) -> T:
        """
        Execute un pipeline d'ecriture a l'abri de l'annulation de l'appelant.

        Si l'appelant est annule, la tache continue ; son eventuel echec
        est journalise puisque plus personne ne l'attend.
        """
        task = asyncio.ensure_future(pipeline)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            task.add_done_callback(_log_abandoned_failure)
            raise

    async def _invalidate(self, movie_id: int) -> None:
        """Invalide le film puis la liste ; le second appel ne depend pas du premier."""
        await self._cache.invalidate_movie(movie_id)
        await self._cache.invalidate_all_movies()

    async def add_review(self, movie_id: int, request: ReviewRequest) -> ReviewResponse:
        """
        Ajoute une critique a un film existant.

        Les critiques ne font pas partie de la forme mise en cache :
        aucune invalidation n'est necessaire.

        Raises:
            MovieNotFoundError: si le film n'existe pas
        """
        await self._get_existing(movie_id)
        review = await self._review_repo.save(request.to_entity(movie_id))
        logger.info(f"Critique {review.id} ajoutee au film {movie_id}")
        return ReviewResponse.from_entity(review)

    async def clear_caches(self) -> int:
        """Vide toutes les entrees de cache du catalogue, sans toucher au store."""
        logger.info("Vidage de tous les caches films")
        result = await self._cache.clear_all_movie_caches()
        return result.value or 0

    # ------------------------------------------------------------------
    # Lectures avec cache
    # ------------------------------------------------------------------

    async def get_movie(self, movie_id: int) -> MovieResponse:
        """
        Recupere un film (cache-aside).

        Raises:
            MovieNotFoundError: si le film n'existe pas (jamais mis en cache)
        """
        cached = await self._cache.get_cached_movie(movie_id)
        if cached.hit:
            return cached.value

        movie = await self._get_existing(movie_id)
        response = MovieResponse.from_entity(movie)
        await self._cache.cache_movie(movie_id, response, self._policy.movie_ttl)
        logger.info(f"Film trouve: {response.title}")
        return response

    async def get_all_movies(self) -> list[MovieResponse]:
        """
        Recupere tous les films dans l'ordre du store (cache-aside).

        Une panne du store remonte : jamais de liste vide silencieuse.
        """
        cached = await self._cache.get_all_cached_movies()
        if cached.hit:
            return cached.value

        movies = await self._movie_repo.list_all()
        responses = [MovieResponse.from_entity(movie) for movie in movies]
        await self._cache.cache_all_movies(responses, self._policy.all_movies_ttl)
        logger.info(f"{len(responses)} films recuperes depuis le store")
        return responses

    # ------------------------------------------------------------------
    # Lectures sans cache
    # ------------------------------------------------------------------

    async def get_movie_with_reviews(self, movie_id: int) -> MovieResponse:
        """
        Recupere un film et ses critiques, toujours depuis le store.

        Raises:
            MovieNotFoundError: si le film n'existe pas
        """
        movie = await self._get_existing(movie_id)
        reviews = await self._review_repo.list_by_movie(movie_id)

        response = MovieResponse.from_entity(movie)
        response.reviews = [ReviewResponse.from_entity(r) for r in reviews]
        return response

    async def get_review_summary(self, movie_id: int) -> ReviewSummary:
        """Nombre de critiques et note moyenne d'un film."""
        await self._get_existing(movie_id)
        count = await self._review_repo.count_by_movie(movie_id)
        average = await self._review_repo.average_rating(movie_id)
        return ReviewSummary(movie_id=movie_id, review_count=count, average_rating=average)

    async def search_by_title(self, title: str) -> list[MovieResponse]:
        """Recherche les films dont le titre contient title."""
        logger.info(f"Recherche de films par titre: {title}")
        movies = await self._movie_repo.search_by_title(title)
        return [MovieResponse.from_entity(movie) for movie in movies]

    async def get_movies_by_genre(self, genre: str) -> list[MovieResponse]:
        """Liste les films d'un genre."""
        logger.info(f"Films du genre: {genre}")
        movies = await self._movie_repo.list_by_genre(genre)
        return [MovieResponse.from_entity(movie) for movie in movies]

    async def get_movies_with_min_rating(self, min_rating: float) -> list[MovieResponse]:
        """Liste les films notes au moins min_rating, meilleurs en premier."""
        if not 0.0 <= min_rating <= 10.0:
            raise InvalidRequestError("min_rating must be between 0.0 and 10.0")
        movies = await self._movie_repo.list_by_min_rating(min_rating)
        return [MovieResponse.from_entity(movie) for movie in movies]

    async def get_top_rated_movies(self, limit: int = 10) -> list[MovieResponse]:
        """Liste les limit films les mieux notes."""
        if limit < 1:
            raise InvalidRequestError("limit must be at least 1")
        logger.info(f"Top {limit} des films les mieux notes")
        movies = await self._movie_repo.list_top_rated(limit)
        return [MovieResponse.from_entity(movie) for movie in movies]

    # ------------------------------------------------------------------
    # Introspection du cache
    # ------------------------------------------------------------------

    async def is_movie_cached(self, movie_id: int) -> bool:
        return await self._cache.is_movie_cached(movie_id)

    async def list_cached_keys(self) -> list[str]:
        return await self._cache.list_movie_keys()

    async def _get_existing(self, movie_id: int) -> Movie:
        movie = await self._movie_repo.get_by_id(movie_id)
        if movie is None:
            logger.info(f"Film introuvable: {movie_id}")
            raise MovieNotFoundError(movie_id)
        return movie
