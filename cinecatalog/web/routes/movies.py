"""
Routes de l'API films — /api/v1/movies.

Couche fine : validation des entrees (pydantic), appel du CatalogService,
enveloppe de reponse. Les routes a chemin fixe (/search, /cache, ...)
sont declarees avant les routes /{movie_id}.
"""

import asyncio
import logging
from http import HTTPStatus
from typing import AsyncIterator

from fastapi import APIRouter, Query, Response
from fastapi.responses import StreamingResponse

from ...core.value_objects.projections import MovieResponse
from ...core.value_objects.requests import MovieRequest, ReviewRequest
from ..deps import CatalogDep
from ..schemas import build_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/movies", tags=["movies"])

# Delai entre deux evenements du flux /stream
STREAM_DELAY_SECONDS = 0.5


@router.post("", status_code=HTTPStatus.CREATED)
async def create_movie(request: MovieRequest, service: CatalogDep):
    """Cree un film."""
    logger.info("Creation demandee: %s", request.title)
    movie = await service.create_movie(request)
    return build_response("Movie created successfully", movie, HTTPStatus.CREATED)


@router.get("")
async def get_all_movies(service: CatalogDep):
    """Liste tous les films (servie depuis le cache si possible)."""
    movies = await service.get_all_movies()
    return build_response("Movies retrieved successfully", movies)


@router.get("/stream")
async def stream_movies(service: CatalogDep):
    """Diffuse la liste des films en Server-Sent Events, un film par evenement."""
    logger.info("Diffusion de tous les films")
    movies = await service.get_all_movies()
    return StreamingResponse(
        _movie_events(movies),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )


async def _movie_events(movies: list[MovieResponse]) -> AsyncIterator[str]:
    for movie in movies:
        await asyncio.sleep(STREAM_DELAY_SECONDS)
        yield f"data: {movie.model_dump_json(by_alias=True)}\n\n"


@router.get("/search")
async def search_movies(service: CatalogDep, title: str = Query(min_length=1)):
    """Recherche par titre (sous-chaine, insensible a la casse)."""
    movies = await service.search_by_title(title)
    return build_response("Search results", movies)


@router.get("/genre/{genre}")
async def get_movies_by_genre(genre: str, service: CatalogDep):
    """Films d'un genre."""
    movies = await service.get_movies_by_genre(genre)
    return build_response("Movies by genre retrieved", movies)


@router.get("/top-rated")
async def get_top_rated_movies(service: CatalogDep, limit: int = 10):
    """Les films les mieux notes."""
    movies = await service.get_top_rated_movies(limit)
    return build_response("Top rated movies retrieved", movies)


@router.get("/rating")
async def get_movies_with_min_rating(
    service: CatalogDep, min_rating: float = Query(alias="min")
):
    """Films notes au moins `min`."""
    movies = await service.get_movies_with_min_rating(min_rating)
    return build_response("Movies by minimum rating retrieved", movies)


@router.delete("/cache")
async def clear_caches(service: CatalogDep):
    """Vide toutes les entrees de cache du catalogue."""
    count = await service.clear_caches()
    return build_response("Cache cleared", f"Cleared {count} cache entries")


@router.get("/cache/keys")
async def list_cached_keys(service: CatalogDep):
    """Cles de films presentes dans le cache."""
    keys = await service.list_cached_keys()
    return build_response("Cached keys retrieved", keys)


@router.get("/{movie_id}")
async def get_movie(movie_id: int, service: CatalogDep):
    """Un film (cache-aside)."""
    movie = await service.get_movie(movie_id)
    return build_response("Movie retrieved successfully", movie)


@router.get("/{movie_id}/with-reviews")
async def get_movie_with_reviews(movie_id: int, service: CatalogDep):
    """Un film et ses critiques (jamais servi depuis le cache)."""
    movie = await service.get_movie_with_reviews(movie_id)
    return build_response("Movie with reviews retrieved", movie)


@router.get("/{movie_id}/reviews/summary")
async def get_review_summary(movie_id: int, service: CatalogDep):
    """Nombre de critiques et note moyenne."""
    summary = await service.get_review_summary(movie_id)
    return build_response("Review summary retrieved", summary)


@router.post("/{movie_id}/reviews", status_code=HTTPStatus.CREATED)
async def add_review(movie_id: int, request: ReviewRequest, service: CatalogDep):
    """Ajoute une critique a un film."""
    review = await service.add_review(movie_id, request)
    return build_response("Review added successfully", review, HTTPStatus.CREATED)


@router.get("/{movie_id}/cached")
async def is_movie_cached(movie_id: int, service: CatalogDep):
    """Indique si le film est actuellement en cache."""
    cached = await service.is_movie_cached(movie_id)
    return build_response("Cache status retrieved", cached)


@router.put("/{movie_id}")
async def update_movie(movie_id: int, request: MovieRequest, service: CatalogDep):
    """Remplace integralement un film."""
    movie = await service.update_movie(movie_id, request)
    return build_response("Movie updated successfully", movie)


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_movie(movie_id: int, service: CatalogDep):
    """Supprime un film et ses critiques."""
    await service.delete_movie(movie_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
