"""
Projections de lecture du catalogue.

Vues denormalisees des entites, utilisees pour les reponses HTTP et
stockees telles quelles (JSON) dans le cache. Elles sont derivees du
store et ne font jamais foi.

Les champs sont exposes en camelCase (releaseYear, durationMinutes, ...)
et restent accessibles par leur nom Python.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cinecatalog.core.entities.media import Movie, Review


class ReviewResponse(BaseModel):
    """Projection d'une critique."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = None
    movie_id: Optional[int] = None
    reviewer_name: str
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        """Construit la projection depuis l'entite Review."""
        return cls(
            id=review.id,
            movie_id=review.movie_id,
            reviewer_name=review.reviewer_name,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )


class MovieResponse(BaseModel):
    """
    Projection d'un film.

    reviews vaut None dans la forme mise en cache ; seule la lecture
    "avec critiques" renseigne la liste.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    release_year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    rating: Optional[float] = None
    duration_minutes: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    reviews: Optional[list[ReviewResponse]] = None

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieResponse":
        """Construit la projection depuis l'entite Movie (sans critiques)."""
        return cls(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            release_year=movie.release_year,
            genre=movie.genre,
            director=movie.director,
            rating=movie.rating,
            duration_minutes=movie.duration_minutes,
            created_at=movie.created_at,
            updated_at=movie.updated_at,
        )


class ReviewSummary(BaseModel):
    """Statistiques des critiques d'un film."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: int
    review_count: int
    average_rating: Optional[float] = None
