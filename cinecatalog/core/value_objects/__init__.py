"""
Objets valeur du catalogue.

- Projections : MovieResponse, ReviewResponse, ReviewSummary
- Requêtes validées : MovieRequest, ReviewRequest
- Politique de cache : CachePolicy
"""

from cinecatalog.core.value_objects.cache_policy import (
    ALL_MOVIES_TTL,
    MOVIE_TTL,
    CachePolicy,
)
from cinecatalog.core.value_objects.projections import (
    MovieResponse,
    ReviewResponse,
    ReviewSummary,
)
from cinecatalog.core.value_objects.requests import MovieRequest, ReviewRequest

__all__ = [
    "ALL_MOVIES_TTL",
    "MOVIE_TTL",
    "CachePolicy",
    "MovieResponse",
    "ReviewResponse",
    "ReviewSummary",
    "MovieRequest",
    "ReviewRequest",
]
