"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans cinecatalog/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit l'engine SQLAlchemy via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Execute les sessions bloquantes hors de la boucle asyncio
"""

from cinecatalog.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from cinecatalog.infrastructure.persistence.repositories.review_repository import (
    SQLModelReviewRepository,
)

__all__ = [
    "SQLModelMovieRepository",
    "SQLModelReviewRepository",
]
