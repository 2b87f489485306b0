"""
Modeles SQLModel pour la base de donnees CineCatalog.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films du catalogue
- reviews: Critiques rattachees a un film (movie_id)

Pas de cle etrangere sur reviews.movie_id : la suppression des critiques
avant celle du film est garantie par CatalogService.

Les timestamps sont ecrits en UTC (colonnes DateTime avec fuseau).
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """Modele representant un film dans la base de donnees."""

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, index=True)
    description: str | None = Field(default=None, max_length=1000)
    release_year: int | None = None
    genre: str | None = Field(default=None, max_length=100, index=True)
    director: str | None = Field(default=None, max_length=255)
    rating: float | None = Field(default=None, index=True)  # Note 0-10
    duration_minutes: int | None = None
    created_at: datetime | None = Field(default=None, sa_type=DateTime(timezone=True))
    updated_at: datetime | None = Field(default=None, sa_type=DateTime(timezone=True))


class ReviewModel(SQLModel, table=True):
    """Modele representant une critique dans la base de donnees."""

    __tablename__ = "reviews"

    id: int | None = Field(default=None, primary_key=True)
    movie_id: int = Field(index=True)
    reviewer_name: str = Field(max_length=255)
    rating: int  # Note 1-5
    comment: str | None = Field(default=None, max_length=1000)
    created_at: datetime | None = Field(default=None, sa_type=DateTime(timezone=True))
