"""
Requetes de creation / mise a jour validees.

Les contraintes sont verifiees a la construction (pydantic) : une requete
malformee n'atteint jamais CatalogService. Les noms de champs acceptent
la forme camelCase (releaseYear) et la forme Python (release_year).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cinecatalog.core.entities.media import Movie, Review


class MovieRequest(BaseModel):
    """
    Donnees d'un film a creer ou a remplacer.

    La mise a jour est un remplacement complet : un champ omis
    vaut None apres l'update.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    release_year: Optional[int] = Field(default=None, ge=1888, le=2100)
    genre: Optional[str] = Field(default=None, max_length=100)
    director: Optional[str] = Field(default=None, max_length=255)
    rating: Optional[float] = Field(default=None, ge=0.0, le=10.0)
    duration_minutes: Optional[int] = Field(default=None, ge=1, le=500)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        """Le titre est obligatoire et ne peut pas etre vide."""
        if not v.strip():
            raise ValueError("Title is required")
        return v

    def to_entity(self) -> Movie:
        """Convertit la requete en entite (sans identifiant ni timestamps)."""
        return Movie(
            title=self.title,
            description=self.description,
            release_year=self.release_year,
            genre=self.genre,
            director=self.director,
            rating=self.rating,
            duration_minutes=self.duration_minutes,
        )


class ReviewRequest(BaseModel):
    """Donnees d'une critique a ajouter a un film."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reviewer_name: str = Field(max_length=255)
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("reviewer_name")
    @classmethod
    def reviewer_not_blank(cls, v: str) -> str:
        """Le nom du critique est obligatoire."""
        if not v.strip():
            raise ValueError("Reviewer name is required")
        return v

    def to_entity(self, movie_id: int) -> Review:
        """Convertit la requete en entite Review rattachee au film."""
        return Review(
            movie_id=movie_id,
            reviewer_name=self.reviewer_name,
            rating=self.rating,
            comment=self.comment,
        )
