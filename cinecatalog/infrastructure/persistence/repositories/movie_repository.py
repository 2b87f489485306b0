"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
via SQLModel. Les methodes publiques sont asynchrones et deleguent a des
methodes synchrones (_xxx) executees dans l'executor.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from cinecatalog.core.entities.media import Movie
from cinecatalog.core.ports.repositories import IMovieRepository
from cinecatalog.infrastructure.persistence.models import MovieModel
from cinecatalog.infrastructure.persistence.repositories.base import (
    SQLModelRepository,
    as_utc,
)


class SQLModelMovieRepository(SQLModelRepository, IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def _to_entity(self, model: MovieModel) -> Movie:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MovieModel depuis la DB

        Retourne :
            L'entite Movie correspondante
        """
        return Movie(
            id=model.id,
            title=model.title,
            description=model.description,
            release_year=model.release_year,
            genre=model.genre,
            director=model.director,
            rating=model.rating,
            duration_minutes=model.duration_minutes,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _apply(self, model: MovieModel, movie: Movie) -> None:
        """Recopie les champs de l'entite dans le modele (remplacement complet)."""
        now = datetime.now(timezone.utc)
        model.title = movie.title
        model.description = movie.description
        model.release_year = movie.release_year
        model.genre = movie.genre
        model.director = movie.director
        model.rating = movie.rating
        model.duration_minutes = movie.duration_minutes
        model.created_at = movie.created_at or model.created_at or now
        model.updated_at = movie.updated_at or now

    def _save(self, movie: Movie) -> Optional[Movie]:
        with Session(self._engine) as session:
            if movie.id is not None:
                # Mise a jour : jamais de reinsertion d'une ligne supprimee
                model = session.get(MovieModel, movie.id)
                if model is None:
                    return None
                self._apply(model, movie)
            else:
                # Insertion
                model = MovieModel(title=movie.title)
                self._apply(model, movie)

            session.add(model)
            session.commit()
            session.refresh(model)
            return self._to_entity(model)

    def _get_by_id(self, movie_id: int) -> Optional[Movie]:
        with Session(self._engine) as session:
            model = session.get(MovieModel, movie_id)
            if model:
                return self._to_entity(model)
            return None

    def _list(self, statement) -> list[Movie]:
        with Session(self._engine) as session:
            models = session.exec(statement).all()
            return [self._to_entity(model) for model in models]

    def _count_by_genre(self, genre: str) -> int:
        with Session(self._engine) as session:
            statement = (
                select(func.count()).select_from(MovieModel).where(MovieModel.genre == genre)
            )
            return session.exec(statement).one()

    def _delete_by_id(self, movie_id: int) -> bool:
        with Session(self._engine) as session:
            model = session.get(MovieModel, movie_id)
            if model is None:
                return False
            session.delete(model)
            session.commit()
            return True

    async def save(self, movie: Movie) -> Optional[Movie]:
        """Sauvegarde un film (insertion ou remplacement). None si l'ID n'existe plus."""
        return await self._run(self._save, movie)

    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID."""
        return await self._run(self._get_by_id, movie_id)

    async def list_all(self) -> list[Movie]:
        """Liste tous les films par ID croissant."""
        statement = select(MovieModel).order_by(MovieModel.id)
        return await self._run(self._list, statement)

    async def search_by_title(self, title: str) -> list[Movie]:
        """Recherche insensible a la casse sur une partie du titre."""
        statement = (
            select(MovieModel)
            .where(func.lower(MovieModel.title).contains(title.lower()))
            .order_by(MovieModel.id)
        )
        return await self._run(self._list, statement)

    async def list_by_genre(self, genre: str) -> list[Movie]:
        """Liste les films d'un genre."""
        statement = (
            select(MovieModel).where(MovieModel.genre == genre).order_by(MovieModel.id)
        )
        return await self._run(self._list, statement)

    async def list_by_min_rating(self, min_rating: float) -> list[Movie]:
        """Liste les films notes au moins min_rating, meilleurs en premier."""
        statement = (
            select(MovieModel)
            .where(MovieModel.rating >= min_rating)
            .order_by(MovieModel.rating.desc(), MovieModel.id)
        )
        return await self._run(self._list, statement)

    async def list_top_rated(self, limit: int) -> list[Movie]:
        """Liste les limit meilleurs films (les films sans note sont exclus)."""
        statement = (
            select(MovieModel)
            .where(MovieModel.rating.isnot(None))
            .order_by(MovieModel.rating.desc(), MovieModel.id)
            .limit(limit)
        )
        return await self._run(self._list, statement)

    async def count_by_genre(self, genre: str) -> int:
        """Compte les films d'un genre."""
        return await self._run(self._count_by_genre, genre)

    async def delete_by_id(self, movie_id: int) -> bool:
        """Supprime un film. Retourne True si une ligne a ete supprimee."""
        return await self._run(self._delete_by_id, movie_id)
