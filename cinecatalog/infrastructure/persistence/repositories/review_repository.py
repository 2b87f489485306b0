"""
Implementation SQLModel du repository Review.

Implemente l'interface IReviewRepository pour la persistance des critiques.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from cinecatalog.core.entities.media import Review
from cinecatalog.core.ports.repositories import IReviewRepository
from cinecatalog.infrastructure.persistence.models import ReviewModel
from cinecatalog.infrastructure.persistence.repositories.base import (
    SQLModelRepository,
    as_utc,
)


class SQLModelReviewRepository(SQLModelRepository, IReviewRepository):
    """Repository SQLModel pour les critiques."""

    def _to_entity(self, model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            movie_id=model.movie_id,
            reviewer_name=model.reviewer_name,
            rating=model.rating,
            comment=model.comment,
            created_at=as_utc(model.created_at),
        )

    def _save(self, review: Review) -> Review:
        with Session(self._engine) as session:
            model = ReviewModel(
                id=review.id,
                movie_id=review.movie_id,
                reviewer_name=review.reviewer_name,
                rating=review.rating,
                comment=review.comment,
                created_at=review.created_at or datetime.now(timezone.utc),
            )
            model = session.merge(model)
            session.commit()
            session.refresh(model)
            return self._to_entity(model)

    def _list_by_movie(self, movie_id: int) -> list[Review]:
        with Session(self._engine) as session:
            statement = (
                select(ReviewModel)
                .where(ReviewModel.movie_id == movie_id)
                .order_by(ReviewModel.created_at, ReviewModel.id)
            )
            return [self._to_entity(m) for m in session.exec(statement).all()]

    def _delete_by_movie(self, movie_id: int) -> int:
        with Session(self._engine) as session:
            statement = select(ReviewModel).where(ReviewModel.movie_id == movie_id)
            models = session.exec(statement).all()
            for model in models:
                session.delete(model)
            session.commit()
            return len(models)

    def _count_by_movie(self, movie_id: int) -> int:
        with Session(self._engine) as session:
            statement = (
                select(func.count())
                .select_from(ReviewModel)
                .where(ReviewModel.movie_id == movie_id)
            )
            return session.exec(statement).one()

    def _average_rating(self, movie_id: int) -> Optional[float]:
        with Session(self._engine) as session:
            statement = select(func.avg(ReviewModel.rating)).where(
                ReviewModel.movie_id == movie_id
            )
            average = session.exec(statement).one()
            return float(average) if average is not None else None

    async def save(self, review: Review) -> Review:
        """Sauvegarde une critique."""
        return await self._run(self._save, review)

    async def list_by_movie(self, movie_id: int) -> list[Review]:
        """Liste les critiques d'un film, plus anciennes en premier."""
        return await self._run(self._list_by_movie, movie_id)

    async def delete_by_movie(self, movie_id: int) -> int:
        """Supprime les critiques d'un film dans une seule transaction."""
        return await self._run(self._delete_by_movie, movie_id)

    async def count_by_movie(self, movie_id: int) -> int:
        """Compte les critiques d'un film."""
        return await self._run(self._count_by_movie, movie_id)

    async def average_rating(self, movie_id: int) -> Optional[float]:
        """Moyenne des notes, None si le film n'a aucune critique."""
        return await self._run(self._average_rating, movie_id)
