"""
Tests des repositories SQLModel sur une base SQLite temporaire.

Ces tests verifient:
- Insertion et remplacement complet d'un film
- Requetes de lecture (liste, recherche, genre, notes)
- Cycle de vie des critiques (ajout, comptage, moyenne, suppression)
- Conversion des erreurs SQLAlchemy en StoreError
"""

import asyncio
import dataclasses
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from cinecatalog.core.entities import Movie, Review
from cinecatalog.core.exceptions import StoreError
from cinecatalog.infrastructure.persistence.models import MovieModel
from cinecatalog.infrastructure.persistence.repositories import (
    SQLModelMovieRepository,
    SQLModelReviewRepository,
)


async def _seed(repo: SQLModelMovieRepository) -> list[Movie]:
    movies = [
        Movie(title="Inception", genre="Sci-Fi", rating=8.8),
        Movie(title="The Dark Knight", genre="Action", rating=9.0),
        Movie(title="Interstellar", genre="Sci-Fi", rating=8.6),
        Movie(title="Unrated Draft", genre="Drama"),
    ]
    return [await repo.save(movie) for movie in movies]


class TestMovieModel:
    """Tests pour MovieModel."""

    def test_nullable_fields(self) -> None:
        model = MovieModel(title="Test Movie")
        assert model.id is None
        assert model.rating is None
        assert model.genre is None


class TestSQLModelMovieRepository:
    """Tests pour SQLModelMovieRepository."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_timestamps(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        saved = await movie_repository.save(Movie(title="Inception"))

        assert saved.id is not None
        assert saved.created_at is not None
        assert saved.updated_at is not None

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        assert await movie_repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_save_existing_replaces_all_fields(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        """Un save sur un ID existant remplace tous les champs et garde created_at."""
        saved = await movie_repository.save(
            Movie(title="Inception", genre="Sci-Fi", director="Nolan")
        )

        replaced = await movie_repository.save(
            Movie(id=saved.id, title="New Title", created_at=saved.created_at)
        )

        assert replaced.id == saved.id
        assert replaced.title == "New Title"
        assert replaced.genre is None
        assert replaced.director is None
        assert replaced.created_at == saved.created_at

    @pytest.mark.asyncio
    async def test_save_with_unknown_id_does_not_insert(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        """Un save sur un ID disparu ne recree pas la ligne."""
        saved = await movie_repository.save(Movie(title="Inception"))
        await movie_repository.delete_by_id(saved.id)

        result = await movie_repository.save(Movie(id=saved.id, title="Ghost"))

        assert result is None
        assert await movie_repository.get_by_id(saved.id) is None
        assert await movie_repository.list_all() == []

    @pytest.mark.asyncio
    async def test_timestamps_are_utc_and_round_trip(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        """Les timestamps sont en UTC, a l'ecriture comme a la relecture."""
        saved = await movie_repository.save(Movie(title="Inception"))
        loaded = await movie_repository.get_by_id(saved.id)

        assert saved.created_at.utcoffset() == timedelta(0)
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.created_at == saved.created_at
        assert loaded.updated_at == saved.updated_at

    @pytest.mark.asyncio
    async def test_replace_keeps_aware_created_at(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        created = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        saved = await movie_repository.save(Movie(title="Inception", created_at=created))

        replaced = await movie_repository.save(
            Movie(
                id=saved.id,
                title="New Title",
                created_at=saved.created_at,
                updated_at=datetime.now(timezone.utc),
            )
        )

        assert replaced.created_at == created
        assert replaced.updated_at > created

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_id(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        seeded = await _seed(movie_repository)

        movies = await movie_repository.list_all()

        assert [m.id for m in movies] == [m.id for m in seeded]

    @pytest.mark.asyncio
    async def test_search_by_title_is_case_insensitive(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        await _seed(movie_repository)

        movies = await movie_repository.search_by_title("INTER")

        assert [m.title for m in movies] == ["Interstellar"]

    @pytest.mark.asyncio
    async def test_list_and_count_by_genre(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        await _seed(movie_repository)

        movies = await movie_repository.list_by_genre("Sci-Fi")

        assert {m.title for m in movies} == {"Inception", "Interstellar"}
        assert await movie_repository.count_by_genre("Sci-Fi") == 2
        assert await movie_repository.count_by_genre("Western") == 0

    @pytest.mark.asyncio
    async def test_list_by_min_rating_best_first(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        await _seed(movie_repository)

        movies = await movie_repository.list_by_min_rating(8.7)

        assert [m.title for m in movies] == ["The Dark Knight", "Inception"]

    @pytest.mark.asyncio
    async def test_list_top_rated_excludes_unrated(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        await _seed(movie_repository)

        top = await movie_repository.list_top_rated(10)
        top_two = await movie_repository.list_top_rated(2)

        assert "Unrated Draft" not in [m.title for m in top]
        assert [m.title for m in top_two] == ["The Dark Knight", "Inception"]

    @pytest.mark.asyncio
    async def test_delete_by_id(self, movie_repository: SQLModelMovieRepository) -> None:
        saved = await movie_repository.save(Movie(title="Inception"))

        assert await movie_repository.delete_by_id(saved.id) is True
        assert await movie_repository.get_by_id(saved.id) is None
        assert await movie_repository.delete_by_id(saved.id) is False

    @pytest.mark.asyncio
    async def test_concurrent_saves(self, movie_repository: SQLModelMovieRepository) -> None:
        """Des ecritures concurrentes obtiennent des IDs distincts."""
        saved = await asyncio.gather(
            *[movie_repository.save(Movie(title=f"Movie {i}")) for i in range(5)]
        )
        assert len({m.id for m in saved}) == 5

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_becomes_store_error(
        self, movie_repository: SQLModelMovieRepository
    ) -> None:
        """Une panne SQLAlchemy est distincte d'un film absent."""
        def locked(movie_id: int) -> None:
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        with patch.object(movie_repository, "_get_by_id", locked):
            with pytest.raises(StoreError):
                await movie_repository.get_by_id(1)


class TestSQLModelReviewRepository:
    """Tests pour SQLModelReviewRepository."""

    @pytest.mark.asyncio
    async def test_save_and_list_oldest_first(
        self, review_repository: SQLModelReviewRepository
    ) -> None:
        first = await review_repository.save(Review(movie_id=1, reviewer_name="Alice", rating=5))
        second = await review_repository.save(Review(movie_id=1, reviewer_name="Bob", rating=3))
        await review_repository.save(Review(movie_id=2, reviewer_name="Carol", rating=1))

        reviews = await review_repository.list_by_movie(1)

        assert [r.id for r in reviews] == [first.id, second.id]
        assert first.created_at is not None

    @pytest.mark.asyncio
    async def test_count_and_average(self, review_repository: SQLModelReviewRepository) -> None:
        await review_repository.save(Review(movie_id=1, reviewer_name="Alice", rating=5))
        await review_repository.save(Review(movie_id=1, reviewer_name="Bob", rating=2))

        assert await review_repository.count_by_movie(1) == 2
        assert await review_repository.average_rating(1) == pytest.approx(3.5)

    @pytest.mark.asyncio
    async def test_average_without_reviews_is_none(
        self, review_repository: SQLModelReviewRepository
    ) -> None:
        assert await review_repository.count_by_movie(42) == 0
        assert await review_repository.average_rating(42) is None

    @pytest.mark.asyncio
    async def test_delete_by_movie_returns_count(
        self, review_repository: SQLModelReviewRepository
    ) -> None:
        for name in ("Alice", "Bob"):
            await review_repository.save(Review(movie_id=1, reviewer_name=name, rating=4))
        await review_repository.save(Review(movie_id=2, reviewer_name="Carol", rating=4))

        assert await review_repository.delete_by_movie(1) == 2
        assert await review_repository.list_by_movie(1) == []
        assert await review_repository.count_by_movie(2) == 1

    @pytest.mark.asyncio
    async def test_review_fields_round_trip(
        self, review_repository: SQLModelReviewRepository
    ) -> None:
        saved = await review_repository.save(
            Review(movie_id=1, reviewer_name="Alice", rating=4, comment="Great")
        )
        (loaded,) = await review_repository.list_by_movie(1)
        assert dataclasses.asdict(loaded) == dataclasses.asdict(saved)
        assert loaded.created_at.utcoffset() == timedelta(0)
