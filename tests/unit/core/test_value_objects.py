"""
Tests unitaires pour les objets valeur du catalogue.

Ces tests verifient:
- Les contraintes de MovieRequest et ReviewRequest
- La conversion requete -> entite
- Les projections et leurs alias camelCase
- L'invariant de CachePolicy (TTL liste < TTL film)
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from cinecatalog.core.entities import Movie, Review
from cinecatalog.core.value_objects import (
    ALL_MOVIES_TTL,
    MOVIE_TTL,
    CachePolicy,
    MovieRequest,
    MovieResponse,
    ReviewRequest,
    ReviewResponse,
    ReviewSummary,
)


class TestMovieRequest:
    """Tests de validation de MovieRequest."""

    def test_minimal_request_only_needs_title(self) -> None:
        request = MovieRequest(title="Heat")
        assert request.title == "Heat"
        assert request.rating is None

    def test_accepts_camel_case_fields(self) -> None:
        """Les champs sont accessibles en camelCase (JSON) et en snake_case."""
        request = MovieRequest.model_validate(
            {"title": "Heat", "releaseYear": 1995, "durationMinutes": 170}
        )
        assert request.release_year == 1995
        assert request.duration_minutes == 170

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_rejected(self, title: str) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title=title)

    def test_title_too_long_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title="x" * 256)

    def test_description_too_long_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title="Heat", description="x" * 1001)

    @pytest.mark.parametrize("year", [1887, 2101])
    def test_release_year_out_of_range(self, year: int) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title="Heat", release_year=year)

    @pytest.mark.parametrize("rating", [-0.1, 10.1])
    def test_rating_out_of_range(self, rating: float) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title="Heat", rating=rating)

    @pytest.mark.parametrize("rating", [0.0, 10.0])
    def test_rating_bounds_are_inclusive(self, rating: float) -> None:
        assert MovieRequest(title="Heat", rating=rating).rating == rating

    @pytest.mark.parametrize("duration", [0, 501])
    def test_duration_out_of_range(self, duration: int) -> None:
        with pytest.raises(ValidationError):
            MovieRequest(title="Heat", duration_minutes=duration)

    def test_to_entity_has_no_id_nor_timestamps(self) -> None:
        """to_entity() produit une entite sans identite : le store l'attribue."""
        movie = MovieRequest(title="Heat", genre="Crime", rating=8.3).to_entity()
        assert isinstance(movie, Movie)
        assert movie.id is None
        assert movie.created_at is None
        assert movie.genre == "Crime"


class TestReviewRequest:
    """Tests de validation de ReviewRequest."""

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_must_be_between_1_and_5(self, rating: int) -> None:
        with pytest.raises(ValidationError):
            ReviewRequest(reviewer_name="Alice", rating=rating)

    def test_blank_reviewer_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReviewRequest(reviewer_name=" ", rating=3)

    def test_to_entity_attaches_movie_id(self) -> None:
        review = ReviewRequest(reviewerName="Alice", rating=4, comment="Great").to_entity(7)
        assert isinstance(review, Review)
        assert review.movie_id == 7
        assert review.reviewer_name == "Alice"


class TestProjections:
    """Tests pour MovieResponse, ReviewResponse et ReviewSummary."""

    def test_movie_response_from_entity(self) -> None:
        now = datetime(2024, 1, 1, 12, 0)
        movie = Movie(id=3, title="Alien", release_year=1979, created_at=now, updated_at=now)

        response = MovieResponse.from_entity(movie)

        assert response.id == 3
        assert response.title == "Alien"
        assert response.reviews is None
        assert response.created_at == now

    def test_movie_response_dumps_camel_case(self) -> None:
        response = MovieResponse(id=1, title="Alien", release_year=1979)
        data = response.model_dump(by_alias=True)
        assert data["releaseYear"] == 1979
        assert "durationMinutes" in data

    def test_movie_response_json_round_trip_keeps_reviews(self) -> None:
        """La forme JSON du cache se relit a l'identique."""
        response = MovieResponse(
            id=1,
            title="Alien",
            reviews=[ReviewResponse(id=1, movie_id=1, reviewer_name="Bob", rating=5)],
        )
        restored = MovieResponse.model_validate_json(response.model_dump_json())
        assert restored == response

    def test_review_summary_without_reviews(self) -> None:
        summary = ReviewSummary(movie_id=1, review_count=0)
        assert summary.average_rating is None


class TestCachePolicy:
    """Tests pour CachePolicy."""

    def test_default_ttls(self) -> None:
        """TTL par defaut : 30 min pour un film, 15 min pour la liste."""
        policy = CachePolicy()
        assert policy.movie_ttl == MOVIE_TTL == 1800
        assert policy.all_movies_ttl == ALL_MOVIES_TTL == 900

    def test_list_ttl_must_be_shorter_than_movie_ttl(self) -> None:
        with pytest.raises(ValueError):
            CachePolicy(movie_ttl=600, all_movies_ttl=600)

    def test_ttls_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            CachePolicy(movie_ttl=0, all_movies_ttl=-1)

    def test_custom_policy(self) -> None:
        policy = CachePolicy(movie_ttl=120, all_movies_ttl=60)
        assert policy.all_movies_ttl < policy.movie_ttl
