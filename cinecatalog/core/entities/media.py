"""
Media catalog entities.

Entities representing movies and the reviews attached to them,
as persisted in the relational store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Movie:
    """
    Movie record of the catalog.

    The identifier is assigned by the store on creation and never
    changes afterwards.

    Attributes:
        id: Store-assigned identifier
        title: Display title
        description: Plot summary
        release_year: Release year
        genre: Genre label (single value)
        director: Director name
        rating: Average rating (0.0 - 10.0)
        duration_minutes: Runtime in minutes
        created_at: Creation timestamp (set by the store)
        updated_at: Last update timestamp
    """

    id: Optional[int] = None
    title: str = ""
    description: Optional[str] = None
    release_year: Optional[int] = None
    genre: Optional[str] = None
    director: Optional[str] = None
    rating: Optional[float] = None
    duration_minutes: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Review:
    """
    Review written about a movie.

    A review only lives as long as its movie: deleting the movie
    deletes its reviews first.

    Attributes:
        id: Store-assigned identifier
        movie_id: Reference to the parent Movie
        reviewer_name: Author of the review
        rating: Integer score given by the reviewer
        comment: Free text
        created_at: Creation timestamp
    """

    id: Optional[int] = None
    movie_id: Optional[int] = None
    reviewer_name: str = ""
    rating: int = 0
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
