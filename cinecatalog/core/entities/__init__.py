"""Entités métier du catalogue."""

from cinecatalog.core.entities.media import Movie, Review

__all__ = ["Movie", "Review"]
