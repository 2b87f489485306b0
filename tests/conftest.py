"""
Fixtures pytest partagees pour les tests CineCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine SQLite temporaire et repositories reels
- Cache disque temporaire et passerelle
- Mock d'un backend de cache en panne
"""

import asyncio
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine

from cinecatalog.adapters.cache.disk_cache import DiskKeyValueCache
from cinecatalog.config import Settings
from cinecatalog.core.exceptions import CacheBackendError
from cinecatalog.core.ports.cache import IKeyValueCache
from cinecatalog.core.value_objects import CachePolicy, MovieRequest
from cinecatalog.infrastructure.persistence.database import create_db_engine, init_db
from cinecatalog.infrastructure.persistence.repositories import (
    SQLModelMovieRepository,
    SQLModelReviewRepository,
)
from cinecatalog.services.cache_gateway import CacheGateway
from cinecatalog.services.catalog import CatalogService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec des chemins temporaires.

    Utilise tmp_path de pytest pour isoler chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'catalog.db'}",
        cache_backend="disk",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "cinecatalog.log",
        log_level="DEBUG",
    )


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur un fichier temporaire, tables creees."""
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def movie_repository(engine: Engine) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(engine)


@pytest.fixture
def review_repository(engine: Engine) -> SQLModelReviewRepository:
    return SQLModelReviewRepository(engine)


@pytest.fixture
def disk_cache(tmp_path: Path) -> Iterator[DiskKeyValueCache]:
    """Cache disque dans un repertoire temporaire, ferme apres le test."""
    cache = DiskKeyValueCache(cache_dir=tmp_path / "kv_cache")
    yield cache
    asyncio.run(cache.close())


@pytest.fixture
def gateway(disk_cache: DiskKeyValueCache) -> CacheGateway:
    return CacheGateway(disk_cache)


@pytest.fixture
def failing_cache() -> MagicMock:
    """
    Mock d'un backend de cache injoignable.

    Toutes les operations levent CacheBackendError, comme un serveur
    Redis arrete ou un repertoire de cache verrouille.
    """
    mock = MagicMock(spec=IKeyValueCache)
    error = CacheBackendError("connection refused")
    for name in ("get", "set", "delete", "delete_many", "keys_matching", "exists"):
        getattr(mock, name).side_effect = error
    return mock


@pytest.fixture
def catalog_service(
    movie_repository: SQLModelMovieRepository,
    review_repository: SQLModelReviewRepository,
    gateway: CacheGateway,
) -> CatalogService:
    """CatalogService branche sur un store SQLite et un cache disque reels."""
    return CatalogService(
        movie_repo=movie_repository,
        review_repo=review_repository,
        cache=gateway,
        policy=CachePolicy(),
    )


@pytest.fixture
def inception_request() -> MovieRequest:
    return MovieRequest(
        title="Inception",
        description="A thief who steals corporate secrets through dream-sharing.",
        release_year=2010,
        genre="Sci-Fi",
        director="Christopher Nolan",
        rating=8.8,
        duration_minutes=148,
    )
