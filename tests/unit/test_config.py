"""
Tests pour Settings (pydantic-settings).

Verifie les valeurs par defaut, la lecture des variables CINECATALOG_
et la coherence des parametres de cache.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cinecatalog.config import Settings


class TestSettings:
    """Tests pour la classe Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CINECATALOG_CACHE_BACKEND", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///cinecatalog.db"
        assert settings.cache_backend == "disk"
        assert settings.movie_cache_ttl == 1800
        assert settings.all_movies_cache_ttl == 900
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CINECATALOG_CACHE_BACKEND", "redis")
        monkeypatch.setenv("CINECATALOG_REDIS_URL", "redis://cache:6379/1")
        monkeypatch.setenv("CINECATALOG_MOVIE_CACHE_TTL", "600")
        monkeypatch.setenv("CINECATALOG_ALL_MOVIES_CACHE_TTL", "300")

        settings = Settings(_env_file=None)

        assert settings.cache_backend == "redis"
        assert settings.redis_url == "redis://cache:6379/1"
        assert settings.cache_policy.movie_ttl == 600
        assert settings.cache_policy.all_movies_ttl == 300

    def test_list_ttl_must_be_shorter(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, movie_cache_ttl=900, all_movies_cache_ttl=900)

    def test_redis_requires_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CINECATALOG_REDIS_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cache_backend="redis")

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cache_backend="memcached")

    def test_paths_are_expanded(self) -> None:
        settings = Settings(_env_file=None, cache_dir="~/catalog-cache")
        assert settings.cache_dir == Path.home() / "catalog-cache"
