"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINECATALOG_,
et peut optionnellement être fournie via un fichier .env.

Le backend de cache est sélectionnable : "disk" (diskcache, défaut) ou "redis".
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.value_objects.cache_policy import ALL_MOVIES_TTL, MOVIE_TTL, CachePolicy

# Trouver le fichier .env à la racine du projet (parent de cinecatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINECATALOG_.
    Exemple : CINECATALOG_CACHE_BACKEND=redis

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINECATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cinecatalog.db")

    # Cache
    cache_backend: Literal["disk", "redis"] = Field(default="disk")
    cache_dir: Path = Field(default=Path(".cache/catalog"))
    redis_url: Optional[str] = Field(default=None)
    movie_cache_ttl: int = Field(default=MOVIE_TTL, ge=1)
    all_movies_cache_ttl: int = Field(default=ALL_MOVIES_TTL, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinecatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @model_validator(mode="after")
    def check_cache_settings(self) -> "Settings":
        """La liste complète doit expirer avant un film seul ; Redis exige une URL."""
        if self.all_movies_cache_ttl >= self.movie_cache_ttl:
            raise ValueError(
                "all_movies_cache_ttl doit être inférieur à movie_cache_ttl"
            )
        if self.cache_backend == "redis" and not self.redis_url:
            raise ValueError("redis_url est requis quand cache_backend=redis")
        return self

    @property
    def cache_policy(self) -> CachePolicy:
        """Politique de TTL dérivée de la configuration."""
        return CachePolicy(
            movie_ttl=self.movie_cache_ttl,
            all_movies_ttl=self.all_movies_cache_ttl,
        )
