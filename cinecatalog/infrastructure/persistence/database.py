"""
Configuration de la base de donnees pour CineCatalog.

Ce module fournit :
- Creation de l'engine (SQLite par defaut, toute URL SQLAlchemy acceptee)
- Fonction d'initialisation des tables

La base de donnees est configuree via CINECATALOG_DATABASE_URL
(defaut: sqlite:///cinecatalog.db). L'engine est cree par le container DI
et injecte dans les repositories, il n'y a pas d'engine global.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Les sessions sont ouvertes depuis les threads de l'executor :
    SQLite est donc configure sans verification de thread. Une base
    en memoire partage une connexion unique (StaticPool) pour que
    toutes les sessions voient les memes tables.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    if database_url in _MEMORY_URLS:
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Creer le repertoire parent si l'URL est un fichier SQLite
    db_path = Path(database_url.replace("sqlite:///", ""))
    db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables si elles n'existent pas deja.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # L'import est fait ici pour eviter les imports circulaires
    from cinecatalog.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug(f"Tables initialisees sur {engine.url}")
