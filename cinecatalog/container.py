"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
engine SQLAlchemy, repositories, backend de cache, passerelle et service.
"""

from dependency_injector import containers, providers

from .adapters.cache.disk_cache import DiskKeyValueCache
from .adapters.cache.redis_cache import RedisKeyValueCache
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelMovieRepository,
    SQLModelReviewRepository,
)
from .services.cache_gateway import CacheGateway
from .services.catalog import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        service = container.catalog_service()

    Les tests remplacent la configuration :
        container.config.override(providers.Object(test_settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - engine partage, Resource pour la creation des tables
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Repositories - Singleton : chaque operation ouvre sa propre session
    movie_repository = providers.Singleton(SQLModelMovieRepository, engine=engine)
    review_repository = providers.Singleton(SQLModelReviewRepository, engine=engine)

    # Backend de cache selon CINECATALOG_CACHE_BACKEND
    key_value_cache = providers.Selector(
        config.provided.cache_backend,
        disk=providers.Singleton(
            DiskKeyValueCache,
            cache_dir=config.provided.cache_dir,
        ),
        redis=providers.Singleton(
            RedisKeyValueCache,
            redis_url=config.provided.redis_url,
        ),
    )

    cache_gateway = providers.Singleton(CacheGateway, cache=key_value_cache)

    catalog_service = providers.Singleton(
        CatalogService,
        movie_repo=movie_repository,
        review_repo=review_repository,
        cache=cache_gateway,
        policy=config.provided.cache_policy,
    )
