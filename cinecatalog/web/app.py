"""
Application FastAPI de CineCatalog.

Initialise l'application web avec le Container DI, enregistre les
gestionnaires d'erreurs et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from .. import __version__
from ..container import Container
from .errors import register_exception_handlers
from .routes.movies import router as movies_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container deja configure (tests) ; un Container par
            defaut est cree au demarrage sinon.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le Container DI au démarrage et ferme le cache à l'arrêt."""
        app_container = container or Container()
        app_container.database.init()
        app.state.container = app_container
        logger.info("CineCatalog prêt")
        yield
        await app_container.cache_gateway().close()
        app_container.database.shutdown()

    app = FastAPI(title="CineCatalog", version=__version__, lifespan=lifespan)
    register_exception_handlers(app)
    app.include_router(movies_router)
    return app


app = create_app()
