"""
Dépendances partagées de l'application web.

Le service est résolu depuis le Container DI attaché à app.state
pendant le lifespan.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..services.catalog import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """Retourne le CatalogService du container de l'application."""
    return request.app.state.container.catalog_service()


CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
