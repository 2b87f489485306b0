"""
Gestionnaires d'exceptions de l'API.

Correspondance erreurs metier -> statut HTTP :
- MovieNotFoundError -> 404
- RequestValidationError / InvalidRequestError -> 400
- StoreError et toute autre exception -> 500 (message generique)
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..core.exceptions import InvalidRequestError, MovieNotFoundError, StoreError
from .schemas import build_error

logger = logging.getLogger(__name__)


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    return build_error(HTTPStatus.NOT_FOUND, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Agrege les erreurs pydantic par champ (dernier element de loc)."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        errors[str(loc[-1])] = error.get("msg", "invalid value")
    logger.info("Requete invalide sur %s: %s", request.url.path, errors)
    return build_error(
        HTTPStatus.BAD_REQUEST,
        "Invalid input data",
        validation_errors=errors,
        error="Validation Failed",
    )


async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    return build_error(HTTPStatus.BAD_REQUEST, str(exc))


async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Erreur du store sur %s: %s", request.url.path, exc)
    return build_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Catalog storage is unavailable")


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Erreur inattendue sur %s", request.url.path)
    return build_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Unexpected server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires sur l'application."""
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
