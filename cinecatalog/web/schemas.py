"""
Enveloppes de reponse de l'API.

Toute reponse reussie suit la forme {message, status, payload, timestamp} ;
toute erreur suit {timestamp, status, error, message, validationErrors}.
"""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Generic, Optional, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class APIResponse(BaseModel, Generic[T]):
    """Enveloppe standard des reponses reussies."""

    message: str
    status: str
    payload: Optional[T] = None
    timestamp: datetime = Field(default_factory=_now)


class ErrorResponse(BaseModel):
    """Corps des reponses d'erreur."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: datetime = Field(default_factory=_now)
    status: int
    error: str
    message: str
    validation_errors: Optional[dict[str, str]] = None


def build_response(message: str, payload: Any, status: HTTPStatus = HTTPStatus.OK) -> JSONResponse:
    """Construit une JSONResponse enveloppee (payload serialise en camelCase)."""
    body = APIResponse[Any](
        message=message, status=status.name, payload=jsonable_encoder(payload)
    )
    return JSONResponse(status_code=status.value, content=jsonable_encoder(body))


def build_error(
    status: HTTPStatus,
    message: str,
    validation_errors: Optional[dict[str, str]] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Construit une reponse d'erreur ; error vaut la phrase HTTP par defaut."""
    body = ErrorResponse(
        status=status.value,
        error=error or status.phrase,
        message=message,
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status.value,
        content=jsonable_encoder(body, by_alias=True, exclude_none=True),
    )
