"""
Base commune des repositories SQLModel asynchrones.

Les sessions SQLModel sont bloquantes : chaque operation est executee
dans l'executor par defaut (run_in_executor), avec sa propre session
ouverte et fermee dans le thread qui l'utilise.
"""

import asyncio
from datetime import datetime, timezone
from functools import partial
from typing import Any, Callable, Optional, TypeVar

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from cinecatalog.core.exceptions import StoreError

T = TypeVar("T")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Rattache UTC aux timestamps relus sans fuseau (SQLite ne le conserve pas)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLModelRepository:
    """
    Socle des repositories : engine injecte et execution hors boucle.

    Toute SQLAlchemyError est convertie en StoreError, ce qui distingue
    une panne du store d'une entite absente (None).
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec l'engine de la base.

        Args :
            engine : Engine SQLAlchemy partage (cree par le container DI)
        """
        self._engine = engine

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        """Execute une operation bloquante dans l'executor par defaut."""
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args))
        except SQLAlchemyError as e:
            logger.error(f"Erreur du store dans {func.__name__}: {e}")
            raise StoreError(f"Store operation failed: {func.__name__}") from e
