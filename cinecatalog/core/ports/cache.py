"""
Port du cache cle-valeur.

Contrat minimal attendu d'un backend de cache (disque, Redis, ...).
Les valeurs sont des chaines (JSON produit par CacheGateway).

Les implementations levent CacheBackendError quand le backend echoue ;
c'est CacheGateway qui decide de la tolerance aux pannes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class IKeyValueCache(ABC):
    """Interface d'un cache cle-valeur avec expiration."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Retourne la valeur ou None si absente ou expiree."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int) -> bool:
        """Stocke une valeur avec une duree de vie en secondes."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> int:
        """Supprime une cle. Retourne le nombre de cles supprimees (0 ou 1)."""
        ...

    @abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> int:
        """Supprime un lot de cles en une operation. Retourne le nombre supprime."""
        ...

    @abstractmethod
    async def keys_matching(self, pattern: str) -> set[str]:
        """Retourne les cles vivantes correspondant au motif glob (ex: "movie:*")."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Indique si la cle est presente et non expiree."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources du backend."""
        ...
