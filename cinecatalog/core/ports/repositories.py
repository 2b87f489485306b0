"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Toutes les opérations sont asynchrones : chaque appel au store est un point
de suspension. Une entité absente est signalée par None (ou une liste vide),
une panne du store par StoreError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinecatalog.core.entities.media import Movie, Review


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations pour persister et récupérer les entités Movie.
    """

    @abstractmethod
    async def save(self, movie: Movie) -> Optional[Movie]:
        """
        Sauvegarde un film (insertion si id absent, remplacement sinon).

        Un remplacement ne réinsère jamais une ligne supprimée entre-temps.

        Retourne :
            Le film persisté, avec son identifiant et ses timestamps,
            ou None si l'id fourni n'existe plus
        """
        ...

    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Movie]:
        """Liste tous les films, dans l'ordre des identifiants."""
        ...

    @abstractmethod
    async def search_by_title(self, title: str) -> list[Movie]:
        """Recherche les films dont le titre contient la chaîne (insensible à la casse)."""
        ...

    @abstractmethod
    async def list_by_genre(self, genre: str) -> list[Movie]:
        """Liste les films d'un genre donné."""
        ...

    @abstractmethod
    async def list_by_min_rating(self, min_rating: float) -> list[Movie]:
        """Liste les films notés au moins min_rating, par note décroissante."""
        ...

    @abstractmethod
    async def list_top_rated(self, limit: int) -> list[Movie]:
        """Liste les limit films les mieux notés, par note décroissante."""
        ...

    @abstractmethod
    async def count_by_genre(self, genre: str) -> int:
        """Compte les films d'un genre donné."""
        ...

    @abstractmethod
    async def delete_by_id(self, movie_id: int) -> bool:
        """Supprime un film par ID. Retourne True si supprimé."""
        ...


class IReviewRepository(ABC):
    """
    Interface de stockage des critiques.

    Les critiques référencent un film ; leur suppression doit précéder
    celle du film (contrainte respectée par l'ordre des appels).
    """

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Sauvegarde une critique."""
        ...

    @abstractmethod
    async def list_by_movie(self, movie_id: int) -> list[Review]:
        """Liste les critiques d'un film, dans l'ordre de création."""
        ...

    @abstractmethod
    async def delete_by_movie(self, movie_id: int) -> int:
        """Supprime toutes les critiques d'un film. Retourne le nombre supprimé."""
        ...

    @abstractmethod
    async def count_by_movie(self, movie_id: int) -> int:
        """Compte les critiques d'un film."""
        ...

    @abstractmethod
    async def average_rating(self, movie_id: int) -> Optional[float]:
        """Moyenne des notes des critiques d'un film (None si aucune critique)."""
        ...
