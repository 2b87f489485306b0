"""
Exceptions du domaine catalogue.

Hierarchie :
- CatalogError : base de toutes les erreurs metier
  - MovieNotFoundError : identifiant inconnu du store (erreur client)
  - InvalidRequestError : parametre invalide rejete par le service (erreur client)
  - StoreError : persistance indisponible ou en erreur (fatal pour la requete)
  - CacheBackendError : erreur du backend de cache (jamais remontee a l'appelant)
"""


class CatalogError(Exception):
    """Erreur de base du catalogue."""


class MovieNotFoundError(CatalogError):
    """Levee quand un film n'existe pas dans le store."""

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f"Movie not found with ID: {movie_id}")


class InvalidRequestError(CatalogError):
    """Levee quand un parametre d'operation est hors domaine."""


class StoreError(CatalogError):
    """Levee quand le store relationnel echoue."""


class CacheBackendError(CatalogError):
    """
    Levee par les adaptateurs de cache quand le backend echoue.

    Absorbee par CacheGateway : ne doit jamais atteindre l'appelant
    de CatalogService.
    """
