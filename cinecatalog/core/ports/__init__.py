"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IMovieRepository : Stockage des films
- IReviewRepository : Stockage des critiques

Port cache : Contrat du cache clé-valeur
- IKeyValueCache : get/set avec TTL, suppression unitaire et par lot, motifs
"""

from cinecatalog.core.ports.cache import IKeyValueCache
from cinecatalog.core.ports.repositories import (
    IMovieRepository,
    IReviewRepository,
)

__all__ = [
    # Repositories
    "IMovieRepository",
    "IReviewRepository",
    # Cache
    "IKeyValueCache",
]
