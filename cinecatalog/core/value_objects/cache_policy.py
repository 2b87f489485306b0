"""
Politique de duree de vie des entrees de cache.

TTL par defaut:
- Film seul (MOVIE_TTL): 30 minutes
- Liste complete (ALL_MOVIES_TTL): 15 minutes - plus couteuse a invalider
  finement et plus susceptible de deriver, elle expire plus tot
"""

from dataclasses import dataclass

MOVIE_TTL = 30 * 60  # 30 minutes en secondes (1800)
ALL_MOVIES_TTL = 15 * 60  # 15 minutes en secondes (900)


@dataclass(frozen=True)
class CachePolicy:
    """
    TTL appliques par CatalogService.

    Invariant : all_movies_ttl < movie_ttl, verifie a la construction.

    Attributes:
        movie_ttl: Duree de vie d'un film seul (secondes)
        all_movies_ttl: Duree de vie de la liste complete (secondes)
    """

    movie_ttl: int = MOVIE_TTL
    all_movies_ttl: int = ALL_MOVIES_TTL

    def __post_init__(self) -> None:
        if self.movie_ttl <= 0 or self.all_movies_ttl <= 0:
            raise ValueError("Les TTL doivent etre strictement positifs")
        if self.all_movies_ttl >= self.movie_ttl:
            raise ValueError(
                "all_movies_ttl doit etre strictement inferieur a movie_ttl "
                f"({self.all_movies_ttl} >= {self.movie_ttl})"
            )
