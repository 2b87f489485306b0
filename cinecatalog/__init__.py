"""
CineCatalog - Catalogue de films et critiques avec cache applicatif.

Ce package expose un service de catalogue (films + critiques) adosse a une
base relationnelle et a un cache cle-valeur en lecture/invalidation.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (passerelle de cache, orchestration)
- infrastructure/ : Persistance SQLModel
- adapters/ : Backends de cache (diskcache, Redis) et CLI
- web/ : API HTTP FastAPI
"""

__version__ = "0.1.0"
