"""
Adaptateurs : implementations concretes des ports.

- cache/ : backends du cache cle-valeur (diskcache, Redis)
- cli/ : commandes Typer
"""
