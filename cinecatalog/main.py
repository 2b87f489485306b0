"""
Point d'entrée CLI de CineCatalog.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import clear_cache, list_movies, show
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinecatalog",
    help="Catalogue de films et critiques avec cache",
)
container = Container()

# Monter les commandes depuis commands.py
app.command(name="list")(list_movies)
app.command()(show)
app.command(name="clear-cache")(clear_cache)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineCatalog")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Backend de cache : {config.cache_backend}")
    if config.cache_backend == "redis":
        typer.echo(f"Redis : {config.redis_url}")
    else:
        typer.echo(f"Répertoire du cache : {config.cache_dir}")
    typer.echo(f"TTL film : {config.movie_cache_ttl}s")
    typer.echo(f"TTL liste : {config.all_movies_cache_ttl}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineCatalog v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineCatalog."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinecatalog.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info(f"Démarrage de CineCatalog v{__version__}")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
