"""
Commandes Typer du catalogue.

Ce module fournit les commandes CLI:
- list: Liste tous les films (lecture cache-aside)
- show: Affiche un film, avec ses critiques si demande
- clear-cache: Vide les entrees de cache du catalogue
"""

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from cinecatalog.container import Container
from cinecatalog.core.exceptions import MovieNotFoundError, StoreError
from cinecatalog.core.value_objects.projections import MovieResponse

console = Console()


def _format_rating(rating) -> str:
    return f"{rating:.1f}" if rating is not None else "-"


def display_movies_table(movies: list[MovieResponse]) -> None:
    """
    Affiche les films sous forme de tableau.

    Args:
        movies: Projections a afficher, dans l'ordre du store
    """
    table = Table(title=f"Films ({len(movies)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Genre")
    table.add_column("Realisateur")
    table.add_column("Note", justify="right", style="green")

    for movie in movies:
        table.add_row(
            str(movie.id),
            movie.title,
            str(movie.release_year or "-"),
            movie.genre or "-",
            movie.director or "-",
            _format_rating(movie.rating),
        )

    console.print(table)


def list_movies() -> None:
    """Liste tous les films du catalogue."""
    asyncio.run(_list_movies_async())


async def _list_movies_async() -> None:
    container = Container()
    container.database.init()
    service = container.catalog_service()
    try:
        movies = await service.get_all_movies()
    except StoreError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(code=1)
    finally:
        await container.cache_gateway().close()

    if not movies:
        console.print("[yellow]Aucun film dans le catalogue.[/yellow]")
        return
    display_movies_table(movies)


def show(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    reviews: Annotated[
        bool,
        typer.Option("--reviews", "-r", help="Affiche aussi les critiques"),
    ] = False,
) -> None:
    """Affiche le detail d'un film."""
    asyncio.run(_show_async(movie_id, reviews))


async def _show_async(movie_id: int, with_reviews: bool) -> None:
    container = Container()
    container.database.init()
    service = container.catalog_service()
    try:
        if with_reviews:
            movie = await service.get_movie_with_reviews(movie_id)
        else:
            movie = await service.get_movie(movie_id)
    except MovieNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    except StoreError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(code=1)
    finally:
        await container.cache_gateway().close()

    console.print(f"[bold cyan]{movie.title}[/bold cyan] (ID {movie.id})")
    if movie.release_year:
        console.print(f"  Annee: {movie.release_year}")
    if movie.genre:
        console.print(f"  Genre: {movie.genre}")
    if movie.director:
        console.print(f"  Realisateur: {movie.director}")
    if movie.duration_minutes:
        console.print(f"  Duree: {movie.duration_minutes} min")
    console.print(f"  Note: {_format_rating(movie.rating)}")
    if movie.description:
        console.print(f"  {movie.description}")

    if movie.reviews is not None:
        console.print(f"\n[bold]Critiques:[/bold] {len(movie.reviews)}")
        for review in movie.reviews:
            comment = f" - {review.comment}" if review.comment else ""
            console.print(f"  [green]{review.rating}/5[/green] {review.reviewer_name}{comment}")


def clear_cache() -> None:
    """Vide toutes les entrees de cache du catalogue (le store n'est pas modifie)."""
    asyncio.run(_clear_cache_async())


async def _clear_cache_async() -> None:
    container = Container()
    service = container.catalog_service()
    try:
        count = await service.clear_caches()
    finally:
        await container.cache_gateway().close()
    console.print(f"[green]{count} entree(s) de cache supprimee(s).[/green]")
