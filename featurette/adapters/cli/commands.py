"""
Commandes CLI de rafraichissement des bonus.
"""

import asyncio
from contextlib import nullcontext
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from featurette.adapters.cli.helpers import console, suppress_loguru, with_container
from featurette.adapters.resolution.video_resolver import item_id_for_path
from featurette.core.entities import ItemType, MetadataRefreshOptions, Movie
from featurette.core.exceptions import SpecialFeatureRefreshError

# Etat global pour les options de verbosite (renseigne par le callback de main.py)
state = {"verbose": 0, "quiet": False}


def refresh(
    movie_file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            resolve_path=True,
            help="Fichier video du film",
        ),
    ],
    parent_id: Annotated[
        Optional[str],
        typer.Option(
            "--parent-id",
            help="ID du dossier parent (defaut: derive du dossier de la bibliotheque)",
        ),
    ] = None,
    mixed_folder: Annotated[
        bool,
        typer.Option("--mixed-folder", help="Le dossier contient plusieurs films"),
    ] = False,
) -> None:
    """Rafraichit un film et affiche ses bonus."""
    exit_code = asyncio.run(_refresh_async(movie_file, parent_id, mixed_folder))
    if exit_code:
        raise typer.Exit(code=exit_code)


def build_movie(
    movie_file: Path,
    parent_id: Optional[str] = None,
    mixed_folder: bool = False,
) -> Movie:
    """
    Construit le film correspondant a un fichier video.

    Sans parent_id explicite, le parent est le dossier de la bibliotheque
    (le dossier qui contient le dossier du film).
    """
    if parent_id is None:
        parent_id = item_id_for_path(movie_file.parent.parent, ItemType.FOLDER)

    return Movie(
        id=item_id_for_path(movie_file, ItemType.MOVIE),
        path=movie_file,
        parent_id=parent_id,
        is_in_mixed_folder=mixed_folder,
    )


@with_container()
async def _refresh_async(
    container,
    movie_file: Path,
    parent_id: Optional[str],
    mixed_folder: bool,
) -> int:
    """Implementation async de la commande refresh."""
    service = container.movie_refresh_service()
    repository = container.item_repository()

    movie = build_movie(movie_file, parent_id, mixed_folder)
    options = MetadataRefreshOptions()

    with suppress_loguru() if state["quiet"] else nullcontext():
        try:
            await service.refresh_metadata(movie, options)
        except SpecialFeatureRefreshError as e:
            console.print(f"[red]Erreur:[/red] {e}")
            return 1

    blocked = movie.get_block_unrated_value(container.config().user_configuration)
    _render_special_features(movie, repository, options.force_save)
    _render_parental_control(blocked)
    return 0


def _render_special_features(movie: Movie, repository, force_save: bool) -> None:
    """Affiche les bonus d'un film dans un tableau Rich."""
    if not movie.special_feature_ids:
        console.print(f"[yellow]Aucun bonus pour {movie.name}.[/yellow]")
        return

    table = Table(title=f"Bonus de {movie.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Nom", style="cyan")
    table.add_column("Fichier")
    if state["verbose"]:
        table.add_column("ID", style="dim")

    for index, item_id in enumerate(movie.special_feature_ids, start=1):
        item = repository.get_by_id(item_id)
        name = item.name if item else "?"
        filename = item.path.name if item and item.path else "?"
        row = [str(index), name, filename]
        if state["verbose"]:
            row.append(item_id)
        table.add_row(*row)

    console.print(table)
    summary = f"[bold]{len(movie.special_feature_ids)}[/bold] bonus"
    if force_save:
        summary += " (liste modifiee, sauvegarde forcee)"
    console.print(summary)


def _render_parental_control(blocked: bool) -> None:
    """Affiche la politique appliquee aux films non classes."""
    status = "[red]bloque[/red]" if blocked else "[green]autorise[/green]"
    console.print(f"Controle parental : film non classe {status}")
