"""
Point d'entrée CLI de Featurette.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import refresh, state
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level_for, set_console_level

__version__ = "0.1.0"

app = typer.Typer(
    name="featurette",
    help="Reconciliation des bonus de la vidéothèque",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Featurette - Bonus des films de la vidéothèque."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose

    level = console_level_for(verbose, quiet)
    if level is not None:
        set_console_level(level)


app.command()(refresh)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Répertoires de bonus : {', '.join(config.special_feature_folders)}")
    typer.echo(
        f"Films non classés : {'bloqués' if config.block_unrated_movies else 'autorisés'}"
    )
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Featurette v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de Featurette", version=__version__)

    app()


if __name__ == "__main__":
    main()
