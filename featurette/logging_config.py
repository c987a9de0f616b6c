"""
Logging de Featurette via loguru.

Deux sorties :
- stderr, coloree, dont le niveau suit les options --verbose/--quiet de la CLI
- un fichier JSON avec rotation, toujours au niveau DEBUG

Le handler stderr est conserve par son identifiant loguru pour pouvoir
changer son niveau sans toucher au handler fichier.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant loguru du handler stderr courant (None tant qu'il n'est pas installe)
_console_handler_id: Optional[int] = None


def console_level_for(verbose: int, quiet: bool) -> Optional[str]:
    """
    Traduit les options de verbosite de la CLI en niveau de log console.

    -q donne ERROR, -v donne INFO, -vv (ou plus) donne DEBUG.
    Sans option, retourne None : le niveau configure est conserve.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return None


def set_console_level(level: str) -> None:
    """Remplace le handler stderr par un handler au niveau demande."""
    global _console_handler_id

    if _console_handler_id is None:
        # Premier appel : retire le handler par defaut de loguru
        logger.remove()
    else:
        logger.remove(_console_handler_id)

    _console_handler_id = logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/featurette.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les handlers stderr et fichier.

    Args :
        log_level : Niveau initial de la console, ajuste ensuite par la CLI
        log_file : Fichier de log JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    global _console_handler_id

    logger.remove()
    _console_handler_id = None
    set_console_level(log_level)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), console=log_level)
