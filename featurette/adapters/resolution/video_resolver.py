"""
Implementation du resolveur de chemins video avec guessit.

Ce module fournit VideoPathResolver qui implemente IPathResolver :
les fichiers video deviennent des entites Video dont l'ID est derive du chemin.
"""

import asyncio
import os
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from guessit import guessit
from loguru import logger

from featurette.core.entities.base_item import BaseItem, ItemType, LocationType, Video
from featurette.core.ports.resolver import IPathResolver
from featurette.utils.constants import VIDEO_EXTENSIONS

# Espace de noms des IDs d'elements (uuid5 du chemin normalise)
ITEM_ID_NAMESPACE = uuid.UUID("5f0c3a52-8d1e-4c4b-9b8e-2a6f1d7e9c31")


def item_id_for_path(path: Path, item_type: ItemType = ItemType.VIDEO) -> str:
    """
    Calcule l'ID stable d'un element a partir de son chemin.

    Le chemin est normalise (absolu, casse systeme) pour qu'un meme fichier
    donne toujours le meme ID.

    Args:
        path: Chemin du fichier
        item_type: Type d'element (fait partie de la cle)

    Returns:
        ID hexadecimal de 32 caracteres
    """
    normalized = os.path.normcase(os.path.abspath(path))
    return uuid.uuid5(ITEM_ID_NAMESPACE, f"{item_type.value}:{normalized}").hex


class VideoPathResolver(IPathResolver):
    """
    Resolveur de chemins video.

    Ne retient que les extensions de VIDEO_EXTENSIONS et nomme chaque
    video d'apres le titre extrait par guessit.
    """

    async def resolve_paths(
        self,
        paths: Sequence[Path],
        parent: Optional[BaseItem] = None,
    ) -> list[Video]:
        """
        Resout des chemins en videos.

        Le parsing guessit est execute dans un thread pour ne pas bloquer
        la boucle evenementielle.

        Args:
            paths: Chemins candidats
            parent: Element parent (sert uniquement a renseigner parent_id)

        Returns:
            Videos resolues, dans l'ordre des chemins recus
        """
        return await asyncio.to_thread(self._resolve_all, list(paths), parent)

    def _resolve_all(self, paths: list[Path], parent: Optional[BaseItem]) -> list[Video]:
        videos = []
        for path in paths:
            video = self._resolve(path, parent)
            if video is not None:
                videos.append(video)
        logger.debug(f"{len(videos)}/{len(paths)} chemin(s) resolu(s) en video")
        return videos

    def _resolve(self, path: Path, parent: Optional[BaseItem]) -> Optional[Video]:
        if path.suffix.lower() not in VIDEO_EXTENSIONS:
            return None

        name, year = self._guess_name(path)
        return Video(
            id=item_id_for_path(path),
            name=name,
            path=path,
            location_type=LocationType.FILE_SYSTEM,
            parent_id=parent.id if parent is not None else None,
            production_year=year,
        )

    def _guess_name(self, path: Path) -> tuple[str, Optional[int]]:
        """
        Extrait le titre et l'annee d'un nom de fichier.

        Returns:
            Tuple (titre, annee) ; le nom sans extension si guessit echoue
        """
        try:
            result = guessit(path.name)
        except Exception as e:
            logger.debug(f"guessit n'a pas pu parser {path.name}: {e}")
            return path.stem, None

        title = result.get("title") or path.stem
        year = result.get("year")
        return str(title), year if isinstance(year, int) else None
