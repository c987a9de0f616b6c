"""
Service de recherche des bonus d'un film.

Transforme les entrees du repertoire d'un film en une liste ordonnee
d'entites bonus, en privilegiant les instances deja persistees.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from loguru import logger

from featurette.core.entities.base_item import BaseItem
from featurette.core.ports.file_system import IFileSystem
from featurette.core.ports.repositories import ILibraryItemRepository
from featurette.core.ports.resolver import IPathResolver
from featurette.core.value_objects import FileSystemEntry
from featurette.utils.constants import SPECIAL_FEATURE_FOLDERS


class SpecialFeatureScanner:
    """
    Service de recherche des bonus.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister le contenu des repertoires de bonus
    - Le resolveur (IPathResolver) pour transformer les fichiers en videos
    - Le repository (ILibraryItemRepository) pour reprendre les instances persistees
    """

    def __init__(
        self,
        file_system: IFileSystem,
        path_resolver: IPathResolver,
        item_repository: ILibraryItemRepository,
        folder_names: Iterable[str] = SPECIAL_FEATURE_FOLDERS,
    ) -> None:
        """
        Initialise le service de recherche.

        Args:
            file_system: Implementation de IFileSystem pour lister les repertoires
            path_resolver: Implementation de IPathResolver
            item_repository: Repository des elements (lecture seule ici)
            folder_names: Noms des repertoires de bonus (insensible a la casse)
        """
        self._file_system = file_system
        self._path_resolver = path_resolver
        self._item_repository = item_repository
        self._folder_names = frozenset(name.lower() for name in folder_names)

    async def scan(self, file_system_children: Sequence[FileSystemEntry]) -> list[BaseItem]:
        """
        Recherche les bonus parmi les entrees du repertoire d'un film.

        Args:
            file_system_children: Entrees directes du repertoire du film,
                enumerees par l'appelant pour ce cycle

        Returns:
            Bonus tries par chemin, sans doublon d'ID. Liste vide si aucun
            repertoire de bonus n'est present.
        """
        candidates = self._collect_candidate_paths(file_system_children)
        if not candidates:
            return []

        # Pas d'indice de parent : les bonus ne font pas partie de l'arbre
        videos = await self._path_resolver.resolve_paths(candidates, None)

        items = [self._prefer_persisted(video) for video in videos]

        # Tri par chemin pour que la liste puisse etre comparee entre deux cycles
        items.sort(key=lambda item: str(item.path or ""))

        return self._drop_duplicate_ids(items)

    def is_special_feature_folder(self, entry: FileSystemEntry) -> bool:
        """Indique si une entree est un repertoire de bonus."""
        return entry.is_directory and entry.name.lower() in self._folder_names

    def _collect_candidate_paths(self, entries: Iterable[FileSystemEntry]) -> list[Path]:
        """Fichiers situes directement dans chaque repertoire de bonus."""
        candidates: list[Path] = []
        for entry in entries:
            if not self.is_special_feature_folder(entry):
                continue
            files = self._file_system.list_files(entry.path)
            logger.debug(f"{len(files)} fichier(s) dans {entry.path}")
            candidates.extend(files)
        return candidates

    def _prefer_persisted(self, video: BaseItem) -> BaseItem:
        """Retourne l'instance persistee si elle existe, sinon la video resolue."""
        persisted = self._item_repository.get_by_id(video.id)
        return persisted if persisted is not None else video

    def _drop_duplicate_ids(self, items: list[BaseItem]) -> list[BaseItem]:
        seen: set[str] = set()
        unique: list[BaseItem] = []
        for item in items:
            if item.id in seen:
                logger.warning(f"Bonus en double ignore: {item.id} ({item.path})")
                continue
            seen.add(item.id)
            unique.append(item)
        return unique
