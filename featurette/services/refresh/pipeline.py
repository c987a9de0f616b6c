"""
Service de rafraichissement des metadonnees d'un element.

MetadataRefreshService enumere le repertoire de l'element, execute son hook
de pre-rafraichissement, puis sauvegarde l'element si necessaire.
Il sert a la fois de pipeline pour les films et de rafraichissement des bonus.
"""

from datetime import datetime
from typing import Optional

from loguru import logger

from featurette.core.entities.base_item import BaseItem, LocationType
from featurette.core.entities.refresh_options import MetadataRefreshOptions
from featurette.core.ports.file_system import IFileSystem
from featurette.core.ports.refresher import IItemRefresher
from featurette.core.ports.repositories import ILibraryItemRepository
from featurette.core.value_objects import FileSystemEntry
from featurette.services.refresh.hooks import ItemRefreshHook


class MetadataRefreshService(IItemRefresher):
    """
    Service de rafraichissement d'un element.

    Un element est sauvegarde s'il est inconnu du repository ou si une
    etape a demande options.force_save.
    """

    def __init__(
        self,
        file_system: IFileSystem,
        item_repository: ILibraryItemRepository,
        hook: Optional[ItemRefreshHook] = None,
    ) -> None:
        """
        Initialise le service de rafraichissement.

        Args:
            file_system: Enumeration du repertoire de l'element
            item_repository: Repository des elements
            hook: Hook de pre-rafraichissement (hook generique par defaut)
        """
        self._file_system = file_system
        self._item_repository = item_repository
        self._hook = hook or ItemRefreshHook()

    async def refresh_metadata(
        self,
        item: BaseItem,
        options: MetadataRefreshOptions,
    ) -> bool:
        """
        Rafraichit un element.

        Args:
            item: Element a rafraichir
            options: Contexte partage du rafraichissement

        Returns:
            True si l'element a ete sauvegarde
        """
        children = self._list_children(item)

        await self._hook.before_refresh_metadata(item, options, children)

        is_new = self._item_repository.get_by_id(item.id) is None
        item.date_last_refreshed = datetime.now()

        if not (is_new or options.force_save):
            return False

        self._item_repository.save(item)
        logger.debug(f"Element rafraichi et sauvegarde: {item.name or item.id}")
        return True

    def _list_children(self, item: BaseItem) -> list[FileSystemEntry]:
        """Entrees du repertoire contenant l'element (vide hors systeme de fichiers)."""
        folder = item.containing_folder_path
        if item.location_type != LocationType.FILE_SYSTEM or folder is None:
            return []
        return self._file_system.list_children(folder)
