"""
Implementation en memoire du repository des elements.

Implemente ILibraryItemRepository avec un dictionnaire indexe par ID.
Les instances sont conservees telles quelles : un element relu est le meme
objet que celui sauvegarde, avec son etat deja charge.
"""

from typing import Optional

from loguru import logger

from featurette.core.entities.base_item import BaseItem
from featurette.core.ports.repositories import ILibraryItemRepository


class InMemoryItemRepository(ILibraryItemRepository):
    """Repository en memoire pour les elements de la videotheque."""

    def __init__(self) -> None:
        self._items: dict[str, BaseItem] = {}

    def get_by_id(self, item_id: str) -> Optional[BaseItem]:
        return self._items.get(item_id)

    def save(self, item: BaseItem) -> BaseItem:
        self._items[item.id] = item
        logger.debug(f"Element sauvegarde: {item.id} ({item.name})")
        return item
