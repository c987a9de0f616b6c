"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets.
"""

from abc import ABC, abstractmethod
from typing import Optional

from featurette.core.entities.base_item import BaseItem


class ILibraryItemRepository(ABC):
    """
    Interface de stockage des éléments de la vidéothèque.

    Le repository possède les bonus ; un film ne garde que leurs IDs.
    """

    @abstractmethod
    def get_by_id(self, item_id: str) -> Optional[BaseItem]:
        """Récupère un élément par son ID. Retourne None s'il est inconnu."""
        ...

    @abstractmethod
    def save(self, item: BaseItem) -> BaseItem:
        """Sauvegarde un élément (insertion ou mise à jour)."""
        ...
