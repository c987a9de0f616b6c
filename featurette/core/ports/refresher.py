"""
Interface port pour le rafraichissement des métadonnées d'un élément.
"""

from abc import ABC, abstractmethod

from featurette.core.entities.base_item import BaseItem
from featurette.core.entities.refresh_options import MetadataRefreshOptions


class IItemRefresher(ABC):
    """
    Interface du rafraichissement complet d'un élément.

    L'annulation passe par l'annulation de la tâche asyncio appelante :
    asyncio.CancelledError doit être propagée, jamais absorbée.
    """

    @abstractmethod
    async def refresh_metadata(
        self,
        item: BaseItem,
        options: MetadataRefreshOptions,
    ) -> bool:
        """
        Rafraichit les métadonnées d'un élément.

        Args :
            item : Élément à rafraichir
            options : Contexte partagé du rafraichissement

        Retourne :
            True si l'élément a été sauvegardé

        Lève :
            Exception : Toute erreur du rafraichissement est propagée
        """
        ...
