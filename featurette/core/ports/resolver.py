"""
Interface port pour la résolution de chemins en entités.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from featurette.core.entities.base_item import BaseItem, Video


class IPathResolver(ABC):
    """
    Interface de résolution de chemins.

    L'identité des entités produites est dérivée du chemin résolu et reste
    stable d'une exécution à l'autre pour un même chemin.
    """

    @abstractmethod
    async def resolve_paths(
        self,
        paths: Sequence[Path],
        parent: Optional[BaseItem] = None,
    ) -> list[Video]:
        """
        Résout des chemins de fichiers en vidéos typées.

        Args :
            paths : Chemins candidats
            parent : Élément parent servant d'indice (None : aucun indice)

        Retourne :
            Zéro ou plusieurs vidéos ; les chemins non reconnus sont ignorés
        """
        ...
