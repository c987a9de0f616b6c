"""
Hooks de pre-rafraichissement.

Un hook s'execute dans le pipeline de rafraichissement, avant que les
providers ne remplissent les champs de l'element.
"""

from collections.abc import Sequence

from featurette.core.entities.base_item import BaseItem, LocationType
from featurette.core.entities.movie import Movie
from featurette.core.entities.refresh_options import MetadataRefreshOptions
from featurette.core.value_objects import FileSystemEntry
from featurette.services.special_features.reconciler import SpecialFeatureReconciler


class ItemRefreshHook:
    """Etape generique de pre-rafraichissement, commune a tous les elements."""

    async def before_refresh_metadata(
        self,
        item: BaseItem,
        options: MetadataRefreshOptions,
        file_system_children: Sequence[FileSystemEntry],
    ) -> None:
        """
        Prepare un element avant le passage des providers.

        Args:
            item: Element rafraichi
            options: Contexte partage du rafraichissement
            file_system_children: Entrees du repertoire de l'element
        """
        if not item.name and item.path is not None:
            item.name = item.path.stem


class MovieRefreshHook(ItemRefreshHook):
    """
    Pre-rafraichissement d'un film.

    Apres l'etape generique, reconcilie les bonus du film et demande une
    sauvegarde (options.force_save) si leur liste a change.
    """

    def __init__(self, reconciler: SpecialFeatureReconciler) -> None:
        """
        Initialise le hook.

        Args:
            reconciler: Service de reconciliation des bonus
        """
        self._reconciler = reconciler

    async def before_refresh_metadata(
        self,
        item: BaseItem,
        options: MetadataRefreshOptions,
        file_system_children: Sequence[FileSystemEntry],
    ) -> None:
        await super().before_refresh_metadata(item, options, file_system_children)

        if not isinstance(item, Movie) or not self.supports_special_features(item):
            return

        changed = await self._reconciler.reconcile(item, options, file_system_children)
        if changed:
            options.force_save = True

    @staticmethod
    def supports_special_features(movie: Movie) -> bool:
        """
        Indique si un film peut avoir des bonus.

        Le film doit etre sur le disque, faire partie de l'arbre parent/enfant
        et ne pas etre dans un repertoire mixte.
        """
        return (
            movie.location_type == LocationType.FILE_SYSTEM
            and movie.parent_id is not None
            and not movie.is_in_mixed_folder
        )
