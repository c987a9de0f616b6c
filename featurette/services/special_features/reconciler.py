"""
Service de reconciliation des bonus d'un film.

Compare les bonus trouves sur le disque avec la liste stockee sur le film,
rafraichit chaque bonus en parallele, puis remplace la liste stockee.

Responsabilites:
- Detecter un changement (comparaison ordonnee des IDs)
- Rafraichir tous les bonus de facon concurrente (tout-ou-rien)
- Ne modifier special_feature_ids qu'apres le succes de tous les rafraichissements
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from featurette.core.entities.base_item import BaseItem
from featurette.core.entities.movie import Movie
from featurette.core.entities.refresh_options import MetadataRefreshOptions
from featurette.core.exceptions import SpecialFeatureRefreshError
from featurette.core.ports.refresher import IItemRefresher
from featurette.core.value_objects import FileSystemEntry
from featurette.services.special_features.scanner import SpecialFeatureScanner


class SpecialFeatureReconciler:
    """
    Service de reconciliation des bonus.

    Non reentrant pour un meme film : l'appelant serialise les appels.
    Des films differents peuvent etre reconcilies en parallele.

    Example:
        reconciler = SpecialFeatureReconciler(scanner=scanner, item_refresher=refresher)
        changed = await reconciler.reconcile(movie, options, children)
    """

    def __init__(
        self,
        scanner: SpecialFeatureScanner,
        item_refresher: IItemRefresher,
    ) -> None:
        """
        Initialise le service de reconciliation.

        Args:
            scanner: Service de recherche des bonus
            item_refresher: Rafraichissement complet d'un bonus
        """
        self._scanner = scanner
        self._item_refresher = item_refresher

    async def reconcile(
        self,
        movie: Movie,
        options: MetadataRefreshOptions,
        file_system_children: Sequence[FileSystemEntry],
    ) -> bool:
        """
        Reconcilie les bonus d'un film avec le disque.

        La liste est remplacee meme si elle est identique.

        Args:
            movie: Film dont les bonus sont reconcilies
            options: Contexte partage, transmis a chaque bonus
            file_system_children: Entrees directes du repertoire du film

        Returns:
            True si la liste ordonnee des IDs a change

        Raises:
            SpecialFeatureRefreshError: Si le rafraichissement d'un bonus echoue
            asyncio.CancelledError: Si la tache est annulee (rien n'est modifie)
        """
        new_items = await self._scanner.scan(file_system_children)
        new_item_ids = [item.id for item in new_items]

        # Comparaison ordonnee, calculee avant tout rafraichissement
        changed = movie.special_feature_ids != new_item_ids

        await self._refresh_all(new_items, options)

        movie.special_feature_ids = new_item_ids

        if changed:
            logger.info(
                f"Bonus modifies pour {movie.name or movie.id}: "
                f"{len(new_item_ids)} bonus"
            )
        else:
            logger.debug(f"Bonus inchanges pour {movie.name or movie.id}")

        return changed

    async def _refresh_all(
        self,
        items: Sequence[BaseItem],
        options: MetadataRefreshOptions,
    ) -> None:
        """
        Rafraichit tous les bonus en parallele et attend la fin de chacun.

        Au premier echec, les rafraichissements restants sont annules
        et l'erreur est propagee.
        """
        if not items:
            return

        tasks = [
            asyncio.create_task(self._refresh_one(item, options))
            for item in items
        ]
        try:
            await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _refresh_one(self, item: BaseItem, options: MetadataRefreshOptions) -> None:
        try:
            await self._item_refresher.refresh_metadata(item, options)
        except Exception as e:
            logger.error(f"Echec du rafraichissement du bonus {item.path}: {e}")
            raise SpecialFeatureRefreshError(item.id, item.path) from e
