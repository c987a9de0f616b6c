"""
Exceptions du domaine Featurette.
"""

from pathlib import Path
from typing import Optional


class FeaturetteError(Exception):
    """Exception de base de l'application."""


class SpecialFeatureRefreshError(FeaturetteError):
    """
    Exception levee quand le rafraichissement d'un bonus echoue.

    La reconciliation est tout-ou-rien : la liste des bonus du film
    n'est pas modifiee quand cette exception est levee.

    Attributes:
        item_id: ID du bonus en echec
        path: Chemin du bonus en echec
    """

    def __init__(self, item_id: str, path: Optional[Path] = None) -> None:
        """
        Initialise l'erreur avec le bonus en cause.

        Args:
            item_id: ID du bonus dont le rafraichissement a echoue
            path: Chemin du bonus (optionnel)
        """
        self.item_id = item_id
        self.path = path
        super().__init__(f"Echec du rafraichissement du bonus {item_id} ({path})")
