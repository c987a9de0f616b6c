"""
Bonus (special features) d'un film.

- scanner : Recherche des bonus dans les repertoires "extras" / "specials"
- reconciler : Comparaison avec la liste stockee, rafraichissement en cascade, commit
"""

from featurette.services.special_features.reconciler import SpecialFeatureReconciler
from featurette.services.special_features.scanner import SpecialFeatureScanner

__all__ = [
    "SpecialFeatureReconciler",
    "SpecialFeatureScanner",
]
