"""
Rafraichissement des metadonnees.

- hooks : Etapes de pre-rafraichissement (generique, puis specifique aux films)
- pipeline : Service de rafraichissement d'un element (implemente IItemRefresher)
"""

from featurette.services.refresh.hooks import ItemRefreshHook, MovieRefreshHook
from featurette.services.refresh.pipeline import MetadataRefreshService

__all__ = [
    "ItemRefreshHook",
    "MetadataRefreshService",
    "MovieRefreshHook",
]
