"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- persistence/ : Stockage des éléments de la vidéothèque
- resolution/ : Résolution de chemins en vidéos (guessit)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from featurette.adapters.file_system import FileSystemAdapter
from featurette.adapters.persistence.memory_repository import InMemoryItemRepository
from featurette.adapters.resolution.video_resolver import VideoPathResolver

__all__ = [
    "FileSystemAdapter",
    "InMemoryItemRepository",
    "VideoPathResolver",
]
