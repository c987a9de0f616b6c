"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileSystem : Enumeration des entrées d'un répertoire

Ports résolution :
- IPathResolver : Transformation de chemins en entités typées

Ports repository :
- ILibraryItemRepository : Stockage des éléments de la vidéothèque

Ports rafraichissement :
- IItemRefresher : Rafraichissement des métadonnées d'un élément
"""

from featurette.core.ports.file_system import IFileSystem
from featurette.core.ports.refresher import IItemRefresher
from featurette.core.ports.repositories import ILibraryItemRepository
from featurette.core.ports.resolver import IPathResolver

__all__ = [
    # Système de fichiers
    "IFileSystem",
    # Résolution
    "IPathResolver",
    # Repositories
    "ILibraryItemRepository",
    # Rafraichissement
    "IItemRefresher",
]
