"""
Entree du systeme de fichiers.

Represente un enfant direct d'un repertoire tel qu'enumere par l'adaptateur
systeme de fichiers, avant toute resolution en entite.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileSystemEntry:
    """
    Entree de repertoire (fichier ou sous-repertoire).

    Attributs :
        path : Chemin absolu de l'entree
        is_directory : True si l'entree est un repertoire
    """

    path: Path
    is_directory: bool = False

    @property
    def name(self) -> str:
        """Nom de l'entree (dernier composant du chemin)."""
        return self.path.name
