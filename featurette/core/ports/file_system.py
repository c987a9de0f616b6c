"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats d'énumération des fichiers.
Les implémentations (adaptateurs) fourniront l'accès concret au système de fichiers.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from featurette.core.value_objects import FileSystemEntry


class IFileSystem(ABC):
    """
    Interface pour l'énumération des répertoires.

    Aucune méthode ne parcourt les répertoires récursivement.
    """

    @abstractmethod
    def list_children(self, directory: Path) -> list[FileSystemEntry]:
        """
        Liste les entrées directes d'un répertoire (fichiers et sous-répertoires).

        Args :
            directory : Répertoire à lister

        Retourne :
            Liste des entrées, vide si le répertoire n'existe pas
        """
        ...

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """
        Liste les fichiers situés directement dans un répertoire.

        Les sous-répertoires et leur contenu sont ignorés.

        Args :
            directory : Répertoire à lister

        Retourne :
            Chemins des fichiers, vide si le répertoire n'existe pas
        """
        ...
