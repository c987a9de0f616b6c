"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem basee sur pathlib.
"""

from pathlib import Path

from featurette.core.ports.file_system import IFileSystem
from featurette.core.value_objects import FileSystemEntry


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Les entrees sont triees par nom pour un ordre deterministe.
    Un repertoire absent donne une liste vide ; les autres erreurs
    d'acces sont propagees.
    """

    def list_children(self, directory: Path) -> list[FileSystemEntry]:
        """Liste les entrees directes d'un repertoire."""
        if not directory.is_dir():
            return []

        return [
            FileSystemEntry(path=path, is_directory=path.is_dir())
            for path in sorted(directory.iterdir(), key=lambda p: p.name)
        ]

    def list_files(self, directory: Path) -> list[Path]:
        """Liste les fichiers d'un repertoire sans descendre dans les sous-repertoires."""
        return [entry.path for entry in self.list_children(directory) if not entry.is_directory]
