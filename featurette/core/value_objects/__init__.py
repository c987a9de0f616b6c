"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- FileSystemEntry : Entree de repertoire (fichier ou sous-repertoire)
- MovieInfo : Informations de recherche d'un film pour les providers
- UserConfiguration : Preferences utilisateur en lecture seule
"""

from featurette.core.value_objects.file_system_entry import FileSystemEntry
from featurette.core.value_objects.lookup_info import MovieInfo
from featurette.core.value_objects.user_configuration import UserConfiguration

__all__ = [
    "FileSystemEntry",
    "MovieInfo",
    "UserConfiguration",
]
