"""
Informations de recherche transmises aux providers de metadonnees.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class MovieInfo:
    """
    Cle de recherche d'un film pour le pipeline de metadonnees.

    Attributs :
        name : Nom affiche du film
        path : Chemin du fichier video
        year : Annee de production
        provider_ids : IDs externes connus (tmdb, imdb, ...)
        metadata_language : Langue preferee des metadonnees
        metadata_country_code : Pays prefere des metadonnees
    """

    name: str = ""
    path: Optional[Path] = None
    year: Optional[int] = None
    provider_ids: dict[str, str] = field(default_factory=dict)
    metadata_language: Optional[str] = None
    metadata_country_code: Optional[str] = None
