"""
Options partagees par tout un rafraichissement de metadonnees.
"""

from dataclasses import dataclass


@dataclass
class MetadataRefreshOptions:
    """
    Contexte mutable transmis a chaque etape du pipeline de rafraichissement.

    Le meme objet est partage entre un film et ses bonus pendant un cycle.
    Les etapes peuvent passer force_save a True mais ne le remettent jamais a False.

    Attributs :
        force_save : Forcer la sauvegarde meme sans changement de champ observe
    """

    force_save: bool = False
