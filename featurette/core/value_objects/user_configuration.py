"""
Configuration utilisateur en lecture seule.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserConfiguration:
    """
    Preferences de controle parental d'un utilisateur.

    Attributs :
        block_not_rated : Bloquer les elements sans classification (generique)
        block_unrated_movies : Bloquer les films sans classification
    """

    block_not_rated: bool = False
    block_unrated_movies: bool = False
