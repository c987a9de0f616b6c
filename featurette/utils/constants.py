"""
Constantes globales pour Featurette.

Ce module contient :
- Les noms de répertoires de bonus
- Les extensions video reconnues par le resolveur
"""

# Répertoires contenant des bonus (comparaison insensible a la casse)
SPECIAL_FEATURE_FOLDERS: tuple[str, ...] = ("extras", "specials")

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".m4v",
    ".mpg",
    ".mpeg",
    ".ts",
    ".vob",
    ".iso",
})
