"""
Utilitaires et constantes pour media-sort.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from mediasort.utils.constants import (
    DEFAULT_CONFIG_PATH,
    FIRST_MOVIE_YEAR,
    MEDIA_EXTENSIONS,
    RELEASE_TAGS,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "FIRST_MOVIE_YEAR",
    "MEDIA_EXTENSIONS",
    "RELEASE_TAGS",
]
