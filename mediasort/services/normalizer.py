"""
Normalisation des noms de fichiers médias.

Transforme un chemin brut en titre de recherche :
- extension retirée, dernier composant du chemin, minuscules
- ponctuation (. - _) remplacée par des espaces
- tout ce qui suit le premier mot commençant par un marqueur de release
  (1080p, x264, web, hdtvrip...) supprimé
- groupes entre parenthèses supprimés
- espaces multiples réduits, bords nettoyés

Le résultat est une estimation heuristique du titre.
"""

import re
from pathlib import Path

from mediasort.utils.constants import MEDIA_EXTENSIONS, RELEASE_TAGS

_PUNCTUATION_RE = re.compile(r"[.\-_]")
# Un marqueur colle a la suite du mot ("hdtvrip", "aac2") coupe aussi le titre
_RELEASE_TAG_RE = re.compile(r"\b(?:" + "|".join(RELEASE_TAGS) + r").*")
# Glouton : du premier "(" au dernier ")" pour absorber les groupes imbriques
_PARENTHESIS_RE = re.compile(r"\(.*\)")
_WHITESPACE_RE = re.compile(r"\s+")


def is_media_file(path: Path) -> bool:
    """
    Indique si le fichier a une extension média reconnue.

    La comparaison est insensible à la casse ("Film.MKV" est accepté).
    """
    extension = path.suffix.lower().lstrip(".")
    return extension in MEDIA_EXTENSIONS


def normalize_title(path: Path) -> str:
    """
    Normalise le nom d'un fichier en titre de recherche.

    Args:
        path: Chemin du fichier (seul le dernier composant est utilisé)

    Returns:
        Titre normalisé, éventuellement vide
    """
    name = path.with_suffix("").name if path.suffix else path.name
    return normalize_text(name)


def normalize_text(name: str) -> str:
    """
    Applique la normalisation à un nom déjà privé de son extension.

    Idempotent : un titre déjà normalisé est retourné tel quel.
    """
    name = name.lower()
    name = _PUNCTUATION_RE.sub(" ", name)
    name = _RELEASE_TAG_RE.sub("", name, count=1)
    name = _PARENTHESIS_RE.sub("", name)
    return _WHITESPACE_RE.sub(" ", name).strip()
