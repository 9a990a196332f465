"""
Fonctions utilitaires partagees dans le projet media-sort.

Ce module centralise les fonctions reutilisees a travers le codebase :
- strip_invisible_chars : retrait des caracteres Unicode invisibles
- sanitize_for_filesystem : nettoyage d'un titre pour un nom de fichier
"""

import unicodedata

from pathvalidate import sanitize_filename

# Longueur maximale d'un composant de chemin (hors extension)
MAX_FILENAME_LENGTH = 200

# Caractères remplacés par un tiret avant le passage dans pathvalidate
SPECIAL_CHARS_TO_DASH = frozenset({"/", "\\", "*", '"', "<", ">", "|", ":"})


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie un titre pour l'utiliser comme composant de chemin.

    Transformations appliquées :
    - Normalisation Unicode NFKC et retrait des caractères invisibles
    - ": " -> " - " (ex: "Star Wars: Episode IV" -> "Star Wars - Episode IV")
    - Caractères spéciaux (/ \\ * " < > | :) -> tiret
    - Nettoyage pathvalidate (plateforme universelle) pour le reste
    - Troncature à 200 caractères

    Args:
        text: Titre à nettoyer.

    Returns:
        Texte valide pour un nom de fichier ou de répertoire,
        vide si rien d'utilisable ne subsiste.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = strip_invisible_chars(text)

    text = text.replace(": ", " - ")
    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")

    # replacement_text="" : le "?" et les caractères restants sont supprimés
    text = sanitize_filename(text, platform="universal", replacement_text="")

    if len(text) > MAX_FILENAME_LENGTH:
        text = text[:MAX_FILENAME_LENGTH]

    text = text.strip()
    # "." et ".." designeraient un repertoire existant de l'arborescence
    if text in (".", ".."):
        return ""
    return text
