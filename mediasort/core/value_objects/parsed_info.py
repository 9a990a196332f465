"""
Objets valeur pour les informations de parsing de noms de fichiers.

Résultat de l'analyse locale (sans appel réseau) d'un nom de fichier :
titre normalisé, année éventuelle et signal série éventuel.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mediasort.core.value_objects.media_info import ShowSignal


@dataclass(frozen=True)
class ParsedFilename:
    """
    Informations extraites du nom d'un fichier média.

    Attributs:
        path: Chemin du fichier analysé
        extension: Extension d'origine, point inclus (ex: ".mkv")
        title: Titre de travail (normalisé, sans signal série ni année)
        year: Année extraite du titre, si plausible
        show_signal: Saison/épisode si le nom correspond au motif série
    """

    path: Path
    extension: str
    title: str
    year: Optional[int] = None
    show_signal: Optional[ShowSignal] = None
