"""
Service d'organisation des fichiers médias.

Ce module fournit le calcul du chemin de destination des films et
épisodes dans la bibliothèque.

Structure séries : show_path/Titre [(Annee)]/Season XX/Titre - SXXEYY.ext
Structure films  : movie_path/Titre [(Annee)].ext

Un répertoire de série existant sans année continue d'être utilisé,
même lorsque l'année est connue.
"""

from pathlib import Path
from typing import Optional

from mediasort.core.exceptions import NotFoundError
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.value_objects import MediaInfo, MediaKind, ShowSignal
from mediasort.utils.helpers import sanitize_for_filesystem


def _with_year(name: str, year: Optional[int]) -> str:
    """Ajoute l'année entre parenthèses si elle est connue."""
    if year is None:
        return name
    return f"{name} ({year})"


def format_episode_name(name: str, signal: ShowSignal) -> str:
    """
    Formate le nom d'un épisode (sans extension).

    Exemples :
        "Great Series - S13E03"
        "Great Series - S13E00 - Special Title"
    """
    return f"{name} - S{signal.season:02d}E{signal.episode.label}"


def build_destination(
    media: MediaInfo,
    extension: str,
    show_root: Path,
    movie_root: Path,
    file_system: IFileSystem,
) -> Path:
    """
    Calcule le chemin de destination d'un média.

    Le résultat ne dépend que des arguments et de l'existence éventuelle
    du répertoire de série sans année.

    Args:
        media: Informations canoniques du média
        extension: Extension d'origine, point inclus
        show_root: Racine de la bibliothèque des séries
        movie_root: Racine de la bibliothèque des films
        file_system: Accès au système de fichiers (test d'existence)

    Returns:
        Chemin complet du fichier dans la bibliothèque

    Raises:
        NotFoundError: Nom canonique vide une fois nettoyé
    """
    name = sanitize_for_filesystem(media.name)
    if not name:
        raise NotFoundError(media.kind, media.name)

    if media.kind is MediaKind.SHOW:
        signal = media.show_signal
        show_dir = show_root / name
        if media.year is not None and not file_system.exists(show_dir):
            show_dir = show_root / _with_year(name, media.year)
        season_dir = show_dir / f"Season {signal.season:02d}"
        return season_dir / f"{format_episode_name(name, signal)}{extension}"

    if media.kind is MediaKind.MOVIE:
        return movie_root / f"{_with_year(name, media.year)}{extension}"

    raise ValueError(f"Type de media non gere: {media.kind}")


class OrganizerService:
    """
    Service de calcul des destinations, lié aux racines configurées.

    Utilisation:
        organizer = OrganizerService(file_system, show_root, movie_root)
        destination = organizer.destination_for(media, ".mkv")
    """

    def __init__(self, file_system: IFileSystem, show_root: Path, movie_root: Path) -> None:
        self._fs = file_system
        self._show_root = Path(show_root)
        self._movie_root = Path(movie_root)

    @property
    def roots(self) -> tuple[Path, Path]:
        """Racines (séries, films) de la bibliothèque."""
        return self._show_root, self._movie_root

    def destination_for(self, media: MediaInfo, extension: str) -> Path:
        """Calcule la destination d'un média avec les racines configurées."""
        return build_destination(
            media, extension, self._show_root, self._movie_root, self._fs
        )
