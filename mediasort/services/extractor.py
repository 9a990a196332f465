"""
Extraction du signal série et de l'année depuis un titre normalisé.

Ordre obligatoire :
1. normalisation du nom de fichier
2. extraction du signal série (remplace le titre par le nom de la série)
3. extraction de l'année, sur le titre issu de l'étape 2

Exemple : "great.series.2005.s13e00.special.title.1080p.mkv"
    -> titre "great series", année 2005, saison 13, SpecialEpisode("Special Title")
"""

import re
import string
from datetime import datetime
from pathlib import Path
from typing import Optional

from mediasort.core.exceptions import NotMediaFileError
from mediasort.core.value_objects import (
    EpisodeMarker,
    EpisodeNumber,
    ParsedFilename,
    ShowSignal,
    SpecialEpisode,
)
from mediasort.services.normalizer import is_media_file, normalize_title
from mediasort.utils.constants import FIRST_MOVIE_YEAR, UNKNOWN_SPECIAL_TITLE

_SHOW_RE = re.compile(
    r"^(?P<name>.*)s(?P<season>\d{1,2})e(?P<episode>\d{1,2})(?P<trailing>.*)$",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"^(?P<title>.*) (?P<year>\d{4})$")


def extract_show_signal(title: str) -> tuple[str, Optional[ShowSignal]]:
    """
    Cherche le motif "<nom> S<saison>E<episode> <titre d'episode>".

    Args:
        title: Titre normalisé

    Returns:
        (titre de travail, signal série). Sans correspondance, le titre
        est retourné inchangé avec None.
    """
    match = _SHOW_RE.match(title)
    if match is None:
        return title, None

    season = int(match.group("season"))
    if not 1 <= season <= 99:
        return title, None

    episode = _episode_marker(int(match.group("episode")), match.group("trailing"))
    return match.group("name").strip(), ShowSignal(season=season, episode=episode)


def _episode_marker(number: int, trailing: str) -> EpisodeMarker:
    """Construit le marqueur d'épisode ; le titre d'épisode n'est gardé que pour les spéciaux."""
    if number != 0:
        return EpisodeNumber(number)
    trailing = trailing.strip()
    if not trailing:
        return SpecialEpisode(UNKNOWN_SPECIAL_TITLE)
    return SpecialEpisode(string.capwords(trailing))


def extract_year(title: str, current_year: Optional[int] = None) -> tuple[str, Optional[int]]:
    """
    Extrait une année finale ("<titre> <aaaa>") si elle est plausible.

    Une année est plausible entre 1878 (premier film) et l'année courante.
    Un titre comme "the 4400" ou "2012" n'est donc pas amputé.

    Args:
        title: Titre de travail
        current_year: Année courante (défaut : année de l'horloge système)

    Returns:
        (titre sans l'année, année) ou (titre inchangé, None)
    """
    match = _YEAR_RE.match(title)
    if match is None:
        return title, None

    if current_year is None:
        current_year = datetime.now().year

    year = int(match.group("year"))
    if not FIRST_MOVIE_YEAR <= year <= current_year:
        return title, None

    return match.group("title"), year


def parse_filename(path: Path) -> ParsedFilename:
    """
    Analyse un fichier : normalisation, signal série puis année.

    Args:
        path: Chemin du fichier

    Returns:
        ParsedFilename avec le titre de travail, l'année et le signal série

    Raises:
        NotMediaFileError: Si l'extension n'est pas reconnue
    """
    if not is_media_file(path):
        raise NotMediaFileError(path)

    title = normalize_title(path)
    title, show_signal = extract_show_signal(title)
    title, year = extract_year(title)

    return ParsedFilename(
        path=path,
        extension=path.suffix,
        title=title,
        year=year,
        show_signal=show_signal,
    )
