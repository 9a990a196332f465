"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaKind : Type de media (SHOW, MOVIE)
- EpisodeNumber / SpecialEpisode / EpisodeMarker : Episode numerote ou special
- ShowSignal : Couple saison/episode
- MediaInfo : Informations canoniques d'un media
- ParsedFilename : Informations extraites du parsing d'un nom de fichier
- PlacementAction / PlacementResult : Resultat du placement d'un fichier
- SortReport / CheckReport : Rapports des modes --sort et --check
"""

from mediasort.core.value_objects.media_info import (
    EpisodeMarker,
    EpisodeNumber,
    MediaInfo,
    MediaKind,
    ShowSignal,
    SpecialEpisode,
)
from mediasort.core.value_objects.parsed_info import ParsedFilename
from mediasort.core.value_objects.placement import (
    CheckReport,
    PlacementAction,
    PlacementResult,
    SortReport,
)

__all__ = [
    "EpisodeMarker",
    "EpisodeNumber",
    "MediaInfo",
    "MediaKind",
    "ShowSignal",
    "SpecialEpisode",
    "ParsedFilename",
    "CheckReport",
    "PlacementAction",
    "PlacementResult",
    "SortReport",
]
