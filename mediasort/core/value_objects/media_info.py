"""
Objets valeur pour l'identification des médias.

Objets valeur immutables représentant ce qui a été déduit d'un fichier :
le signal série (saison/épisode) et les informations canoniques du média.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MediaKind(Enum):
    """Type de média identifié.

    Valeurs:
        SHOW: Episode de série TV (avec saison/épisode)
        MOVIE: Film
    """

    SHOW = "show"
    MOVIE = "movie"


@dataclass(frozen=True)
class EpisodeNumber:
    """
    Episode numéroté (numéro >= 1).

    Attributs :
        number : Numéro de l'épisode dans la saison
    """

    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Numéro d'épisode invalide: {self.number}")

    @property
    def label(self) -> str:
        """Libellé utilisé dans le nom de fichier (ex: '03')."""
        return f"{self.number:02d}"


@dataclass(frozen=True)
class SpecialEpisode:
    """
    Episode spécial (numéro 0), désigné par un titre descriptif.

    Attributs :
        title : Titre de l'épisode spécial (ex: "Unknown Special")
    """

    title: str

    @property
    def label(self) -> str:
        """Libellé utilisé dans le nom de fichier (ex: '00 - Christmas Special')."""
        return f"00 - {self.title}"


EpisodeMarker = Union[EpisodeNumber, SpecialEpisode]


@dataclass(frozen=True)
class ShowSignal:
    """
    Couple saison/épisode extrait d'un nom de fichier.

    Sa présence marque un fichier comme épisode de série.

    Attributs :
        season : Numéro de saison (1 à 99)
        episode : Episode numéroté ou spécial
    """

    season: int
    episode: EpisodeMarker

    def __post_init__(self) -> None:
        if not 1 <= self.season <= 99:
            raise ValueError(f"Numéro de saison invalide: {self.season}")


@dataclass(frozen=True)
class MediaInfo:
    """
    Informations canoniques d'un média après consultation du catalogue.

    Invariant : show_signal est renseigné si et seulement si le média
    est un épisode de série.

    Attributs :
        name : Titre canonique retourné par le fournisseur
        year : Année (parsée pour les séries, canonique pour les films)
        show_signal : Saison/épisode pour les séries, None pour les films
    """

    name: str
    year: Optional[int] = None
    show_signal: Optional[ShowSignal] = None

    @property
    def kind(self) -> MediaKind:
        """Retourne le type de média (SHOW si un signal série est présent)."""
        if self.show_signal is not None:
            return MediaKind.SHOW
        return MediaKind.MOVIE
