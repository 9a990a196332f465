"""
Exceptions métier de media-sort.

Hiérarchie :
- MediaSortError : base de toutes les erreurs de l'application
  - PlacementError : échec du traitement d'un fichier (jamais fatal)
    - NotMediaFileError : extension non reconnue
    - NotFoundError : aucune correspondance chez le fournisseur
    - AlreadyExistsError : destination existante sans écrasement autorisé
    - FilesystemFailureError : échec d'une opération sur le système de fichiers
  - ConfigError : fichier de configuration absent ou invalide
  - WatchStreamError : flux de notifications interrompu (fatal en mode surveillance)
"""

from pathlib import Path
from typing import Optional

from mediasort.core.value_objects.media_info import MediaKind


class MediaSortError(Exception):
    """Erreur de base de l'application."""


class PlacementError(MediaSortError):
    """
    Echec du traitement d'un fichier.

    Le fichier reste à son dernier emplacement cohérent et le
    traitement continue avec le fichier suivant.
    """


class NotMediaFileError(PlacementError):
    """Le fichier n'a pas une extension média reconnue."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path}: n'est pas un fichier média")


class NotFoundError(PlacementError):
    """
    Aucune correspondance trouvée chez le fournisseur de métadonnées.

    Attributes:
        kind: Type de recherche effectuée (SHOW ou MOVIE)
        title: Titre recherché
    """

    def __init__(self, kind: MediaKind, title: str) -> None:
        self.kind = kind
        self.title = title
        label = "Aucune série" if kind is MediaKind.SHOW else "Aucun film"
        super().__init__(f"{label} trouvé pour '{title}'")


class AlreadyExistsError(PlacementError):
    """La destination existe déjà et l'écrasement est désactivé."""

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        super().__init__(f"La destination existe déjà: {destination}")


class FilesystemFailureError(PlacementError):
    """
    Echec d'une opération sur le système de fichiers.

    Attributes:
        path: Chemin concerné
        operation: Opération en échec (mkdir, copy, delete, chmod, chown...)
    """

    def __init__(self, path: Path, operation: str, cause: Optional[Exception] = None) -> None:
        self.path = path
        self.operation = operation
        message = f"Echec de {operation} sur {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ConfigError(MediaSortError):
    """Fichier de configuration absent, illisible ou invalide."""


class WatchStreamError(MediaSortError):
    """Le flux de notifications du système de fichiers est interrompu."""
