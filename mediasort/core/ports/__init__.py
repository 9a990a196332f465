"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports fournisseurs : Contrats pour les catalogues externes
- IShowProvider / ShowMatch : Recherche de séries
- IMovieProvider / MovieMatch : Recherche de films

Port système de fichiers :
- IFileSystem : Opérations fichiers et permissions

Port notifications :
- IEventSource / FileEvent / FileEventKind : Flux d'événements du répertoire surveillé
"""

from mediasort.core.ports.api_clients import (
    IMovieProvider,
    IShowProvider,
    MovieMatch,
    ShowMatch,
)
from mediasort.core.ports.event_source import (
    ACTIONABLE_EVENTS,
    FileEvent,
    FileEventKind,
    IEventSource,
)
from mediasort.core.ports.file_system import IFileSystem

__all__ = [
    # Fournisseurs
    "IMovieProvider",
    "IShowProvider",
    "MovieMatch",
    "ShowMatch",
    # Système de fichiers
    "IFileSystem",
    # Notifications
    "ACTIONABLE_EVENTS",
    "FileEvent",
    "FileEventKind",
    "IEventSource",
]
