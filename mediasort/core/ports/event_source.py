"""
Interfaces ports pour les notifications du système de fichiers.

La source d'événements produit un flux ordonné d'événements pour le
répertoire surveillé. Seuls CLOSED_AFTER_WRITE et RENAMED_INTO
déclenchent un traitement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import AsyncIterator


class FileEventKind(Enum):
    """
    Type d'événement du système de fichiers.

    CREATED: Fichier créé (pas encore complet)
    CLOSED_AFTER_WRITE: Fichier fermé après écriture
    RENAMED_INTO: Fichier renommé/déplacé vers le répertoire surveillé
    OTHER: Tout autre événement (ignoré)
    """

    CREATED = "created"
    CLOSED_AFTER_WRITE = "closed_after_write"
    RENAMED_INTO = "renamed_into"
    OTHER = "other"


# Evenements qui declenchent un placement
ACTIONABLE_EVENTS = frozenset({FileEventKind.CLOSED_AFTER_WRITE, FileEventKind.RENAMED_INTO})


@dataclass(frozen=True)
class FileEvent:
    """
    Evénement du système de fichiers.

    Attributs :
        path : Chemin concerné (destination pour un renommage)
        kind : Type d'événement
    """

    path: Path
    kind: FileEventKind


class IEventSource(ABC):
    """
    Interface d'une source d'événements du système de fichiers.
    """

    @abstractmethod
    def events(self) -> AsyncIterator[FileEvent]:
        """
        Flux ordonné des événements du répertoire surveillé.

        Le flux ne se termine pas de lui-même.

        Raises :
            WatchStreamError : Si la surveillance ne peut pas démarrer
                ou s'interrompt
        """
        ...
