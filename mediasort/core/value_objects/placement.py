"""
Objets valeur pour le résultat du placement des fichiers.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class PlacementAction(Enum):
    """
    Action effectuée (ou simulée) pour un fichier.

    MOVED: Fichier déplacé vers la bibliothèque
    SKIPPED: Fichier laissé en place (non média, introuvable, conflit, erreur)
    WOULD_MOVE: Fichier qui serait déplacé (mode dry-run)
    """

    MOVED = "moved"
    SKIPPED = "skipped"
    WOULD_MOVE = "would_move"


@dataclass(frozen=True)
class PlacementResult:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        source: Chemin d'origine du fichier
        destination: Chemin calculé dans la bibliothèque (None si non calculable)
        action: Action effectuée ou simulée
        reason: Explication (raison du saut, déplacement par copie...)
    """

    source: Path
    destination: Optional[Path]
    action: PlacementAction
    reason: Optional[str] = None


@dataclass
class SortReport:
    """
    Resultat d'un tri ponctuel (--sort) sur un répertoire.

    Attributs:
        results: Résultats de placement dans l'ordre de parcours
    """

    results: list[PlacementResult] = field(default_factory=list)

    def count(self, action: PlacementAction) -> int:
        """Nombre de fichiers ayant abouti à l'action donnée."""
        return sum(1 for r in self.results if r.action is action)

    @property
    def moved(self) -> int:
        return self.count(PlacementAction.MOVED)

    @property
    def would_move(self) -> int:
        return self.count(PlacementAction.WOULD_MOVE)

    @property
    def skipped(self) -> int:
        return self.count(PlacementAction.SKIPPED)


@dataclass
class CheckReport:
    """
    Rapport du mode verification (--check), construit pendant un seul parcours.

    Attributs:
        destinations: Destination calculée -> fichiers sources qui y aboutiraient
        unresolved: Fichiers sans correspondance chez le fournisseur
        already_present: Fichiers dont la destination existe déjà (sans écrasement)
        failed: Fichiers en erreur avec le message associé
        ignored: Nombre de fichiers non média ignorés
    """

    destinations: dict[Path, list[Path]] = field(default_factory=dict)
    unresolved: list[Path] = field(default_factory=list)
    already_present: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)
    ignored: int = 0

    def add(self, destination: Path, source: Path) -> None:
        """Enregistre qu'une source aboutirait à la destination donnée."""
        self.destinations.setdefault(destination, []).append(source)

    @property
    def collisions(self) -> list[tuple[Path, list[Path]]]:
        """Destinations visées par plus d'un fichier source."""
        return [
            (destination, sources)
            for destination, sources in self.destinations.items()
            if len(sources) > 1
        ]
