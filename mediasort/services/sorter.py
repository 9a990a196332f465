"""
Service de tri des fichiers (un fichier ou un répertoire complet).

Transforme chaque échec de placement en résultat SKIPPED : un fichier
en erreur est journalisé et le traitement continue avec le suivant.
"""

from pathlib import Path

from loguru import logger

from mediasort.core.exceptions import NotMediaFileError, PlacementError
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.value_objects import PlacementAction, PlacementResult, SortReport
from mediasort.services.placement import PlacementService


class SortService:
    """
    Service de tri ponctuel (--sort) et unitaire (mode surveillance).

    Utilisation:
        sorter = SortService(placement, file_system)
        report = await sorter.sort_directory(Path("/downloads"), dry_run=True)
        print(f"{report.would_move} fichier(s) seraient deplaces")
    """

    def __init__(self, placement: PlacementService, file_system: IFileSystem) -> None:
        self._placement = placement
        self._fs = file_system

    async def process_file(self, path: Path, dry_run: bool = False) -> PlacementResult:
        """
        Place un fichier et retourne le résultat, sans jamais lever PlacementError.

        Args:
            path: Fichier à placer
            dry_run: Simule le placement sans modifier les fichiers

        Returns:
            PlacementResult ; SKIPPED avec la raison en cas d'échec
        """
        path = Path(path)
        try:
            return await self._placement.place(path, dry_run=dry_run)
        except NotMediaFileError as e:
            logger.debug(str(e))
            return PlacementResult(
                source=path,
                destination=None,
                action=PlacementAction.SKIPPED,
                reason=str(e),
            )
        except PlacementError as e:
            logger.warning(f"Impossible de traiter {path}: {e}")
            return PlacementResult(
                source=path,
                destination=getattr(e, "destination", None),
                action=PlacementAction.SKIPPED,
                reason=str(e),
            )

    async def sort_directory(self, directory: Path, dry_run: bool = False) -> SortReport:
        """
        Trie récursivement (profondeur d'abord) tous les fichiers d'un répertoire.

        Args:
            directory: Répertoire à trier
            dry_run: Simule les placements

        Returns:
            SortReport avec un résultat par fichier rencontré
        """
        report = SortReport()
        for path in self._fs.walk_files(Path(directory)):
            report.results.append(await self.process_file(path, dry_run=dry_run))

        logger.info(
            f"Tri termine: {report.moved} deplace(s), {report.would_move} simule(s), "
            f"{report.skipped} ignore(s)"
        )
        return report
