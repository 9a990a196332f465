"""
Service de vérification des conflits (mode --check).

Parcourt un répertoire en profondeur d'abord et simule le placement de
chaque fichier pour repérer :
- les destinations visées par plusieurs fichiers (une version pourrait
  en écraser une autre)
- les fichiers introuvables chez les fournisseurs
- les fichiers dont la destination existe déjà dans la bibliothèque

Aucun fichier n'est modifié : le placement est toujours simulé.
"""

from pathlib import Path

from loguru import logger

from mediasort.core.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    NotMediaFileError,
    PlacementError,
)
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.value_objects import CheckReport
from mediasort.services.placement import PlacementService


class ConflictScannerService:
    """
    Service de détection des collisions de destination.

    Utilisation:
        scanner = ConflictScannerService(placement, file_system)
        report = await scanner.scan(Path("/downloads"))
        for destination, sources in report.collisions:
            print(destination, sources)
    """

    def __init__(self, placement: PlacementService, file_system: IFileSystem) -> None:
        self._placement = placement
        self._fs = file_system

    async def scan(self, directory: Path) -> CheckReport:
        """
        Simule le placement de tous les fichiers d'un répertoire.

        Args:
            directory: Racine du parcours

        Returns:
            CheckReport construit pendant ce parcours uniquement
        """
        report = CheckReport()

        for path in self._fs.walk_files(Path(directory)):
            try:
                result = await self._placement.place(path, dry_run=True)
            except NotMediaFileError:
                logger.debug(f"Ignore (non media): {path}")
                report.ignored += 1
            except NotFoundError as e:
                logger.warning(f"{path}: {e}")
                report.unresolved.append(path)
            except AlreadyExistsError as e:
                logger.warning(f"{path}: {e}")
                report.already_present.append(path)
                report.add(e.destination, path)
            except PlacementError as e:
                logger.error(f"{path}: {e}")
                report.failed.append((path, str(e)))
            else:
                report.add(result.destination, path)

        logger.info(
            f"Verification terminee: {len(report.destinations)} destination(s), "
            f"{len(report.collisions)} collision(s), {len(report.unresolved)} introuvable(s)"
        )
        return report
