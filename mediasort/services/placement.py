"""
Service de placement des fichiers dans la bibliothèque.

Ce module enchaîne, pour un fichier :
- l'analyse du nom (normalisation, signal série, année)
- la résolution du titre canonique auprès du fournisseur
- le calcul de la destination
- la vérification de la politique d'écrasement
- le déplacement (renommage atomique, sinon copie puis suppression)
- la propagation des permissions et du propriétaire jusqu'à la racine

En mode dry-run, aucune modification n'est effectuée mais la vérification
d'existence est conservée pour signaler les conflits.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from mediasort.config import Settings
from mediasort.core.exceptions import AlreadyExistsError, FilesystemFailureError
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.value_objects import PlacementAction, PlacementResult
from mediasort.services.extractor import parse_filename
from mediasort.services.organizer import OrganizerService
from mediasort.services.resolver import MetadataResolver
from mediasort.utils.constants import DIRECTORY_EXEC_BITS

COPY_FALLBACK_REASON = "copie puis suppression de la source"


class PlacementService:
    """
    Service de placement d'un fichier vers la bibliothèque.

    Utilisation:
        placement = PlacementService(resolver, organizer, file_system, settings)
        result = await placement.place(Path("/inbox/Alien.1979.1080p.mkv"))
        print(f"{result.source} -> {result.destination}")
    """

    def __init__(
        self,
        resolver: MetadataResolver,
        organizer: OrganizerService,
        file_system: IFileSystem,
        settings: Settings,
    ) -> None:
        """
        Initialise le service de placement.

        Args:
            resolver: Resolver des titres canoniques
            organizer: Calcul des destinations (porte les racines)
            file_system: Adaptateur système de fichiers
            settings: Configuration (écrasement, permissions)
        """
        self._resolver = resolver
        self._organizer = organizer
        self._fs = file_system
        self._settings = settings

    async def place(self, path: Path, dry_run: bool = False) -> PlacementResult:
        """
        Place un fichier dans la bibliothèque.

        Args:
            path: Fichier à placer
            dry_run: Si True, calcule la destination sans rien modifier

        Returns:
            PlacementResult (MOVED, ou WOULD_MOVE en dry-run). Un échec de
            chmod/chown après le déplacement est noté dans reason.

        Raises:
            NotMediaFileError: Extension non reconnue
            NotFoundError: Aucune correspondance chez le fournisseur
            AlreadyExistsError: Destination existante et écrasement désactivé
            FilesystemFailureError: Echec de mkdir, copie ou suppression
        """
        path = Path(path)
        parsed = parse_filename(path)
        media = await self._resolver.resolve(parsed)
        destination = self._organizer.destination_for(media, parsed.extension)

        if self._fs.exists(destination) and not self._settings.overwrite:
            raise AlreadyExistsError(destination)

        if dry_run:
            logger.info(f"[dry-run] {path} -> {destination}")
            return PlacementResult(
                source=path,
                destination=destination,
                action=PlacementAction.WOULD_MOVE,
            )

        reason = self._relocate(path, destination)
        try:
            self._apply_permissions(destination)
        except FilesystemFailureError as e:
            # Le fichier est deja dans la bibliotheque : le resultat reste MOVED
            logger.warning(f"Permissions non appliquees pour {destination}: {e}")
            reason = f"{reason}; {e}" if reason else str(e)

        logger.info(f"Deplace: {path} -> {destination}")
        return PlacementResult(
            source=path,
            destination=destination,
            action=PlacementAction.MOVED,
            reason=reason,
        )

    def _relocate(self, source: Path, destination: Path) -> Optional[str]:
        """
        Déplace le fichier vers sa destination.

        Tente un renommage atomique ; en cas d'échec, quelle qu'en soit la
        cause, copie vers la même destination puis supprime la source.
        Une copie partielle n'est pas nettoyée.

        Returns:
            None pour un renommage, la raison en cas de copie
        """
        try:
            self._fs.make_dirs(destination.parent)
        except OSError as e:
            raise FilesystemFailureError(destination.parent, "mkdir", e) from e

        try:
            self._fs.rename(source, destination)
            return None
        except OSError as e:
            logger.debug(f"Renommage impossible ({e}), copie de {source}")

        try:
            self._fs.copy(source, destination)
        except OSError as e:
            raise FilesystemFailureError(destination, "copy", e) from e

        try:
            self._fs.delete(source)
        except OSError as e:
            raise FilesystemFailureError(source, "delete", e) from e

        return COPY_FALLBACK_REASON

    def _apply_permissions(self, destination: Path) -> None:
        """
        Propage permissions et propriétaire de la destination vers la racine.

        Remonte depuis le fichier à travers chaque répertoire parent et
        s'arrête sur la racine des séries ou des films, qui n'est jamais modifiée.
        Les répertoires reçoivent en plus le bit d'exécution (+0o111).
        """
        roots = set(self._organizer.roots)
        permissions = self._settings.permissions
        current = destination

        while current not in roots and current.parent != current:
            mode = permissions.mode
            if self._fs.is_dir(current):
                mode |= DIRECTORY_EXEC_BITS

            try:
                self._fs.set_mode(current, mode)
            except OSError as e:
                raise FilesystemFailureError(current, "chmod", e) from e

            if permissions.user or permissions.group:
                try:
                    self._fs.set_owner(current, permissions.user, permissions.group)
                except (OSError, LookupError) as e:
                    raise FilesystemFailureError(current, "chown", e) from e

            current = current.parent
