"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
Les erreurs sont propagees (OSError) : le service de placement decide
du repli (copie) ou de l'echec.
"""

import os
import shutil
from pathlib import Path
from typing import Iterator, Optional

from mediasort.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Verifie si un chemin est un repertoire."""
        return path.is_dir()

    def walk_files(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt recursivement un repertoire en profondeur d'abord.

        Les entrees de chaque repertoire sont listees avant d'etre traitees,
        le deplacement d'un fichier pendant le parcours est donc sans effet
        sur la suite. Les liens symboliques vers des repertoires ne sont pas suivis.
        """
        for entry in sorted(directory.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                yield from self.walk_files(entry)
            elif entry.is_file():
                yield entry

    def make_dirs(self, path: Path) -> None:
        """Cree un repertoire et ses parents manquants."""
        path.mkdir(parents=True, exist_ok=True)

    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme atomiquement un fichier.

        Utilise os.replace : echoue (OSError) entre deux systemes de fichiers.
        """
        os.replace(source, destination)

    def copy(self, source: Path, destination: Path) -> None:
        """Copie un fichier avec preservation des metadonnees."""
        shutil.copy2(source, destination)

    def delete(self, path: Path) -> None:
        """Supprime un fichier."""
        path.unlink()

    def set_mode(self, path: Path, mode: int) -> None:
        """Applique les permissions a un chemin."""
        path.chmod(mode)

    def set_owner(self, path: Path, user: Optional[str], group: Optional[str]) -> None:
        """
        Change le proprietaire et/ou le groupe.

        Raises:
            LookupError: Utilisateur ou groupe inconnu
            OSError: Operation refusee
        """
        shutil.chown(path, user=user, group=group)
