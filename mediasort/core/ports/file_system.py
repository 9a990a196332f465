"""
Interfaces ports pour le système de fichiers.

Interface abstraite (port) définissant les opérations fichiers nécessaires
au placement. Les implémentations lèvent OSError en cas d'échec ;
les services se chargent de la traduction en erreurs métier.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional


class IFileSystem(ABC):
    """
    Interface pour les opérations sur les fichiers.

    Définit les opérations pour interagir avec le système de fichiers :
    vérification d'existence, parcours, déplacement/copie, permissions.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Vérifie si un chemin est un répertoire."""
        ...

    @abstractmethod
    def walk_files(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt récursivement un répertoire en profondeur d'abord.

        Les entrées de chaque répertoire sont visitées par ordre de nom.

        Args :
            directory : Répertoire à parcourir

        Yields :
            Chemin de chaque fichier (les répertoires ne sont pas retournés)
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Crée un répertoire et ses parents manquants."""
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme atomiquement un fichier (même système de fichiers).

        Remplace la destination si elle existe.
        """
        ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None:
        """Copie un fichier (contenu et métadonnées) vers la destination."""
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """Supprime un fichier."""
        ...

    @abstractmethod
    def set_mode(self, path: Path, mode: int) -> None:
        """Applique les permissions (mode octal) à un chemin."""
        ...

    @abstractmethod
    def set_owner(self, path: Path, user: Optional[str], group: Optional[str]) -> None:
        """
        Change le propriétaire et/ou le groupe d'un chemin.

        Args :
            path : Chemin à modifier
            user : Nom d'utilisateur, ou None pour le laisser inchangé
            group : Nom de groupe, ou None pour le laisser inchangé
        """
        ...
