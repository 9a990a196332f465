"""
Fixtures pytest partagees pour les tests media-sort.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (IFileSystem, IShowProvider, IMovieProvider)
- Settings de test avec chemins temporaires
- Services reels branches sur le vrai systeme de fichiers (tmp_path)
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from mediasort.adapters.file_system import FileSystemAdapter
from mediasort.config import Settings
from mediasort.core.ports.api_clients import (
    IMovieProvider,
    IShowProvider,
    MovieMatch,
    ShowMatch,
)
from mediasort.core.ports.file_system import IFileSystem
from mediasort.services.organizer import OrganizerService
from mediasort.services.placement import PlacementService
from mediasort.services.resolver import MetadataResolver


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut aucun chemin n'existe. Configurer le mock dans chaque
    test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.is_dir.return_value = False
    mock.walk_files.return_value = iter([])
    return mock


@pytest.fixture
def mock_show_provider() -> MagicMock:
    """Mock de IShowProvider retournant "Great Series"."""
    mock = MagicMock(spec=IShowProvider)
    mock.search = AsyncMock(return_value=ShowMatch(name="Great Series"))
    mock.source = "tvmaze"
    return mock


@pytest.fixture
def mock_movie_provider() -> MagicMock:
    """Mock de IMovieProvider retournant "Alien" (1979)."""
    mock = MagicMock(spec=IMovieProvider)
    mock.search = AsyncMock(return_value=MovieMatch(title="Alien", year=1979))
    mock.source = "omdb"
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une structure de repertoires
    isolee pour chaque test : inbox/, library/shows/, library/movies/.
    """
    inbox = tmp_path / "inbox"
    shows = tmp_path / "library" / "shows"
    movies = tmp_path / "library" / "movies"

    inbox.mkdir(parents=True)
    shows.mkdir(parents=True)
    movies.mkdir(parents=True)

    return Settings(
        dir_watch=inbox,
        show_path=shows,
        movie_path=movies,
        permissions={"mode": 0o640},
    )


@pytest.fixture
def placement_service(
    test_settings: Settings,
    mock_show_provider: MagicMock,
    mock_movie_provider: MagicMock,
) -> PlacementService:
    """PlacementService reel sur tmp_path, fournisseurs mockes."""
    file_system = FileSystemAdapter()
    return PlacementService(
        resolver=MetadataResolver(mock_show_provider, mock_movie_provider),
        organizer=OrganizerService(
            file_system, test_settings.show_path, test_settings.movie_path
        ),
        file_system=file_system,
        settings=test_settings,
    )


@pytest.fixture
def make_file():
    """Fabrique de fichiers : cree un fichier (et ses parents) avec un contenu."""

    def _make(path: Path, content: bytes = b"data") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make
