"""
Tests unitaires pour le service de placement.

Deux familles de tests :
- sur le vrai systeme de fichiers (tmp_path) pour le deplacement,
  l'ecrasement, le dry-run et les permissions
- avec un IFileSystem mocke pour le repli copie/suppression et
  la propagation des permissions
"""

import errno
import stat
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from mediasort.config import Settings
from mediasort.core.exceptions import (
    AlreadyExistsError,
    FilesystemFailureError,
    NotFoundError,
    NotMediaFileError,
)
from mediasort.core.value_objects import PlacementAction
from mediasort.services.organizer import OrganizerService
from mediasort.services.placement import COPY_FALLBACK_REASON, PlacementService
from mediasort.services.resolver import MetadataResolver


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def _tree(root: Path) -> list[Path]:
    return sorted(root.rglob("*"))


# ====================
# Systeme de fichiers reel
# ====================


class TestPlaceMovie:
    """Placement d'un film sur le vrai systeme de fichiers."""

    @pytest.mark.asyncio
    async def test_movie_moved_to_library(
        self, placement_service, test_settings, make_file
    ) -> None:
        source = make_file(test_settings.dir_watch / "Alien.1979.1080p.BluRay.mkv", b"alien")

        result = await placement_service.place(source)

        expected = test_settings.movie_path / "Alien (1979).mkv"
        assert result.action is PlacementAction.MOVED
        assert result.destination == expected
        assert result.reason is None
        assert expected.read_bytes() == b"alien"
        assert not source.exists()

    @pytest.mark.asyncio
    async def test_not_media_raises_and_leaves_file(
        self, placement_service, test_settings, make_file
    ) -> None:
        source = make_file(test_settings.dir_watch / "release.nfo")

        with pytest.raises(NotMediaFileError):
            await placement_service.place(source)

        assert source.exists()

    @pytest.mark.asyncio
    async def test_not_found_leaves_file(
        self, placement_service, test_settings, mock_movie_provider, make_file
    ) -> None:
        mock_movie_provider.search.return_value = None
        source = make_file(test_settings.dir_watch / "Unknown.Thing.mkv")

        with pytest.raises(NotFoundError):
            await placement_service.place(source)

        assert source.exists()
        assert _tree(test_settings.movie_path) == []


class TestPlaceShow:
    """Placement d'un episode sur le vrai systeme de fichiers."""

    @pytest.mark.asyncio
    async def test_episode_moved_with_year_dir(
        self, placement_service, test_settings, make_file
    ) -> None:
        source = make_file(
            test_settings.dir_watch / "great.series.2005.s13e00.special.title.1080p.mkv"
        )

        result = await placement_service.place(source)

        assert result.destination == (
            test_settings.show_path
            / "Great Series (2005)"
            / "Season 13"
            / "Great Series - S13E00 - Special Title.mkv"
        )
        assert result.destination.exists()

    @pytest.mark.asyncio
    async def test_existing_bare_show_dir_reused(
        self, placement_service, test_settings, make_file
    ) -> None:
        (test_settings.show_path / "Great Series").mkdir()
        source = make_file(test_settings.dir_watch / "great.series.2005.s13e03.mkv")

        result = await placement_service.place(source)

        assert result.destination == (
            test_settings.show_path / "Great Series" / "Season 13" / "Great Series - S13E03.mkv"
        )


class TestOverwritePolicy:
    """Politique d'ecrasement."""

    @pytest.mark.asyncio
    async def test_existing_destination_refused_without_overwrite(
        self, placement_service, test_settings, make_file
    ) -> None:
        existing = make_file(test_settings.movie_path / "Alien (1979).mkv", b"old")
        source = make_file(test_settings.dir_watch / "Alien.1979.mkv", b"new")

        with pytest.raises(AlreadyExistsError) as exc_info:
            await placement_service.place(source)

        assert exc_info.value.destination == existing
        assert existing.read_bytes() == b"old"
        assert source.read_bytes() == b"new"

    @pytest.mark.asyncio
    async def test_existing_destination_replaced_with_overwrite(
        self, placement_service, test_settings, make_file
    ) -> None:
        test_settings.overwrite = True
        existing = make_file(test_settings.movie_path / "Alien (1979).mkv", b"old")
        source = make_file(test_settings.dir_watch / "Alien.1979.mkv", b"new")

        result = await placement_service.place(source)

        assert result.action is PlacementAction.MOVED
        assert existing.read_bytes() == b"new"
        assert not source.exists()


class TestDryRun:
    """Le dry-run ne modifie rien mais calcule la vraie destination."""

    @pytest.mark.asyncio
    async def test_dry_run_reports_same_destination_without_mutation(
        self, placement_service, test_settings, make_file
    ) -> None:
        source = make_file(test_settings.dir_watch / "great.series.2005.s13e03.mkv")
        before = _tree(test_settings.dir_watch.parent)

        simulated = await placement_service.place(source, dry_run=True)

        assert simulated.action is PlacementAction.WOULD_MOVE
        assert _tree(test_settings.dir_watch.parent) == before

        real = await placement_service.place(source)
        assert real.destination == simulated.destination

    @pytest.mark.asyncio
    async def test_dry_run_still_reports_existing_destination(
        self, placement_service, test_settings, make_file
    ) -> None:
        make_file(test_settings.movie_path / "Alien (1979).mkv")
        source = make_file(test_settings.dir_watch / "Alien.1979.mkv")

        with pytest.raises(AlreadyExistsError):
            await placement_service.place(source, dry_run=True)


class TestPermissionsOnDisk:
    """Permissions effectivement appliquees sur le disque."""

    @pytest.mark.asyncio
    async def test_file_and_created_dirs_get_mode(
        self, placement_service, test_settings, make_file
    ) -> None:
        root_mode = _mode(test_settings.show_path)
        source = make_file(test_settings.dir_watch / "great.series.s01e02.mkv")

        result = await placement_service.place(source)

        season_dir = result.destination.parent
        show_dir = season_dir.parent
        assert _mode(result.destination) == 0o640
        assert _mode(season_dir) == 0o751
        assert _mode(show_dir) == 0o751
        assert _mode(test_settings.show_path) == root_mode

    @pytest.mark.asyncio
    async def test_refused_chown_reports_file_in_library(
        self, placement_service, test_settings, make_file, monkeypatch
    ) -> None:
        def refuse_chown(path, user=None, group=None):
            raise PermissionError(f"Operation not permitted: '{path}'")

        monkeypatch.setattr("mediasort.adapters.file_system.shutil.chown", refuse_chown)
        test_settings.permissions.user = "media"
        source = make_file(test_settings.dir_watch / "Alien.1979.mkv")

        result = await placement_service.place(source)

        expected = test_settings.movie_path / "Alien (1979).mkv"
        assert result.action is PlacementAction.MOVED
        assert result.destination == expected
        assert "chown" in result.reason
        assert expected.exists()
        assert not source.exists()


# ====================
# Systeme de fichiers mocke
# ====================


@pytest.fixture
def mocked_placement(
    mock_file_system: MagicMock,
    mock_show_provider: MagicMock,
    mock_movie_provider: MagicMock,
    test_settings: Settings,
) -> PlacementService:
    """PlacementService dont toutes les operations fichiers sont mockees."""
    return PlacementService(
        resolver=MetadataResolver(mock_show_provider, mock_movie_provider),
        organizer=OrganizerService(
            mock_file_system, test_settings.show_path, test_settings.movie_path
        ),
        file_system=mock_file_system,
        settings=test_settings,
    )


class TestRelocateFallback:
    """Repli copie puis suppression quand le renommage echoue."""

    @pytest.mark.asyncio
    async def test_cross_device_rename_falls_back_to_copy(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.rename.side_effect = OSError(errno.EXDEV, "Invalid cross-device link")
        source = test_settings.dir_watch / "Alien.1979.mkv"
        destination = test_settings.movie_path / "Alien (1979).mkv"

        result = await mocked_placement.place(source)

        mock_file_system.copy.assert_called_once_with(source, destination)
        mock_file_system.delete.assert_called_once_with(source)
        assert result.action is PlacementAction.MOVED
        assert result.reason == COPY_FALLBACK_REASON

    @pytest.mark.asyncio
    async def test_any_rename_error_falls_back(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.rename.side_effect = PermissionError("denied")

        result = await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        mock_file_system.copy.assert_called_once()
        assert result.reason == COPY_FALLBACK_REASON

    @pytest.mark.asyncio
    async def test_copy_failure_keeps_source(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.rename.side_effect = OSError(errno.EXDEV, "cross-device")
        mock_file_system.copy.side_effect = OSError(errno.ENOSPC, "No space left")

        with pytest.raises(FilesystemFailureError) as exc_info:
            await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert exc_info.value.operation == "copy"
        mock_file_system.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_failure_reported(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.rename.side_effect = OSError(errno.EXDEV, "cross-device")
        mock_file_system.delete.side_effect = PermissionError("read-only inbox")

        with pytest.raises(FilesystemFailureError) as exc_info:
            await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert exc_info.value.operation == "delete"

    @pytest.mark.asyncio
    async def test_mkdir_failure_reported(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.make_dirs.side_effect = PermissionError("denied")

        with pytest.raises(FilesystemFailureError) as exc_info:
            await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert exc_info.value.operation == "mkdir"
        mock_file_system.rename.assert_not_called()


class TestPermissionCascade:
    """Propagation des permissions de la destination jusqu'a la racine exclue."""

    @pytest.mark.asyncio
    async def test_cascade_touches_ancestors_but_not_root(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        shows = test_settings.show_path
        destination = shows / "Great Series" / "Season 13" / "Great Series - S13E03.mkv"
        mock_file_system.is_dir.side_effect = lambda p: p != destination

        await mocked_placement.place(test_settings.dir_watch / "great.series.s13e03.mkv")

        assert mock_file_system.set_mode.call_args_list == [
            call(destination, 0o640),
            call(shows / "Great Series" / "Season 13", 0o751),
            call(shows / "Great Series", 0o751),
        ]
        mock_file_system.set_owner.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_applied_when_configured(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        test_settings.permissions.user = "media"
        test_settings.permissions.group = "video"
        destination = test_settings.movie_path / "Alien (1979).mkv"

        await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        mock_file_system.set_owner.assert_called_once_with(destination, "media", "video")

    @pytest.mark.asyncio
    async def test_unknown_user_keeps_file_moved(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        test_settings.permissions.user = "nobody-here"
        mock_file_system.set_owner.side_effect = LookupError("no such user: 'nobody-here'")

        result = await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert result.action is PlacementAction.MOVED
        assert result.destination == test_settings.movie_path / "Alien (1979).mkv"
        assert "chown" in result.reason

    @pytest.mark.asyncio
    async def test_chmod_failure_recorded_in_reason(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.set_mode.side_effect = PermissionError("denied")

        result = await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert result.action is PlacementAction.MOVED
        assert "chmod" in result.reason

    @pytest.mark.asyncio
    async def test_cascade_failure_after_copy_keeps_both_reasons(
        self, mocked_placement, mock_file_system, test_settings
    ) -> None:
        mock_file_system.rename.side_effect = OSError(errno.EXDEV, "cross-device")
        mock_file_system.set_mode.side_effect = PermissionError("denied")

        result = await mocked_placement.place(test_settings.dir_watch / "Alien.1979.mkv")

        assert result.reason.startswith(COPY_FALLBACK_REASON)
        assert "chmod" in result.reason
