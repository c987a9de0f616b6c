"""
Tests pour MetadataRefreshService - rafraichissement d'un element.

Tests couvrant:
- Enumeration du repertoire contenant l'element
- Execution du hook
- Sauvegarde des elements nouveaux ou marques force_save
- Propagation des erreurs du hook
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from featurette.core.entities import LocationType, MetadataRefreshOptions, Video
from featurette.core.exceptions import SpecialFeatureRefreshError
from featurette.services.refresh.hooks import ItemRefreshHook
from featurette.services.refresh.pipeline import MetadataRefreshService
from tests.fixtures.entries import MOVIE_DIR, directory


@pytest.fixture
def mock_hook():
    hook = MagicMock(spec=ItemRefreshHook)
    hook.before_refresh_metadata = AsyncMock(return_value=None)
    return hook


@pytest.fixture
def service(mock_file_system, item_repository, mock_hook):
    return MetadataRefreshService(
        file_system=mock_file_system,
        item_repository=item_repository,
        hook=mock_hook,
    )


class TestChildrenEnumeration:
    """Tests de l'enumeration transmise au hook."""

    @pytest.mark.asyncio
    async def test_containing_folder_is_listed(self, service, movie, mock_file_system, mock_hook):
        """Les entrees du dossier du film sont transmises au hook."""
        children = [directory("extras")]
        mock_file_system.list_children.return_value = children
        options = MetadataRefreshOptions()

        await service.refresh_metadata(movie, options)

        mock_file_system.list_children.assert_called_once_with(MOVIE_DIR)
        mock_hook.before_refresh_metadata.assert_awaited_once_with(movie, options, children)

    @pytest.mark.asyncio
    async def test_virtual_item_gets_no_children(self, service, movie, mock_file_system, mock_hook):
        """Un element virtuel n'est pas enumere."""
        movie.location_type = LocationType.VIRTUAL

        await service.refresh_metadata(movie, MetadataRefreshOptions())

        mock_file_system.list_children.assert_not_called()
        assert mock_hook.before_refresh_metadata.await_args.args[2] == []


class TestSave:
    """Tests de la decision de sauvegarde."""

    @pytest.mark.asyncio
    async def test_new_item_is_saved(self, service, movie, item_repository):
        """Un element inconnu du repository est sauvegarde."""
        saved = await service.refresh_metadata(movie, MetadataRefreshOptions())

        assert saved is True
        assert item_repository.get_by_id(movie.id) is movie
        assert movie.date_last_refreshed is not None

    @pytest.mark.asyncio
    async def test_known_item_is_not_saved_without_force_save(
        self, service, movie, item_repository
    ):
        """Un element deja connu n'est pas resauvegarde sans force_save."""
        item_repository.save(movie)

        saved = await service.refresh_metadata(movie, MetadataRefreshOptions())

        assert saved is False

    @pytest.mark.asyncio
    async def test_force_save_set_by_hook_saves_known_item(
        self, service, movie, item_repository, mock_hook
    ):
        """Un hook qui leve force_save provoque la sauvegarde."""
        item_repository.save(movie)

        async def raise_force_save(item, options, children):
            options.force_save = True

        mock_hook.before_refresh_metadata.side_effect = raise_force_save

        saved = await service.refresh_metadata(movie, MetadataRefreshOptions())

        assert saved is True

    @pytest.mark.asyncio
    async def test_hook_failure_propagates_without_save(
        self, service, movie, item_repository, mock_hook
    ):
        """L'echec du hook est remonte et l'element n'est pas sauvegarde."""
        mock_hook.before_refresh_metadata.side_effect = SpecialFeatureRefreshError("b1")

        with pytest.raises(SpecialFeatureRefreshError):
            await service.refresh_metadata(movie, MetadataRefreshOptions())

        assert item_repository.get_by_id(movie.id) is None


class TestDefaultHook:
    """Tests du hook par defaut."""

    @pytest.mark.asyncio
    async def test_default_hook_is_generic(self, mock_file_system, item_repository):
        """Sans hook, l'etape generique est appliquee (nom derive du chemin)."""
        service = MetadataRefreshService(
            file_system=mock_file_system,
            item_repository=item_repository,
        )
        video = Video(id="v1", path=Path("/library/extras/Interview.mkv"))

        await service.refresh_metadata(video, MetadataRefreshOptions())

        assert video.name == "Interview"
        assert item_repository.get_by_id("v1") is video
