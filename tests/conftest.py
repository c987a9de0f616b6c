"""
Fixtures pytest partagees pour les tests Featurette.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, IPathResolver, IItemRefresher)
- Repository en memoire
- Settings de test avec chemins temporaires
- Un film rattache a l'arbre parent/enfant
"""

from pathlib import Path
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from featurette.adapters.persistence.memory_repository import InMemoryItemRepository
from featurette.config import Settings
from featurette.core.entities import LocationType, Movie, Video
from featurette.core.ports.file_system import IFileSystem
from featurette.core.ports.refresher import IItemRefresher
from featurette.core.ports.resolver import IPathResolver
from tests.fixtures.entries import MOVIE_DIR


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    list_files retourne le contenu declare dans mock.tree (repertoire -> fichiers).
    """
    mock = MagicMock(spec=IFileSystem)
    mock.tree = {}
    mock.list_children.return_value = []
    mock.list_files.side_effect = lambda d: list(mock.tree.get(d, []))
    return mock


@pytest.fixture
def mock_path_resolver() -> MagicMock:
    """
    Mock de IPathResolver pour les tests.

    Chaque chemin devient une Video dont l'ID est le nom du fichier sans extension.
    """
    mock = MagicMock(spec=IPathResolver)

    async def default_resolve(paths, parent: Optional[Movie] = None) -> list[Video]:
        return [Video(id=p.stem, name=p.stem, path=p) for p in paths]

    mock.resolve_paths = AsyncMock(side_effect=default_resolve)
    return mock


@pytest.fixture
def mock_item_refresher() -> MagicMock:
    """Mock de IItemRefresher : chaque rafraichissement reussit."""
    mock = MagicMock(spec=IItemRefresher)
    mock.refresh_metadata = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def item_repository() -> InMemoryItemRepository:
    """Repository en memoire vide."""
    return InMemoryItemRepository()


@pytest.fixture
def movie() -> Movie:
    """Film sur le disque, rattache a un dossier parent, hors repertoire mixte."""
    return Movie(
        id="movie-1",
        name="Inception",
        path=MOVIE_DIR / "Inception.2010.1080p.mkv",
        location_type=LocationType.FILE_SYSTEM,
        parent_id="library-root",
        is_in_mixed_folder=False,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test, sans fichier .env."""
    return Settings(
        _env_file=None,  # Ignorer le fichier .env pour les tests
        log_file=tmp_path / "test.log",
    )
