"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et les tests.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.persistence.memory_repository import InMemoryItemRepository
from .adapters.resolution.video_resolver import VideoPathResolver
from .config import Settings
from .services.refresh.hooks import ItemRefreshHook, MovieRefreshHook
from .services.refresh.pipeline import MetadataRefreshService
from .services.special_features.reconciler import SpecialFeatureReconciler
from .services.special_features.scanner import SpecialFeatureScanner


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.movie_refresh_service()
        await service.refresh_metadata(movie, MetadataRefreshOptions())
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    path_resolver = providers.Singleton(VideoPathResolver)
    item_repository = providers.Singleton(InMemoryItemRepository)

    # Bonus
    special_feature_scanner = providers.Factory(
        SpecialFeatureScanner,
        file_system=file_system,
        path_resolver=path_resolver,
        item_repository=item_repository,
        folder_names=config.provided.special_feature_folders,
    )

    # Rafraichissement des bonus : hook generique uniquement
    child_refresh_service = providers.Factory(
        MetadataRefreshService,
        file_system=file_system,
        item_repository=item_repository,
        hook=providers.Factory(ItemRefreshHook),
    )

    special_feature_reconciler = providers.Factory(
        SpecialFeatureReconciler,
        scanner=special_feature_scanner,
        item_refresher=child_refresh_service,
    )

    movie_refresh_hook = providers.Factory(
        MovieRefreshHook,
        reconciler=special_feature_reconciler,
    )

    # Pipeline de rafraichissement des films
    movie_refresh_service = providers.Factory(
        MetadataRefreshService,
        file_system=file_system,
        item_repository=item_repository,
        hook=movie_refresh_hook,
    )
