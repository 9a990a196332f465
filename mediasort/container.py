"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
la configuration est chargee une seule fois depuis le fichier indique
par config_path, puis injectee explicitement dans les services.
"""

from dependency_injector import containers, providers

from mediasort.adapters.api.omdb_client import OMDBClient
from mediasort.adapters.api.tvmaze_client import TVMazeClient
from mediasort.adapters.event_source import WatchdogEventSource
from mediasort.adapters.file_system import FileSystemAdapter
from mediasort.config import load_settings
from mediasort.services.conflict_scanner import ConflictScannerService
from mediasort.services.organizer import OrganizerService
from mediasort.services.placement import PlacementService
from mediasort.services.resolver import MetadataResolver
from mediasort.services.sorter import SortService
from mediasort.utils.constants import DEFAULT_CONFIG_PATH


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.config_path.override(Path("./media-sort.yaml"))
        sorter = container.sort_service()
    """

    # Chemin du fichier de configuration (surcharge par --config)
    config_path = providers.Object(DEFAULT_CONFIG_PATH)

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(load_settings, config_path=config_path)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    show_provider = providers.Singleton(
        TVMazeClient,
        timeout=config.provided.api_timeout,
    )
    movie_provider = providers.Singleton(
        OMDBClient,
        api_key=config.provided.omdb.apikey,
        timeout=config.provided.api_timeout,
    )

    event_source = providers.Factory(
        WatchdogEventSource,
        directory=config.provided.dir_watch,
        queue_size=config.provided.watch_queue_size,
    )

    # Services
    resolver = providers.Singleton(
        MetadataResolver,
        show_provider=show_provider,
        movie_provider=movie_provider,
    )
    organizer = providers.Singleton(
        OrganizerService,
        file_system=file_system,
        show_root=config.provided.show_path,
        movie_root=config.provided.movie_path,
    )
    placement_service = providers.Singleton(
        PlacementService,
        resolver=resolver,
        organizer=organizer,
        file_system=file_system,
        settings=config,
    )
    sort_service = providers.Factory(
        SortService,
        placement=placement_service,
        file_system=file_system,
    )
    conflict_scanner = providers.Factory(
        ConflictScannerService,
        placement=placement_service,
        file_system=file_system,
    )
