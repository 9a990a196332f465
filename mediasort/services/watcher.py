"""
Boucle de surveillance du répertoire d'arrivée.

Consomme un à un les événements de la source (ordre préservé) et
déclenche un placement pour chaque fichier fermé après écriture ou
renommé vers le répertoire surveillé. Les échecs par fichier sont
journalisés et la boucle continue ; seule une erreur du flux
d'événements (WatchStreamError) y met fin.
"""

from enum import Enum
from typing import Callable, Optional

from loguru import logger

from mediasort.core.ports.event_source import ACTIONABLE_EVENTS, IEventSource
from mediasort.core.value_objects import PlacementResult
from mediasort.services.sorter import SortService


class WatchState(Enum):
    """Etat de la boucle de surveillance."""

    IDLE = "idle"
    PROCESSING = "processing"


class WatchService:
    """
    Service de surveillance continue.

    Utilisation:
        watcher = WatchService(event_source, sorter, on_result=display_result)
        await watcher.run()  # Ne retourne qu'en cas d'arret du flux
    """

    def __init__(
        self,
        event_source: IEventSource,
        sorter: SortService,
        dry_run: bool = False,
        on_result: Optional[Callable[[PlacementResult], None]] = None,
    ) -> None:
        """
        Initialise la boucle de surveillance.

        Args:
            event_source: Source ordonnée des événements fichiers
            sorter: Service de tri appelé pour chaque fichier
            dry_run: Simule les placements
            on_result: Callback appelé avec chaque résultat de placement
        """
        self._events = event_source
        self._sorter = sorter
        self._dry_run = dry_run
        self._on_result = on_result
        self.state = WatchState.IDLE

    async def run(self) -> None:
        """
        Traite les événements jusqu'à l'arrêt du flux.

        Raises:
            WatchStreamError: Si le flux d'événements s'interrompt
        """
        logger.info("Surveillance demarree")
        async for event in self._events.events():
            logger.debug(f"{event.kind.value}: {event.path}")
            if event.kind not in ACTIONABLE_EVENTS:
                continue

            self.state = WatchState.PROCESSING
            try:
                result = await self._sorter.process_file(event.path, dry_run=self._dry_run)
            finally:
                self.state = WatchState.IDLE

            if self._on_result is not None:
                self._on_result(result)
