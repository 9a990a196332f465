"""
Source d'evenements du systeme de fichiers via watchdog.

L'observateur watchdog tourne dans son propre thread et alimente un
canal borne (queue.Queue) ; la boucle asyncio consomme ce canal un
evenement a la fois, dans l'ordre d'arrivee. Si le canal est plein,
le thread watchdog attend que la boucle ait consomme un evenement.

Correspondance des evenements watchdog :
- FileCreatedEvent -> CREATED
- FileClosedEvent (fermeture apres ecriture) -> CLOSED_AFTER_WRITE
- FileMovedEvent avec destination -> RENAMED_INTO (chemin de destination),
  y compris depuis l'exterieur (observateur inotify en mode "full events")
- FileMovedEvent sans destination (sortie du repertoire) -> OTHER
- tout le reste, dont les evenements de repertoires -> OTHER
"""

import asyncio
import queue
from pathlib import Path
from typing import AsyncIterator

from loguru import logger
from watchdog.events import (
    FileClosedEvent,
    FileCreatedEvent,
    FileMovedEvent,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers.inotify import InotifyObserver

from mediasort.core.exceptions import WatchStreamError
from mediasort.core.ports.event_source import FileEvent, FileEventKind, IEventSource


def to_file_event(event: FileSystemEvent) -> FileEvent:
    """Convertit un evenement watchdog en FileEvent du domaine."""
    if event.is_directory:
        return FileEvent(path=Path(event.src_path), kind=FileEventKind.OTHER)
    if isinstance(event, FileMovedEvent):
        if not event.dest_path:
            return FileEvent(path=Path(event.src_path), kind=FileEventKind.OTHER)
        return FileEvent(path=Path(event.dest_path), kind=FileEventKind.RENAMED_INTO)
    if isinstance(event, FileClosedEvent):
        return FileEvent(path=Path(event.src_path), kind=FileEventKind.CLOSED_AFTER_WRITE)
    if isinstance(event, FileCreatedEvent):
        return FileEvent(path=Path(event.src_path), kind=FileEventKind.CREATED)
    return FileEvent(path=Path(event.src_path), kind=FileEventKind.OTHER)


def _is_watching(observer: InotifyObserver) -> bool:
    """L'observateur et au moins un emetteur inotify sont actifs."""
    return observer.is_alive() and any(emitter.is_alive() for emitter in observer.emitters)


class _ChannelHandler(FileSystemEventHandler):
    """Handler watchdog qui pousse chaque evenement dans le canal."""

    def __init__(self, channel: "queue.Queue[FileEvent]") -> None:
        super().__init__()
        self._channel = channel

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._channel.put(to_file_event(event))


class WatchdogEventSource(IEventSource):
    """
    Source d'evenements recursive sur un repertoire.

    Example:
        source = WatchdogEventSource(Path("/srv/downloads"))
        async for event in source.events():
            print(event.kind, event.path)
    """

    def __init__(
        self,
        directory: Path,
        queue_size: int = 128,
        poll_interval: float = 1.0,
    ) -> None:
        """
        Initialise la source.

        Args:
            directory: Repertoire surveille (recursivement)
            queue_size: Capacite du canal entre watchdog et la boucle
            poll_interval: Intervalle de verification de l'etat de l'observateur
        """
        self._directory = Path(directory)
        self._queue_size = queue_size
        self._poll_interval = poll_interval

    async def events(self) -> AsyncIterator[FileEvent]:
        """
        Flux des evenements du repertoire surveille.

        Raises:
            WatchStreamError: Demarrage impossible ou arret inattendu de l'observateur
        """
        channel: "queue.Queue[FileEvent]" = queue.Queue(maxsize=self._queue_size)
        observer = InotifyObserver(generate_full_events=True)
        try:
            observer.schedule(_ChannelHandler(channel), str(self._directory), recursive=True)
            observer.start()
        except OSError as e:
            raise WatchStreamError(f"Surveillance impossible de {self._directory}: {e}") from e

        logger.info(f"Surveillance de {self._directory}")
        try:
            while True:
                try:
                    event = await asyncio.to_thread(channel.get, True, self._poll_interval)
                except queue.Empty:
                    if not _is_watching(observer):
                        raise WatchStreamError(
                            f"L'observateur de {self._directory} s'est arrete"
                        )
                    continue
                yield event
        finally:
            observer.stop()
            # Libere un thread watchdog bloque sur un canal plein
            while True:
                try:
                    channel.get_nowait()
                except queue.Empty:
                    break
            observer.join(timeout=5)
