"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Clients des catalogues (TVMaze, OMDb)
- cli/ : Interface ligne de commande (Typer + Rich)

Modules :
- file_system : Opérations sur le système de fichiers
- event_source : Notifications du système de fichiers (watchdog)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from mediasort.adapters.event_source import WatchdogEventSource
from mediasort.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
    "WatchdogEventSource",
]
