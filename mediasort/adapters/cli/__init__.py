"""Package CLI - commande principale et affichage Rich."""

from mediasort.adapters.cli.commands import sort_media
from mediasort.adapters.cli.display import console

__all__ = [
    "console",
    "sort_media",
]
