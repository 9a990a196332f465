"""
Clients API externes pour la resolution des titres canoniques.

Ce module fournit les adaptateurs pour communiquer avec les catalogues:
- TVMaze: series TV (API publique)
- OMDb: films (cle API requise)

Les clients implementent IShowProvider / IMovieProvider definis dans
core/ports/api_clients.py.
"""

from mediasort.adapters.api.omdb_client import OMDBClient
from mediasort.adapters.api.tvmaze_client import TVMazeClient

__all__ = [
    "OMDBClient",
    "TVMazeClient",
]
