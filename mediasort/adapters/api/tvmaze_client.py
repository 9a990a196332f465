"""
Client TVMaze pour la recherche de series TV.

Implemente IShowProvider : une seule requete /search/shows par recherche,
le premier resultat (meilleur score TVMaze) est retenu. Les erreurs HTTP
et les reponses inexploitables sont journalisees et traitees comme
"aucun resultat".

Reference API: https://www.tvmaze.com/api#show-search
"""

from typing import Optional

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter

from mediasort.core.ports.api_clients import IShowProvider, ShowMatch


class TVMazeShow(BaseModel):
    """Série dans une réponse TVMaze (seuls les champs utilisés)."""

    name: str
    premiered: Optional[str] = None


class TVMazeSearchHit(BaseModel):
    """Résultat de recherche TVMaze : score de pertinence et série."""

    score: float = 0.0
    show: TVMazeShow


_SEARCH_HITS = TypeAdapter(list[TVMazeSearchHit])


class TVMazeClient(IShowProvider):
    """
    Client TVMaze pour la recherche de series.

    L'API publique ne necessite pas de cle.

    Example:
        client = TVMazeClient()
        match = await client.search("great series")
        await client.close()
    """

    BASE_URL = "https://api.tvmaze.com"

    def __init__(self, timeout: Optional[float] = None) -> None:
        """
        Initialise le client TVMaze.

        Args:
            timeout: Timeout des requetes en secondes, None pour aucun
        """
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={"Accept": "application/json"},
                timeout=httpx.Timeout(self._timeout),
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tvmaze"

    async def search(self, title: str, year: Optional[int] = None) -> Optional[ShowMatch]:
        """
        Recherche une serie par titre.

        TVMaze ne filtre pas par annee : l'annee n'intervient que dans
        le nom du repertoire de destination.

        Args:
            title: Titre de la serie
            year: Ignore par TVMaze

        Returns:
            ShowMatch du premier resultat, ou None
        """
        client = self._get_client()
        try:
            response = await client.get("/search/shows", params={"q": title.strip()})
            response.raise_for_status()
            hits = _SEARCH_HITS.validate_python(response.json())
        except httpx.HTTPError as e:
            logger.warning(f"TVMaze: requete en echec pour '{title}': {e}")
            return None
        except ValueError as e:
            logger.warning(f"TVMaze: reponse illisible pour '{title}': {e}")
            return None

        if not hits:
            logger.debug(f"TVMaze: aucun resultat pour '{title}'")
            return None

        return ShowMatch(name=hits[0].show.name)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
