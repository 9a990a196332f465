"""
Client OMDb pour la recherche de films.

Implemente IMovieProvider via la recherche par titre exact (?t=),
affinee par l'annee quand elle est connue. OMDb repond toujours
avec un indicateur Response ("True"/"False") et un message Error :
tout echec (indicateur faux, erreur, HTTP, JSON) vaut "aucun resultat".

Reference API: https://www.omdbapi.com/
"""

import re
from typing import Optional

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from mediasort.core.ports.api_clients import IMovieProvider, MovieMatch

_YEAR_RE = re.compile(r"\d{4}")


class OMDBResponse(BaseModel):
    """Réponse OMDb (seuls les champs utilisés)."""

    model_config = ConfigDict(populate_by_name=True)

    response: str = Field(alias="Response")
    title: Optional[str] = Field(default=None, alias="Title")
    year: Optional[str] = Field(default=None, alias="Year")
    error: Optional[str] = Field(default=None, alias="Error")

    @property
    def success(self) -> bool:
        return self.response.lower() == "true" and self.error is None and bool(self.title)


def parse_omdb_year(value: Optional[str]) -> Optional[int]:
    """
    Extrait l'annee d'un champ Year OMDb.

    Exemples : "1979" -> 1979, "2005–2007" -> 2005, "N/A" -> None
    """
    if not value:
        return None
    match = _YEAR_RE.search(value)
    return int(match.group()) if match else None


class OMDBClient(IMovieProvider):
    """
    Client OMDb pour la recherche de films.

    Example:
        client = OMDBClient(api_key="abcdef12")
        match = await client.search("alien", year=1979)
        await client.close()
    """

    BASE_URL = "https://www.omdbapi.com"

    def __init__(self, api_key: Optional[str], timeout: Optional[float] = None) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb (None : toutes les recherches echouent)
            timeout: Timeout des requetes en secondes, None pour aucun
        """
        self._api_key = api_key
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
        return "omdb"

    async def search(self, title: str, year: Optional[int] = None) -> Optional[MovieMatch]:
        """
        Recherche un film par titre.

        Args:
            title: Titre du film
            year: Annee de sortie optionnelle

        Returns:
            MovieMatch avec titre et annee canoniques, ou None
        """
        if not self._api_key:
            logger.warning("OMDb: aucune cle API configuree, recherche de film impossible")
            return None

        params = {"t": title.strip(), "type": "movie", "apikey": self._api_key}
        if year is not None:
            params["y"] = str(year)

        client = self._get_client()
        try:
            response = await client.get("/", params=params)
            response.raise_for_status()
            data = OMDBResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.warning(f"OMDb: requete en echec pour '{title}': {e}")
            return None
        except ValueError as e:
            logger.warning(f"OMDb: reponse illisible pour '{title}': {e}")
            return None

        if not data.success:
            logger.debug(f"OMDb: aucun resultat pour '{title}': {data.error}")
            return None

        return MovieMatch(title=data.title, year=parse_omdb_year(data.year))

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
