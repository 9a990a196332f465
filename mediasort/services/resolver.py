"""
Résolution des métadonnées canoniques auprès des fournisseurs externes.

Un fichier avec signal série est recherché chez le fournisseur de séries,
les autres chez le fournisseur de films. Un seul appel par fichier,
sans nouvelle tentative ni cache.
"""

from loguru import logger

from mediasort.core.exceptions import NotFoundError
from mediasort.core.ports.api_clients import IMovieProvider, IShowProvider
from mediasort.core.value_objects import MediaInfo, MediaKind, ParsedFilename


class MetadataResolver:
    """
    Service de résolution des titres canoniques.

    Utilisation:
        resolver = MetadataResolver(show_provider, movie_provider)
        media = await resolver.resolve(parse_filename(path))
    """

    def __init__(self, show_provider: IShowProvider, movie_provider: IMovieProvider) -> None:
        """
        Initialise le resolver.

        Args:
            show_provider: Fournisseur de séries (TVMaze)
            movie_provider: Fournisseur de films (OMDb)
        """
        self._show_provider = show_provider
        self._movie_provider = movie_provider

    async def resolve(self, parsed: ParsedFilename) -> MediaInfo:
        """
        Construit les informations canoniques d'un fichier analysé.

        Séries : le nom canonique remplace le titre, l'année parsée est conservée.
        Films : le titre et l'année canoniques remplacent ceux du fichier.

        Raises:
            NotFoundError: Si le fournisseur ne retourne aucun résultat
        """
        if parsed.show_signal is not None:
            return await self._resolve_show(parsed)
        return await self._resolve_movie(parsed)

    async def _resolve_show(self, parsed: ParsedFilename) -> MediaInfo:
        if not parsed.title:
            raise NotFoundError(MediaKind.SHOW, parsed.title)

        logger.debug(f"Recherche serie: {parsed.title} ({parsed.year})")
        match = await self._show_provider.search(parsed.title, parsed.year)
        if match is None:
            raise NotFoundError(MediaKind.SHOW, parsed.title)

        logger.debug(f"Serie trouvee via {self._show_provider.source}: {match.name}")
        return MediaInfo(name=match.name, year=parsed.year, show_signal=parsed.show_signal)

    async def _resolve_movie(self, parsed: ParsedFilename) -> MediaInfo:
        if not parsed.title:
            raise NotFoundError(MediaKind.MOVIE, parsed.title)

        logger.debug(f"Recherche film: {parsed.title} ({parsed.year})")
        match = await self._movie_provider.search(parsed.title, parsed.year)
        if match is None:
            raise NotFoundError(MediaKind.MOVIE, parsed.title)

        logger.debug(f"Film trouve via {self._movie_provider.source}: {match.title} ({match.year})")
        return MediaInfo(name=match.title, year=match.year)
