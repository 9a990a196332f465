"""
Interfaces ports pour les fournisseurs de métadonnées.

Interfaces abstraites (ports) définissant les contrats pour les catalogues externes.
Les implémentations (adaptateurs) fournissent les clients concrets
(TVMaze pour les séries, OMDb pour les films).

Contrat commun : une recherche retourne le meilleur résultat du fournisseur
ou None. Les erreurs de transport ou de décodage sont absorbées par
l'adaptateur et se traduisent par None.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ShowMatch:
    """
    Série trouvée chez le fournisseur.

    Attributs :
        name : Nom canonique de la série
    """

    name: str


@dataclass(frozen=True)
class MovieMatch:
    """
    Film trouvé chez le fournisseur.

    Attributs :
        title : Titre canonique du film
        year : Année canonique (None si le fournisseur n'en donne pas d'exploitable)
    """

    title: str
    year: Optional[int] = None


class IShowProvider(ABC):
    """
    Interface de recherche de séries TV.
    """

    @abstractmethod
    async def search(self, title: str, year: Optional[int] = None) -> Optional[ShowMatch]:
        """
        Recherche une série par titre.

        Args :
            title : Titre de travail extrait du nom de fichier
            year : Année optionnelle extraite du nom de fichier

        Retourne :
            Le premier résultat du fournisseur, ou None si aucun
            (ou si la requête a échoué)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur (ex: 'tvmaze')."""
        ...


class IMovieProvider(ABC):
    """
    Interface de recherche de films.
    """

    @abstractmethod
    async def search(self, title: str, year: Optional[int] = None) -> Optional[MovieMatch]:
        """
        Recherche un film par titre.

        Args :
            title : Titre de travail extrait du nom de fichier
            year : Année optionnelle pour affiner la recherche

        Retourne :
            Le film trouvé, ou None si aucun (ou si la requête a échoué)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant du fournisseur (ex: 'omdb')."""
        ...
