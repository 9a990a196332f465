"""
media-sort : tri automatique des films et series vers une bibliotheque.

Identifie chaque fichier depose dans le repertoire surveille (episode ou film),
interroge un catalogue externe pour le titre canonique, puis deplace le fichier
vers son emplacement dans la bibliotheque.
"""

__version__ = "0.1.0"
