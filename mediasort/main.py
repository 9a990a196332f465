"""
Point d'entrée CLI de media-sort.

La configuration, le logging et le container DI sont initialisés par la
commande elle-même, une fois le chemin du fichier de configuration connu.
"""

import typer

from .adapters.cli.commands import sort_media

app = typer.Typer(
    name="media-sort",
    help="Range automatiquement films et series dans une bibliotheque",
    add_completion=False,
)

# Commande unique : les options sont au premier niveau (media-sort --sort DIR)
app.command()(sort_media)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
