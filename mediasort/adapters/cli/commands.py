"""
Commande CLI principale de media-sort.

Trois modes :
- surveillance continue du répertoire d'arrivée (par défaut)
- tri ponctuel d'un répertoire (--sort)
- vérification des collisions sans rien déplacer (--check)
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.markup import escape

from mediasort import __version__
from mediasort.adapters.cli.display import (
    console,
    display_check_report,
    display_result,
    display_sort_report,
)
from mediasort.container import Container
from mediasort.core.exceptions import ConfigError, WatchStreamError
from mediasort.core.value_objects import CheckReport, SortReport
from mediasort.logging_config import configure_logging
from mediasort.services.watcher import WatchService
from mediasort.utils.constants import DEFAULT_CONFIG_PATH


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"media-sort v{__version__}")
        raise typer.Exit()


def _console_level(configured: str, verbose: int, quiet: bool) -> str:
    """Niveau de log console selon -v / -q."""
    if quiet:
        return "ERROR"
    if verbose:
        return "DEBUG"
    return configured


def sort_media(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Fichier de configuration YAML"),
    ] = DEFAULT_CONFIG_PATH,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Simule sans modifier les fichiers"),
    ] = False,
    sort_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--sort",
            help="Trie une fois le repertoire indique puis quitte",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    check_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--check",
            help=(
                "Signale les fichiers qui aboutiraient a la meme destination et ceux "
                "introuvables en ligne, sans rien deplacer (--dry-run sans effet)"
            ),
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Affiche les logs de debug"),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Affiche la version",
        ),
    ] = None,
) -> None:
    """Range les films et series du repertoire d'arrivee dans la bibliotheque."""
    if sort_dir is not None and check_dir is not None:
        raise typer.BadParameter("--sort et --check sont incompatibles")

    container = Container()
    container.config_path.override(config)
    try:
        settings = container.config()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    configure_logging(
        log_level=_console_level(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    if check_dir is not None:
        display_check_report(asyncio.run(_check_async(container, check_dir)))
        return

    if sort_dir is not None:
        display_sort_report(asyncio.run(_sort_async(container, sort_dir, dry_run)))
        return

    try:
        asyncio.run(_watch_async(container, dry_run))
    except WatchStreamError as e:
        console.print(f"[red]Surveillance interrompue: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Surveillance arretee.[/yellow]")
        raise typer.Exit(0)


async def _close_providers(container: Container) -> None:
    """Ferme les clients HTTP des fournisseurs."""
    await container.show_provider().close()
    await container.movie_provider().close()


async def _sort_async(container: Container, directory: Path, dry_run: bool) -> SortReport:
    """Implementation async du tri ponctuel."""
    try:
        return await container.sort_service().sort_directory(directory, dry_run=dry_run)
    finally:
        await _close_providers(container)


async def _check_async(container: Container, directory: Path) -> CheckReport:
    """Implementation async de la verification."""
    try:
        return await container.conflict_scanner().scan(directory)
    finally:
        await _close_providers(container)


async def _watch_async(container: Container, dry_run: bool) -> None:
    """Implementation async de la surveillance continue."""
    settings = container.config()
    if dry_run:
        logger.info("Mode dry-run: aucun fichier ne sera deplace")

    watcher = WatchService(
        event_source=container.event_source(),
        sorter=container.sort_service(),
        dry_run=dry_run,
        on_result=display_result,
    )
    console.print(f"[bold]Surveillance de {escape(str(settings.dir_watch))}[/bold] (Ctrl-C pour arreter)")
    try:
        await watcher.run()
    finally:
        await _close_providers(container)
