"""
Affichage Rich des résultats de tri et de vérification.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediasort.core.value_objects import (
    CheckReport,
    PlacementAction,
    PlacementResult,
    SortReport,
)

# Console globale pour tous les affichages
console = Console()


def format_result(result: PlacementResult) -> str:
    """Formate un résultat de placement sur une ligne (markup Rich)."""
    source = escape(str(result.source))
    destination = escape(str(result.destination)) if result.destination else "?"

    if result.action == PlacementAction.MOVED:
        line = f"[green]Deplace[/green] {source} -> {destination}"
        if result.reason:
            line += f" [dim]({escape(result.reason)})[/dim]"
        return line
    if result.action == PlacementAction.WOULD_MOVE:
        return f"[yellow]\\[dry-run][/yellow] {source} -> {destination}"
    return f"[red]Ignore[/red] {source} [dim]({escape(result.reason or '')})[/dim]"


def display_result(result: PlacementResult) -> None:
    """Affiche un résultat de placement."""
    console.print(format_result(result))


def display_sort_report(report: SortReport) -> None:
    """Affiche chaque résultat puis le résumé du tri."""
    for result in report.results:
        display_result(result)

    console.print(
        f"\n[bold]Total: {len(report.results)} fichier(s)[/bold] - "
        f"{report.moved} deplace(s), {report.would_move} simule(s), "
        f"{report.skipped} ignore(s)"
    )


def display_check_report(report: CheckReport) -> None:
    """
    Affiche le rapport de vérification.

    - tableau des destinations visées par plusieurs fichiers
    - fichiers introuvables chez les fournisseurs
    - fichiers déjà présents dans la bibliothèque
    - fichiers en échec
    """
    collisions = report.collisions

    if collisions:
        table = Table(title="Collisions", show_header=True, header_style="bold cyan")
        table.add_column("Destination", style="bold")
        table.add_column("Fichiers")
        for destination, sources in collisions:
            table.add_row(
                escape(str(destination)),
                "\n".join(escape(str(source)) for source in sources),
            )
        console.print(table)
    else:
        console.print("[green]Aucune collision detectee.[/green]")

    if report.unresolved:
        console.print(f"\n[yellow]Introuvables ({len(report.unresolved)}):[/yellow]")
        for path in report.unresolved:
            console.print(f"  {escape(str(path))}")

    if report.already_present:
        console.print(
            f"\n[yellow]Deja presents dans la bibliotheque ({len(report.already_present)}):[/yellow]"
        )
        for path in report.already_present:
            console.print(f"  {escape(str(path))}")

    if report.failed:
        console.print(f"\n[red]En echec ({len(report.failed)}):[/red]")
        for path, reason in report.failed:
            console.print(f"  {escape(str(path))} [dim]({escape(reason)})[/dim]")

    console.print(
        f"\n[bold]{len(report.destinations)} destination(s)[/bold], "
        f"{len(collisions)} collision(s), {len(report.unresolved)} introuvable(s), "
        f"{report.ignored} fichier(s) non media"
    )
