"""Display utilities for the tracker CLI with Rich formatting."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()


def display_report(report: str, title: str) -> None:
    """Display a rendered report inside a panel."""
    console.print(
        Panel(
            Text(report.rstrip("\n")),
            title=f"[bold cyan]{title}[/bold cyan]",
            border_style="cyan",
            expand=False,
        )
    )


def display_summary(processed: int, failed: int) -> None:
    """Display batch processing totals."""
    if failed:
        console.print(f"[yellow]![/yellow] {processed} record(s) processed, {failed} failed")
    else:
        console.print(f"[green]✓[/green] {processed} record(s) processed")


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}", highlight=False)


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}", highlight=False)
