"""Rich-powered console output for DevAssist."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from devassist import __version__
from devassist.assist import AssistReport


class Console:
    """Terminal output for DevAssist using Rich."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def banner(self) -> None:
        self.console.print(
            Panel(
                f"[bold cyan]DevAssist[/bold cyan] [dim]v{__version__}[/dim]\n"
                "[dim]Merged pull requests behind every record[/dim]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {message}")

    def show_paths(self, paths: list[str]) -> None:
        """Display inferred metadata paths in order."""
        table = Table(title="Metadata Paths", border_style="cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Path", style="cyan")
        for i, path in enumerate(paths, 1):
            table.add_row(str(i), Text(path))
        self.console.print(table)

    def show_report(self, report: AssistReport) -> None:
        """Display merged pull requests with links to their changed files."""
        result = report.result
        if not result.pull_requests:
            self.info(f"No merged pull requests found across {len(report.paths)} path(s)")
        else:
            table = Table(title="Merged Pull Requests", border_style="cyan", show_lines=True)
            table.add_column("PR", justify="right", style="bold")
            table.add_column("Title")
            table.add_column("Merged", style="dim")
            table.add_column("Files")

            for pr in result.pull_requests:
                merged = pr.merged_at.strftime("%Y-%m-%d %H:%M") if pr.merged_at else "-"
                files = Text("\n").join(
                    Text(link.name, style=Style(link=link.url)) for link in pr.file_links
                )
                table.add_row(f"#{pr.number}", Text(pr.title), merged, files)
            self.console.print(table)

        for failure in result.failures:
            self.warning(
                f"Lookup failed for [cyan]{escape(failure.path)}[/cyan]: {escape(failure.error)}"
            )
