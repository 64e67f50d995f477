"""Rich terminal formatter for Complexity Insight."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import WARNING_THRESHOLD, ComplexityResult
from .base import BaseFormatter


def _score_label(score: int, threshold: int) -> str:
    if score > threshold * 2:
        return f"[red bold]{score}[/red bold]"
    elif score > threshold:
        return f"[red]{score}[/red]"
    elif score > threshold // 2:
        return f"[yellow]{score}[/yellow]"
    else:
        return f"[green]{score}[/green]"


class RichFormatter(BaseFormatter):
    """Rich terminal output with a summary panel and a ranked unit table."""

    def __init__(self, threshold: int = WARNING_THRESHOLD, console: Optional[Console] = None):
        super().__init__(threshold)
        self.console = console or Console()

    def render(self, result: ComplexityResult) -> None:
        self.console.print(self._summary_panel(result))
        if result.unit_count:
            self.console.print(self._unit_table(result))

    def format(self, result: ComplexityResult) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=100, color_system=None)
        console.print(self._summary_panel(result))
        if result.unit_count:
            console.print(self._unit_table(result))
        return buffer.getvalue()

    def _summary_panel(self, result: ComplexityResult) -> Panel:
        flagged = len(result.units_over(self.threshold))
        body = (
            f"Units: [bold]{result.unit_count}[/bold]   "
            f"Total complexity: [bold]{result.total_complexity}[/bold]   "
            f"Max: {_score_label(result.max_complexity, self.threshold)} "
            f"in [cyan]{escape(result.most_complex_unit)}[/cyan]"
        )
        if flagged:
            body += f"\n[red]{flagged} unit(s) above {self.threshold}[/red]"
        return Panel(
            body,
            title=f"[bold]{escape(result.file_name)}[/bold] ({result.language})",
            expand=False,
        )

    def _unit_table(self, result: ComplexityResult) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Unit")
        table.add_column("Complexity", justify="right")
        for rank, (name, score) in enumerate(result.ranked_units(), start=1):
            table.add_row(str(rank), escape(name), _score_label(score, self.threshold))
        return table
