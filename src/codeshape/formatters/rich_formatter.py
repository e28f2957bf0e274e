"""Rich terminal formatter for codeshape."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..naming import NamingCategory, NamingConvention, NamingStat
from ..report import AnalysisReport
from .base import BaseFormatter


def _confidence_label(confidence: int) -> str:
    if confidence >= 80:
        return "[green]high[/green]"
    elif confidence >= 60:
        return "[yellow]moderate[/yellow]"
    else:
        return "[red]low[/red]"


def _dominant_label(stat: NamingStat) -> str:
    if stat.dominant is None:
        return "[dim]-[/dim]"
    if stat.dominant == NamingConvention.MIXED:
        return "[yellow]mixed[/yellow]"
    share = stat.share(stat.dominant)
    return f"{stat.dominant.value} [dim]({share:.0%})[/dim]"


class RichFormatter(BaseFormatter):
    """Summary panel followed by naming and pattern tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def render(self, report: AnalysisReport) -> None:
        self._print_summary(report)
        self._print_naming(report)
        self._print_patterns(report)

    def format(self, report: AnalysisReport) -> str:
        with self.console.capture() as capture:
            self.render(report)
        return capture.get()

    def _print_summary(self, report: AnalysisReport) -> None:
        metrics = report.consistency_metrics
        deps = report.dependency_insights
        top = report.top_pattern
        cycle_style = "red" if deps.cycle_count else "green"
        top_display = f"{escape(top.name)} ({top.confidence}%)" if top else "none detected"

        summary_text = (
            f"Analyzed [bold]{report.files_analyzed}[/bold] files in "
            f"[cyan]{escape(report.root)}[/cyan]\n"
            f"Architecture: [bold]{top_display}[/bold]  |  "
            f"Modules: [yellow]{deps.module_count}[/yellow]  "
            f"Edges: [yellow]{deps.edge_count}[/yellow]  "
            f"Cycles: [{cycle_style}]{deps.cycle_count}[/{cycle_style}]"
            + ("  [dim](graph truncated)[/dim]" if deps.truncated else "")
            + "\n"
            f"Consistency: overall [blue]{metrics.overall}[/blue]  "
            f"naming [blue]{metrics.naming}[/blue]  "
            f"architecture [blue]{metrics.architecture}[/blue]"
        )
        self.console.print(Panel(summary_text, title="[bold cyan]Summary[/bold cyan]", expand=False))
        self.console.print()

    def _print_naming(self, report: AnalysisReport) -> None:
        table = Table(title="Naming Conventions", expand=True)
        table.add_column("Category", style="yellow")
        table.add_column("Names", justify="right", width=8)
        table.add_column("Dominant", ratio=1)
        table.add_column("Breakdown", style="dim", ratio=2)

        for category in NamingCategory:
            stat = report.naming_conventions.get(category, NamingStat())
            breakdown = ", ".join(
                f"{convention.value} {count}"
                for convention, count in stat.counts_by_convention.items()
            )
            table.add_row(category.value, str(stat.total), _dominant_label(stat), breakdown or "-")

        self.console.print(table)
        self.console.print()

    def _print_patterns(self, report: AnalysisReport) -> None:
        if report.architectural_patterns:
            table = Table(title="Architectural Patterns", expand=True)
            table.add_column("#", style="dim", width=4)
            table.add_column("Pattern", style="yellow", ratio=1)
            table.add_column("Confidence", justify="right", width=18)
            table.add_column("Sources", style="cyan", ratio=1)
            table.add_column("Evidence", style="white", ratio=3)

            for i, pattern in enumerate(report.architectural_patterns, 1):
                table.add_row(
                    str(i),
                    escape(pattern.name),
                    f"{pattern.confidence} ({_confidence_label(pattern.confidence)})",
                    ", ".join(pattern.sources),
                    escape("; ".join(pattern.evidence)),
                )
            self.console.print(table)
        else:
            self.console.print("[dim]No architectural patterns detected.[/dim]")
        self.console.print()

        if report.code_patterns:
            self.console.print("[bold]Code Patterns:[/bold]")
            for name in report.code_patterns:
                self.console.print(f"  [green]-[/green] {escape(name)}")
            self.console.print()
