"""CLI renderer for Shelly."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelly.core.verify import matches_own_line
from shelly.export import BatchSummary, ExportFormat
from shelly.samples import ExampleSet
from shelly.types import Components, ParsedCommand


def describe_components(components: Components) -> str:
    """Render components as compact key=value pairs."""
    parts: list[str] = []
    if components.action is not None:
        parts.append(f"action={components.action}")
    if components.target is not None:
        parts.append(f"target={components.target}")
    if components.parameters:
        parts.append(f"params={' '.join(components.parameters)}")
    if components.flags:
        parts.append(f"flags={' '.join(components.flags)}")
    return " ".join(parts)


def confidence_style(confidence: float) -> str:
    if confidence >= 0.8:
        return "green"
    if confidence >= 0.6:
        return "yellow"
    return "red"


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def info(self, message: str) -> None:
        """Render an info message."""
        self.console.print(message)

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def raw(self, text: str) -> None:
        """Print text without markup or highlighting."""
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def records(self, records: Sequence[ParsedCommand]) -> None:
        """Render analyzed commands as a table."""
        table = Table(title="Parsed commands", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Command", style="cyan")
        table.add_column("Family", style="magenta")
        table.add_column("Components")
        table.add_column("Regex", style="bold")
        table.add_column("Confidence", justify="right")
        table.add_column("Check", justify="center")

        for index, record in enumerate(records, 1):
            style = confidence_style(record.confidence)
            check = "[green]match[/green]" if matches_own_line(record) else "[red]no match[/red]"
            table.add_row(
                str(index),
                escape(record.original_command),
                record.family,
                escape(describe_components(record.components)),
                escape(record.regex),
                f"[{style}]{round(record.confidence * 100)}%[/{style}]",
                check,
            )
        self.console.print(table)

    def summary(self, summary: BatchSummary) -> None:
        self.console.print(f"[dim]{summary.render()}[/dim]")

    def examples(self, examples: Sequence[ExampleSet]) -> None:
        for example in examples:
            self.console.print(
                f"{example.icon} [bold]{escape(example.name)}[/bold] [dim]({example.slug}, "
                f"{len(example.commands)} commands)[/dim]"
            )

    def formats(self, formats: Sequence[ExportFormat]) -> None:
        for spec in formats:
            self.console.print(f"[bold]{spec.name:8}[/bold] {spec.label} - {escape(spec.description)}")


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
