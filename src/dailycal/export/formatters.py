"""Output formatters for calculation results."""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dailycal.profiles.body_calc import daily_calories_text
from dailycal.profiles.models import ActivityLevel, CalculationResult

ESTIMATE_NOTES = [
    "This is an estimate based on population averages",
    "Individual metabolic rates can vary by ±10-15%",
    "Consult a healthcare professional for personalized advice",
    "Monitor your weight and adjust intake as needed",
]


def result_payload(result: CalculationResult) -> dict:
    """JSON-ready payload shared by the JSON formatter and the CLI envelope."""
    return {
        "result": result.to_dict(),
        "formula": {
            "bmr": result.formula_text,
            "daily_calories": daily_calories_text(result),
        },
    }


class TableFormatter:
    """Format results as Rich panels and tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: CalculationResult) -> None:
        """Print formatted result to console."""
        self.console.print(
            Panel(
                f"[bold green]{result.daily_calories:,}[/bold green] calories/day",
                title="Your Daily Calorie Recommendation",
            )
        )

        table = Table(show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_column("Notes", style="dim")
        table.add_row("Base Metabolic Rate (BMR)", f"{result.bmr:,}", "calories/day at rest")
        table.add_row(
            "Activity Multiplier",
            f"{result.activity_multiplier}×",
            result.activity_description,
        )
        table.add_row(
            "[bold]Daily Calories[/bold]",
            f"[bold]{result.daily_calories:,}[/bold]",
            "",
        )
        self.console.print(table)

        self.console.print("\n[bold]Calculation Method[/bold] (Mifflin-St Jeor equation)")
        self.console.print(f"  {result.formula_text}")
        self.console.print(f"  {daily_calories_text(result)}")

        self.console.print("\n[yellow]Important notes:[/yellow]")
        for note in ESTIMATE_NOTES:
            self.console.print(f"  [yellow]•[/yellow] {note}")


class JSONFormatter:
    """Format results as JSON."""

    def format(self, result: CalculationResult) -> str:
        """Return JSON string of the result and its formulas."""
        return json.dumps(result_payload(result), indent=2, ensure_ascii=False)


class MarkdownFormatter:
    """Format results as Markdown."""

    def format(self, result: CalculationResult) -> str:
        """Return a Markdown report of the result."""
        lines = [
            "# Daily Calorie Recommendation",
            "",
            f"**{result.daily_calories:,} calories/day**",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| BMR | {result.bmr:,} |",
            f"| Activity multiplier | {result.activity_multiplier}× ({result.activity_description}) |",
            f"| Daily calories | {result.daily_calories:,} |",
            "",
            "## Calculation Method",
            "",
            "Mifflin-St Jeor equation:",
            "",
            "```",
            result.formula_text,
            daily_calories_text(result),
            "```",
            "",
            "## Notes",
            "",
        ]
        lines.extend(f"- {note}" for note in ESTIMATE_NOTES)
        return "\n".join(lines) + "\n"


def activity_levels_payload() -> list[dict]:
    """The activity level table as a list of dicts."""
    return [
        {
            "multiplier": level.multiplier,
            "name": level.name.lower(),
            "description": level.description,
            "label": level.label,
        }
        for level in ActivityLevel
    ]


def print_activity_levels(console: Optional[Console] = None) -> None:
    """Print the activity level table."""
    console = console or Console()
    table = Table(title="Activity Levels")
    table.add_column("Multiplier", justify="right", style="green")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for level in ActivityLevel:
        table.add_row(f"{level.multiplier}", level.name.lower(), level.label)
    console.print(table)


def format_result(
    result: CalculationResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format a calculation result in the specified format.

    Args:
        result: Calculation result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        formatter = TableFormatter(console)
        formatter.format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
