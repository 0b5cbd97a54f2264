"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dailycal.agent.response import create_response, error_response
from dailycal.config import OUTPUT_FORMATS, Settings, default_config_path, get_settings
from dailycal.export.formatters import (
    activity_levels_payload,
    format_result,
    print_activity_levels,
    result_payload,
)
from dailycal.profiles import calculate as calculate_result
from dailycal.profiles import validate
from dailycal.profiles.validation import (
    ACTIVITY_FIELD,
    AGE_FIELD,
    HEIGHT_FIELD,
    SEX_FIELD,
    WEIGHT_FIELD,
)

app = typer.Typer(
    help="Daily calorie calculator (Mifflin-St Jeor BMR x activity level)",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

config_app = typer.Typer(help="Show or create the settings file")
app.add_typer(config_app, name="config")

# Engine field names -> CLI option names
OPTION_NAMES = {
    SEX_FIELD: "--sex",
    AGE_FIELD: "--age",
    WEIGHT_FIELD: "--weight",
    HEIGHT_FIELD: "--height",
    ACTIVITY_FIELD: "--activity",
}


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2, ensure_ascii=False))


def configure_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Daily calorie calculator."""
    try:
        settings = get_settings()
    except ValueError as e:
        # config show/init must still run so a broken file can be inspected or replaced
        if ctx.invoked_subcommand != "config":
            console.print(f"[red]Invalid settings file: {escape(str(e))}[/red]")
            console.print("[red]Fix it or run: dailycal config init --force[/red]")
            raise typer.Exit(1)
        settings = Settings()

    level = "DEBUG" if verbose else settings.logging.level
    configure_logging(level)


# ============================================================================
# Calculation
# ============================================================================


@app.command()
def calculate(
    sex: Optional[str] = typer.Option(None, "--sex", "-s", help="male or female"),
    age: Optional[str] = typer.Option(None, "--age", "-a", help="Age in years (16-100)"),
    weight: Optional[str] = typer.Option(None, "--weight", "-w", help="Weight in kg (30-300)"),
    height: Optional[str] = typer.Option(None, "--height", "-h", help="Height in cm (120-250)"),
    activity: Optional[str] = typer.Option(
        None,
        "--activity",
        "-l",
        help="Activity multiplier (1.2, 1.375, 1.55, 1.725, 1.9) or name, e.g. moderately_active",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json, markdown"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON response envelope"),
) -> None:
    """Calculate BMR and recommended daily calories."""
    # Raw strings; validate() reports every field error at once
    validation = validate(sex, age, weight, height, activity)

    if not validation.is_valid:
        logger.debug("Validation failed: %s", [e.kind.value for e in validation.errors])
        if json_output:
            errors = [error.to_dict() for error in validation.errors]
            output_json(
                error_response(
                    "calculate",
                    errors,
                    suggestions=["Run 'dailycal activities' to list valid activity levels"],
                ).to_dict()
            )
        else:
            for error in validation.errors:
                console.print(f"[red]{OPTION_NAMES[error.field]}: {error.message}[/red]")
        raise typer.Exit(1)

    result = calculate_result(validation.input, validation.activity)

    if json_output:
        output_json(
            create_response(
                "calculate",
                data=result_payload(result),
                human_summary=f"{result.daily_calories} calories/day (BMR {result.bmr})",
            ).to_dict()
        )
        return

    output_format = output_format or get_settings().defaults.output_format
    if output_format not in OUTPUT_FORMATS:
        console.print(
            f"[red]Unknown output format: {output_format}. "
            f"Use one of: {', '.join(OUTPUT_FORMATS)}[/red]"
        )
        raise typer.Exit(1)

    rendered = format_result(result, output_format, console=console)
    if rendered is not None:
        print(rendered, end="" if rendered.endswith("\n") else "\n")


@app.command()
def activities(
    json_output: bool = typer.Option(False, "--json", help="Output JSON response envelope"),
) -> None:
    """List the activity levels and their multipliers."""
    if json_output:
        output_json(
            create_response(
                "activities",
                data={"activity_levels": activity_levels_payload()},
                human_summary="5 activity levels",
            ).to_dict()
        )
        return
    print_activity_levels(console)


# ============================================================================
# HTTP API
# ============================================================================


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
) -> None:
    """Run the HTTP API (POST /api/calculate)."""
    import uvicorn

    from dailycal.api import create_app

    settings = get_settings()
    host = host or settings.api.host
    port = port or settings.api.port

    console.print(f"[dim]Serving dailycal API on http://{host}:{port}/api[/dim]")
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.logging.level.lower(),
    )


# ============================================================================
# Configuration
# ============================================================================


@config_app.command("show")
def config_show(
    config_path: Optional[Path] = typer.Option(None, "--path", help="Settings file to read"),
) -> None:
    """Print the effective settings."""
    path = config_path or default_config_path()
    try:
        settings = Settings.load(path)
    except ValueError as e:
        console.print(f"[red]Invalid settings in {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    source = str(path) if path.exists() else "defaults (no settings file)"
    console.print(f"[dim]Source: {source}[/dim]")
    print(json.dumps(settings.to_dict(), indent=2))


@config_app.command("init")
def config_init(
    config_path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a settings file with default values."""
    path = config_path or default_config_path()
    if path.exists() and not force:
        console.print(f"[red]{path} already exists. Use --force to overwrite.[/red]")
        raise typer.Exit(1)

    written = Settings().save(path)
    console.print(f"[green]Wrote default settings to {written}[/green]")


if __name__ == "__main__":
    app()
