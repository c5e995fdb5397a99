"""CLI entry point for Unit Converter."""

import logging
import math
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .conversions import Category, ConversionError, UnitConverter
from .menu import run_menu
from .output import format_conversions_table, format_json, format_result

app = typer.Typer(
    name="unit-converter",
    help="Convert temperature, distance, weight and volume values.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ["text", "json"]


def setup_logging(verbose: bool) -> None:
    """Send DEBUG logs through rich when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def parse_category(category: str) -> Category | None:
    """Parse a category name (case-insensitive). Returns None if invalid."""
    try:
        return Category(category.strip().lower())
    except ValueError:
        return None


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Convert values between units. Starts the interactive menu when no command is given."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        run_menu(UnitConverter(), console, err_console)


@app.command()
def menu() -> None:
    """Run the interactive conversion menu."""
    run_menu(UnitConverter(), console, err_console)


@app.command()
def convert(
    name: str = typer.Argument(..., help="Conversion name (e.g., CelsiusToFahrenheit)"),
    value: float = typer.Argument(..., help="Value to convert"),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text or json",
    ),
) -> None:
    """Convert a single value."""
    if output_format not in OUTPUT_FORMATS:
        err_console.print(f"[red]Invalid format: {output_format}[/red]")
        err_console.print(f"Available formats: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    if not math.isfinite(value):
        err_console.print("[red]Invalid input. Please enter a numeric value.[/red]")
        raise typer.Exit(1)

    converter = UnitConverter()
    try:
        result = converter.convert(name, value)
    except ConversionError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(1)

    if output_format == "json":
        format_json(name, converter.category_of(name), value, result, console)
    else:
        format_result(result, console)


@app.command("list")
def list_conversions(
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help=f"Only show one category. Available: {', '.join(c.value for c in Category)}",
    ),
) -> None:
    """List available conversions."""
    selected = None
    if category:
        selected = parse_category(category)
        if selected is None:
            err_console.print(f"[red]Invalid category: {category}[/red]")
            err_console.print(f"Available categories: {', '.join(c.value for c in Category)}")
            raise typer.Exit(1)

    format_conversions_table(UnitConverter(), console, selected)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"unit-converter version {__version__}")


if __name__ == "__main__":
    app()
