"""Output formatters for conversion results."""

import json

from rich.console import Console
from rich.table import Table

from ..config import DISPLAY_PRECISION
from ..conversions import Category, UnitConverter


CATEGORY_COLORS = {
    Category.TEMPERATURE: "red",
    Category.DISTANCE: "cyan",
    Category.WEIGHT: "yellow",
    Category.VOLUME: "blue",
}


def format_value(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """Format a converted value with a fixed number of decimal places."""
    return f"{value:.{precision}f}"


def format_result(result: float, console: Console) -> None:
    """Print a converted value for display."""
    console.print(f"Converted value: {format_value(result)}", highlight=False)


def format_json(name: str, category: Category, value: float, result: float, console: Console) -> None:
    """Print a conversion as JSON, keeping full precision."""
    payload = {
        "conversion": name,
        "category": category.value,
        "input": value,
        "result": result,
    }
    console.print_json(json.dumps(payload))


def format_conversions_table(
    converter: UnitConverter,
    console: Console,
    category: Category | None = None,
) -> None:
    """Print registered conversions grouped by category."""
    table = Table(show_header=True, header_style="bold", title="Available Conversions")
    table.add_column("Category", width=12)
    table.add_column("Conversion", style="cyan")
    table.add_column("From")
    table.add_column("To")

    for name, conversion in converter.conversions.items():
        if category is not None and conversion.category != category:
            continue
        color = CATEGORY_COLORS.get(conversion.category, "white")
        table.add_row(
            f"[{color}]{conversion.category.value}[/{color}]",
            name,
            conversion.source,
            conversion.target,
        )

    console.print(table)
