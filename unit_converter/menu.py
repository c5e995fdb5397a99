"""Interactive text menu for converting values."""

import math

from rich.console import Console

from .config import ERROR_MESSAGES, MENU_CATEGORIES
from .conversions import ConversionError, UnitConverter
from .output import format_result

EXIT_OPTION = len(MENU_CATEGORIES) + 1


def read_number(console: Console, prompt: str) -> float | None:
    """Prompt for a finite number. Returns None if the input isn't one."""
    text = console.input(prompt)
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def read_choice(console: Console, prompt: str) -> int | None:
    """Prompt for an integer menu choice. Returns None if the input isn't one."""
    text = console.input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def display_menu(console: Console) -> None:
    """Print the main menu."""
    console.print("\n[bold]Unit Converter[/bold]")
    for index, category in enumerate(MENU_CATEGORIES.values(), 1):
        console.print(f"{index}. {category['title']}", highlight=False)
    console.print(f"{EXIT_OPTION}. Exit", highlight=False)


def convert_category(
    converter: UnitConverter,
    category_key: str,
    console: Console,
    err_console: Console,
) -> float | None:
    """
    Run one conversion for a menu category.

    Prompts for the value first, then for one of the category's conversions.
    Every failure is reported on err_console and leaves the menu running.

    Returns:
        The converted value, or None if nothing was converted.
    """
    category = MENU_CATEGORIES[category_key]

    value = read_number(console, category["prompt"])
    if value is None:
        _print_error(err_console, ERROR_MESSAGES["InvalidNumber"])
        return None

    console.print("Choose conversion type:")
    names = category["conversions"]
    for index, name in enumerate(names, 1):
        console.print(f"{index}. {name}", highlight=False)

    choice = read_choice(console, "Enter choice: ")
    if choice is None or not 1 <= choice <= len(names):
        _print_error(err_console, ERROR_MESSAGES["InvalidSelection"])
        return None

    try:
        result = converter.convert(names[choice - 1], value)
    except ConversionError as e:
        _print_error(err_console, f"Error: {e}")
        return None

    format_result(result, console)
    return result


def run_menu(converter: UnitConverter, console: Console, err_console: Console) -> None:
    """Show the main menu until the user exits or input runs out."""
    category_keys = list(MENU_CATEGORIES)

    while True:
        display_menu(console)
        try:
            choice = read_choice(console, "Choose an option: ")
            if choice is None:
                _print_error(err_console, ERROR_MESSAGES["InvalidMenuNumber"])
                continue

            if choice == EXIT_OPTION:
                console.print("Exiting...")
                return

            if 1 <= choice <= len(category_keys):
                convert_category(converter, category_keys[choice - 1], console, err_console)
            else:
                _print_error(err_console, ERROR_MESSAGES["InvalidOption"])
        except EOFError:
            console.print("\nExiting...")
            return


def _print_error(err_console: Console, message: str) -> None:
    err_console.print(message, style="red", markup=False, highlight=False)
