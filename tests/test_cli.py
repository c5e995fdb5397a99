"""Tests for the command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from unit_converter import __version__
from unit_converter.conversions import Category
from unit_converter.main import app, parse_category


runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging setup done by --verbose."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseCategory:
    """Tests for parse_category function."""

    def test_lowercase(self):
        """Lowercase names parse."""
        assert parse_category("weight") == Category.WEIGHT

    def test_case_insensitive(self):
        """Case is ignored."""
        assert parse_category(" Volume ") == Category.VOLUME

    def test_invalid(self):
        """Unknown categories return None."""
        assert parse_category("area") is None


class TestConvertCommand:
    """Tests for the convert command."""

    def test_text_output(self):
        """Result is printed with two decimals."""
        result = runner.invoke(app, ["convert", "CelsiusToFahrenheit", "100"])
        assert result.exit_code == 0
        assert "Converted value: 212.00" in result.output

    def test_json_output(self):
        """JSON output has full precision."""
        result = runner.invoke(app, ["convert", "KilometersToMiles", "1", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["result"] == 0.621371
        assert data["category"] == "distance"

    def test_unknown_conversion(self):
        """Unknown names exit with an error."""
        result = runner.invoke(app, ["convert", "InvalidType", "100"])
        assert result.exit_code == 1
        assert "Error: Invalid conversion type: InvalidType" in result.output

    def test_negative_value(self):
        """Validation errors exit with the exact message."""
        result = runner.invoke(app, ["convert", "--", "LitersToGallons", "-1"])
        assert result.exit_code == 1
        assert "Error: Negative volume values are not valid." in result.output

    def test_invalid_format(self):
        """Unsupported formats are rejected."""
        result = runner.invoke(app, ["convert", "MetersToFeet", "1", "--format", "xml"])
        assert result.exit_code == 1
        assert "Invalid format: xml" in result.output

    def test_non_numeric_value(self):
        """Non-numeric values are rejected by argument parsing."""
        result = runner.invoke(app, ["convert", "MetersToFeet", "abc"])
        assert result.exit_code != 0

    def test_non_finite_value(self):
        """nan is rejected."""
        result = runner.invoke(app, ["convert", "MetersToFeet", "nan"])
        assert result.exit_code == 1
        assert "Invalid input. Please enter a numeric value." in result.output


class TestListCommand:
    """Tests for the list command."""

    def test_lists_conversions(self):
        """All conversions are listed."""
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "MillilitersToFluidOunces" in result.output
        assert "CelsiusToFahrenheit" in result.output

    def test_category_filter(self):
        """--category limits the listing."""
        result = runner.invoke(app, ["list", "--category", "weight"])
        assert result.exit_code == 0
        assert "GramsToOunces" in result.output
        assert "LitersToGallons" not in result.output

    def test_invalid_category(self):
        """Unknown categories exit with an error."""
        result = runner.invoke(app, ["list", "--category", "area"])
        assert result.exit_code == 1
        assert "Invalid category: area" in result.output


class TestMenuCommand:
    """Tests for the interactive menu command."""

    def test_menu_conversion(self):
        """A full menu session converts and exits."""
        result = runner.invoke(app, ["menu"], input="3\n1\n1\n5\n")
        assert result.exit_code == 0
        assert "Converted value: 2.20" in result.output
        assert "Exiting..." in result.output

    def test_default_is_menu(self):
        """No command starts the menu."""
        result = runner.invoke(app, [], input="5\n")
        assert result.exit_code == 0
        assert "Unit Converter" in result.output
        assert "Exiting..." in result.output

    def test_menu_error_continues(self):
        """Errors are reported and the menu keeps running."""
        result = runner.invoke(app, ["menu"], input="4\nabc\n5\n")
        assert result.exit_code == 0
        assert "Invalid input. Please enter a numeric value." in result.output
        assert "Exiting..." in result.output

    @pytest.mark.parametrize("flag", ["--verbose", "-v"])
    def test_verbose_flag(self, flag):
        """Verbose flag is accepted before a command."""
        result = runner.invoke(app, [flag, "convert", "MetersToFeet", "1"])
        assert result.exit_code == 0
        assert "Converted value: 3.28" in result.output

    def test_verbose_logs_clamping(self):
        """Debug logging reports clamped input."""
        result = runner.invoke(app, ["-v", "convert", "KilometersToMiles", "1e7"])
        assert result.exit_code == 0
        assert "Clamping" in result.output
        assert "Converted value: 621371.00" in result.output


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self):
        """Version is printed."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output
