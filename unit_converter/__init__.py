"""Unit Converter: validated conversions between measurement units."""

from .conversions import UnitConverter, Category, ConversionError

__version__ = "1.0.0"

__all__ = ["UnitConverter", "Category", "ConversionError", "__version__"]
