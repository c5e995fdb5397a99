"""Conversion registry and validated convert operation."""

from .converter import UnitConverter
from .errors import (
    ConversionError,
    BelowAbsoluteZeroError,
    NegativeValueError,
    NegativeDistanceError,
    NegativeWeightError,
    NegativeVolumeError,
    UnknownConversionError,
)
from .registry import Category, Conversion, build_registry, categories_for

__all__ = [
    "UnitConverter",
    "Category",
    "Conversion",
    "build_registry",
    "categories_for",
    "ConversionError",
    "BelowAbsoluteZeroError",
    "NegativeValueError",
    "NegativeDistanceError",
    "NegativeWeightError",
    "NegativeVolumeError",
    "UnknownConversionError",
]
