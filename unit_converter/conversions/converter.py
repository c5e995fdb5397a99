"""Validated conversion between measurement units."""

import logging
from typing import Iterator

from ..config import ABSOLUTE_ZERO_CELSIUS, FAHRENHEIT_OFFSET, KELVIN_OFFSET, VALUE_LIMIT
from .errors import (
    BelowAbsoluteZeroError,
    NegativeDistanceError,
    NegativeVolumeError,
    NegativeWeightError,
    UnknownConversionError,
)
from .registry import Category, Conversion, build_registry, categories_for

logger = logging.getLogger(__name__)

# Input temperature expressed in Celsius, keyed by source scale
TO_CELSIUS = {
    "Celsius": lambda c: c,
    "Fahrenheit": lambda f: (f - FAHRENHEIT_OFFSET) * 5.0 / 9.0,
    "Kelvin": lambda k: k - KELVIN_OFFSET,
}

NEGATIVE_VALUE_ERRORS = {
    Category.DISTANCE: NegativeDistanceError,
    Category.WEIGHT: NegativeWeightError,
    Category.VOLUME: NegativeVolumeError,
}


class UnitConverter:
    """
    Converts values using a fixed registry of named formulas.

    The registry is built once per instance and never modified, so a single
    converter can be shared freely.

    Usage:
        converter = UnitConverter()
        converter.convert("CelsiusToFahrenheit", 100.0)  # 212.0
    """

    def __init__(self):
        self._conversions = build_registry()

    @property
    def conversions(self):
        """Read-only mapping of conversion name to Conversion."""
        return self._conversions

    def __contains__(self, name: str) -> bool:
        return name in self._conversions

    def __iter__(self) -> Iterator[str]:
        return iter(self._conversions)

    def __len__(self) -> int:
        return len(self._conversions)

    def names(self, category: Category | None = None) -> list[str]:
        """Registered names in registration order, optionally for one category."""
        return [
            name for name, conversion in self._conversions.items()
            if category is None or conversion.category == category
        ]

    def category_of(self, name: str) -> Category:
        """Get the category of a registered conversion."""
        return self._lookup(name).category

    def convert(self, name: str, value: float) -> float:
        """
        Convert a value using the named conversion.

        Range checks run first, on the value as given, for every category
        whose unit words appear in the name; magnitudes beyond VALUE_LIMIT
        are clamped only after they pass. The name is looked up last.

        Args:
            name: Registered conversion name, e.g. "KilometersToMiles"
            value: Input value in the conversion's source unit

        Returns:
            Converted value at full precision

        Raises:
            BelowAbsoluteZeroError: temperature input below -273.15 C
            NegativeValueError: negative distance, weight or volume input
            UnknownConversionError: name is not registered
        """
        self._validate(name, value)

        if value > VALUE_LIMIT:
            logger.debug("Clamping %s input %r to %r", name, value, VALUE_LIMIT)
            value = VALUE_LIMIT
        elif value < -VALUE_LIMIT:
            logger.debug("Clamping %s input %r to %r", name, value, -VALUE_LIMIT)
            value = -VALUE_LIMIT

        return self._lookup(name)(value)

    def _lookup(self, name: str) -> Conversion:
        conversion = self._conversions.get(name)
        if conversion is None:
            logger.debug("Unknown conversion requested: %s", name)
            raise UnknownConversionError(name)
        return conversion

    def _validate(self, name: str, value: float) -> None:
        """Raise if value is out of range for any category matched by name."""
        for category in categories_for(name):
            if category == Category.TEMPERATURE:
                celsius = TO_CELSIUS[_temperature_scale(name)](value)
                if celsius < ABSOLUTE_ZERO_CELSIUS:
                    logger.debug("Rejected %s input %r: %r C is below absolute zero", name, value, celsius)
                    raise BelowAbsoluteZeroError()
            elif value < 0:
                logger.debug("Rejected negative %s input %r", category.value, value)
                raise NEGATIVE_VALUE_ERRORS[category]()


def _temperature_scale(name: str) -> str:
    """Scale of the input value: the unit before "To", else the first scale named."""
    source = name.split("To", 1)[0]
    if source in TO_CELSIUS:
        return source
    return next((scale for scale in ("Fahrenheit", "Kelvin") if scale in name), "Celsius")
