"""Fixed registry of named conversion formulas."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from ..config import (
    FAHRENHEIT_OFFSET,
    GRAMS_TO_OUNCES,
    KELVIN_OFFSET,
    KG_TO_POUNDS,
    KM_TO_MILES,
    LITERS_TO_GALLONS,
    METERS_TO_FEET,
    ML_TO_FLUID_OUNCES,
)


class Category(str, Enum):
    """Unit family of a conversion; selects the validation rule."""

    TEMPERATURE = "temperature"
    DISTANCE = "distance"
    WEIGHT = "weight"
    VOLUME = "volume"


@dataclass(frozen=True)
class Conversion:
    """A single registered formula from ``source`` units to ``target`` units."""

    source: str
    target: str
    category: Category
    func: Callable[[float], float]

    @property
    def name(self) -> str:
        return f"{self.source}To{self.target}"

    def __call__(self, value: float) -> float:
        return self.func(value)


TEMPERATURE_CONVERSIONS = [
    ("Celsius", "Fahrenheit", lambda c: c * 9.0 / 5.0 + FAHRENHEIT_OFFSET),
    ("Fahrenheit", "Celsius", lambda f: (f - FAHRENHEIT_OFFSET) * 5.0 / 9.0),
    ("Celsius", "Kelvin", lambda c: c + KELVIN_OFFSET),
    ("Kelvin", "Celsius", lambda k: k - KELVIN_OFFSET),
]

DISTANCE_CONVERSIONS = [
    ("Kilometers", "Miles", lambda km: km * KM_TO_MILES),
    ("Miles", "Kilometers", lambda mi: mi / KM_TO_MILES),
    ("Meters", "Feet", lambda m: m * METERS_TO_FEET),
    ("Feet", "Meters", lambda ft: ft / METERS_TO_FEET),
]

WEIGHT_CONVERSIONS = [
    ("Kilograms", "Pounds", lambda kg: kg * KG_TO_POUNDS),
    ("Pounds", "Kilograms", lambda lb: lb / KG_TO_POUNDS),
    ("Grams", "Ounces", lambda g: g * GRAMS_TO_OUNCES),
    ("Ounces", "Grams", lambda oz: oz / GRAMS_TO_OUNCES),
]

VOLUME_CONVERSIONS = [
    ("Liters", "Gallons", lambda liters: liters * LITERS_TO_GALLONS),
    ("Gallons", "Liters", lambda gal: gal / LITERS_TO_GALLONS),
    ("Milliliters", "FluidOunces", lambda ml: ml * ML_TO_FLUID_OUNCES),
    ("FluidOunces", "Milliliters", lambda fl_oz: fl_oz / ML_TO_FLUID_OUNCES),
]

CONVERSION_GROUPS = {
    Category.TEMPERATURE: TEMPERATURE_CONVERSIONS,
    Category.DISTANCE: DISTANCE_CONVERSIONS,
    Category.WEIGHT: WEIGHT_CONVERSIONS,
    Category.VOLUME: VOLUME_CONVERSIONS,
}

# Unit words appearing in each category's conversion names
UNIT_WORDS = {
    category: tuple(dict.fromkeys(source for source, _, _ in formulas))
    for category, formulas in CONVERSION_GROUPS.items()
}


def categories_for(name: str) -> list[Category]:
    """
    Get every category whose unit words occur in a conversion name.

    Matching is by substring and case-sensitive, so a name can match more
    than one category ("MillilitersToFluidOunces" contains "Ounces" as well
    as "Liters") and unregistered names can still match ("MetersToYards").

    Returns:
        Matched categories in check order: temperature, distance, weight, volume
    """
    return [
        category for category, words in UNIT_WORDS.items()
        if any(word in name for word in words)
    ]


def build_registry() -> Mapping[str, Conversion]:
    """
    Build the read-only name -> conversion mapping.

    Entries keep registration order: temperature, distance, weight, volume.

    Returns:
        MappingProxyType keyed by conversion name (e.g. "CelsiusToKelvin")
    """
    registry = {}

    for category, formulas in CONVERSION_GROUPS.items():
        for source, target, func in formulas:
            conversion = Conversion(source, target, category, func)
            registry[conversion.name] = conversion

    return MappingProxyType(registry)
