"""Configuration constants for Unit Converter."""

# Temperature
ABSOLUTE_ZERO_CELSIUS = -273.15
KELVIN_OFFSET = 273.15
FAHRENHEIT_OFFSET = 32.0

# Input values beyond this magnitude are clamped before conversion
VALUE_LIMIT = 1e6

# Conversion factors (metric unit -> imperial unit)
KM_TO_MILES = 0.621371
METERS_TO_FEET = 3.28084
KG_TO_POUNDS = 2.20462
GRAMS_TO_OUNCES = 0.035274
LITERS_TO_GALLONS = 0.264172
ML_TO_FLUID_OUNCES = 0.033814

# Output
DISPLAY_PRECISION = 2

# Interactive menu, in display order
MENU_CATEGORIES = {
    "temperature": {
        "title": "Convert Temperature",
        "prompt": "Enter temperature value: ",
        "conversions": [
            "CelsiusToFahrenheit",
            "FahrenheitToCelsius",
            "CelsiusToKelvin",
            "KelvinToCelsius",
        ],
    },
    "distance": {
        "title": "Convert Distance",
        "prompt": "Enter distance value: ",
        "conversions": [
            "KilometersToMiles",
            "MilesToKilometers",
            "MetersToFeet",
            "FeetToMeters",
        ],
    },
    "weight": {
        "title": "Convert Weight",
        "prompt": "Enter weight value: ",
        "conversions": [
            "KilogramsToPounds",
            "PoundsToKilograms",
            "GramsToOunces",
            "OuncesToGrams",
        ],
    },
    "volume": {
        "title": "Convert Volume",
        "prompt": "Enter volume value: ",
        "conversions": [
            "LitersToGallons",
            "GallonsToLiters",
            "MillilitersToFluidOunces",
            "FluidOuncesToMilliliters",
        ],
    },
}

# Error messages (matched verbatim by callers)
ERROR_MESSAGES = {
    "BelowAbsoluteZero": "Temperature value below absolute zero is not valid.",
    "NegativeDistance": "Negative distance values are not valid.",
    "NegativeWeight": "Negative weight values are not valid.",
    "NegativeVolume": "Negative volume values are not valid.",
    "UnknownConversion": "Invalid conversion type: {name}",
    "InvalidNumber": "Invalid input. Please enter a numeric value.",
    "InvalidMenuNumber": "Invalid input. Please enter a number corresponding to the menu option.",
    "InvalidOption": "Invalid option. Please try again.",
    "InvalidSelection": "Invalid conversion selection.",
}
