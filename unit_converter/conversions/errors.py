"""Exceptions raised by the convert operation."""

from ..config import ERROR_MESSAGES


class ConversionError(ValueError):
    """
    Base class for conversion failures.

    The exception text is the user-facing message; ``kind`` names the
    failure so callers can branch without parsing the text.
    """

    kind = "ConversionError"

    def __init__(self, message: str | None = None):
        super().__init__(message or ERROR_MESSAGES[self.kind])


class BelowAbsoluteZeroError(ConversionError):
    """Temperature input is colder than absolute zero."""

    kind = "BelowAbsoluteZero"


class NegativeValueError(ConversionError):
    """Distance, weight or volume input is negative."""


class NegativeDistanceError(NegativeValueError):
    kind = "NegativeDistance"


class NegativeWeightError(NegativeValueError):
    kind = "NegativeWeight"


class NegativeVolumeError(NegativeValueError):
    kind = "NegativeVolume"


class UnknownConversionError(ConversionError):
    """Conversion name is not registered."""

    kind = "UnknownConversion"

    def __init__(self, name: str):
        self.name = name
        super().__init__(ERROR_MESSAGES[self.kind].format(name=name))
