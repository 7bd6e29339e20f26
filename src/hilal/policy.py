"""Leniency policy for out-of-domain input, and the errors raised when it is strict."""

from enum import Enum


class Strictness(Enum):
    """How the core reacts to input outside an operation's domain.

    LENIENT clamps an out-of-range hour-angle cosine and substitutes
    defaults for unknown ids (MWL, or "" for a month name). STRICT raises
    instead.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class HilalError(Exception):
    """Base class for errors raised by the hilal core."""


class DomainError(HilalError, ValueError):
    """The sun never reaches the angle an event needs on that day."""

    def __init__(self, event: str, cos_hour: float) -> None:
        self.event = event
        self.cos_hour = cos_hour
        super().__init__(f"{event}: hour-angle cosine {cos_hour:.4f} is outside [-1, 1]")


class PerpetualDaylight(DomainError):
    """The sun stays above the event's angle all day (e.g. Isha in a high-latitude summer)."""


class PerpetualDarkness(DomainError):
    """The sun stays below the event's angle all day (e.g. sunrise in a polar night)."""


class UnknownMethodError(HilalError, KeyError):
    """Calculation method id not in the method table."""


class UnknownMonthError(HilalError, KeyError):
    """Hijri month number outside 1-12."""
