"""
Layout segments for time formatters.

A layout is an ordered sequence of segments, each either a Literal piece of text
or a Value rendered through a UnitPlace. Segment is the union of the two kinds.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, TypeAlias

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value
from .units import UnitPlace
from .validators import ConfigurationError


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """A fixed piece of text, such as a ``:`` separator."""

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"literal text must be a str, but found {fmt_type(self.text)}")

    def render(self, total: Fraction | int) -> str:
        return self.text


@dataclass(frozen=True)
class Value:
    """A dynamic segment formatted using a UnitPlace."""

    place: UnitPlace

    def __post_init__(self):
        if not isinstance(self.place, UnitPlace):
            raise TypeError(f"value place must be a UnitPlace, but found {fmt_type(self.place)}")

    def render(self, total: Fraction | int) -> str:
        return self.place.render(total)


Segment: TypeAlias = Literal | Value


# Methods --------------------------------------------------------------------------------------------------------------

def as_segment(obj: Any) -> Segment:
    """
    Coerce obj into a Segment.

    Segments are returned unchanged, a str becomes a Literal, a UnitPlace becomes a
    Value, and a tuple is read by UnitPlace.from_spec() into a Value.

    Raises:
        ConfigurationError: If obj cannot describe a segment.

    Examples:
        >>> as_segment(":")
        Literal(text=':')
        >>> as_segment(("second", 1_000, 60)).place.label
        'second'
    """
    if isinstance(obj, (Literal, Value)):
        return obj
    if isinstance(obj, str):
        return Literal(obj)
    if isinstance(obj, UnitPlace):
        return Value(obj)
    if isinstance(obj, tuple):
        return Value(UnitPlace.from_spec(obj))
    raise ConfigurationError(f"cannot build a segment from {fmt_value(obj)}")
