#
# Radixclock Time Formatter
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from datetime import timedelta
from fractions import Fraction
from typing import Any, Iterable, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_millis
from .segments import Segment, Value, as_segment
from .tools import fmt_type, fmt_value
from .units import UnitPlace
from .validators import ConfigurationError, validate_int


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class TimeFormatter:
    """
    A system of units for formatting time expressions.

    Holds the base ratio, in base units per millisecond, and the segments to render
    in display order. Rendering multiplies the milliseconds by the base ratio into
    an exact Fraction total, and every segment reads that same total. Places are
    computed independently, there is no carry between them.

    The most significant Value segment does not wrap at its modulus unless
    wrap_leading is set, so a layout can show counts past its nominal range
    (e.g. more than 24 hours).

    Examples:
        >>> hm = TimeFormatter(1, [("hour", 3_600_000, 24), ":", ("minute", 60_000, 60)])
        >>> hm.render(7_679_092)
        '02:07'
    """

    base: Fraction
    segments: tuple[Segment, ...]
    wrap_leading: bool = False

    _leading: int | None = field(init=False, default=None, repr=False, compare=False)

    def __init__(
            self,
            base: Fraction | int | tuple[int, int],
            segments: Iterable[Segment | UnitPlace | str | tuple] = (),
            wrap_leading: bool = False,
    ):
        if not isinstance(wrap_leading, bool):
            raise TypeError(f"wrap_leading must be a bool, but found {fmt_type(wrap_leading)}")
        segments = tuple(as_segment(s) for s in segments)
        leading = next((i for i, s in enumerate(segments) if isinstance(s, Value)), None)

        object.__setattr__(self, "base", _parse_base(base))
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "wrap_leading", wrap_leading)
        object.__setattr__(self, "_leading", leading)

    @property
    def places(self) -> tuple[UnitPlace, ...]:
        """Unit places of the Value segments, in display order."""
        return tuple(s.place for s in self.segments if isinstance(s, Value))

    def total(self, ms: Any) -> Fraction:
        """Convert milliseconds to an exact total in base units."""
        return self.base * std_millis(ms)

    def render(self, ms: Any) -> str:
        """
        Render the given number of milliseconds, e.g. since the start of the day.

        Raises:
            TypeError: If ms is not an integer.
            ValueError: If ms is negative.
        """
        return "".join(self._fragments(self.total(ms)))

    def render_to(self, ms: Any, stream: TextIO) -> int:
        """Write the rendered milliseconds to a text stream, return the number of characters written."""
        total = self.total(ms)
        written = 0
        for fragment in self._fragments(total):
            stream.write(fragment)
            written += len(fragment)
        return written

    def render_timedelta(self, delta: timedelta) -> str:
        """Render a timedelta, truncated to whole milliseconds."""
        if not isinstance(delta, timedelta):
            raise TypeError(f"delta must be a timedelta, but found {fmt_type(delta)}")
        return self.render(delta // timedelta(milliseconds=1))

    def _fragments(self, total: Fraction) -> Iterable[str]:
        for i, segment in enumerate(self.segments):
            if isinstance(segment, Value) and i == self._leading and not self.wrap_leading:
                yield segment.place.render(total, bounded=False)
            else:
                yield segment.render(total)


# Private Methods ------------------------------------------------------------------------------------------------------

def _parse_base(base: Any) -> Fraction:
    """Normalize a base ratio given as a Fraction, an int, or a (numerator, denominator) pair."""
    if isinstance(base, tuple):
        if len(base) != 2:
            raise ConfigurationError(f"base must be a (numerator, denominator) pair, but found {fmt_value(base)}")
        numerator, denominator = base
        validate_int(numerator, name="base numerator")
        validate_int(denominator, name="base denominator")
        if denominator == 0:
            raise ConfigurationError(f"base denominator must be non-zero, but found {fmt_value(base)}")
        ratio = Fraction(numerator, denominator)
    elif isinstance(base, Fraction):
        ratio = base
    elif isinstance(base, int) and not isinstance(base, bool):
        ratio = Fraction(base)
    else:
        raise TypeError(f"base must be a Fraction, int or (numerator, denominator) tuple, but found {fmt_type(base)}")

    if ratio < 0:
        raise ConfigurationError(f"base must be non-negative, but found {fmt_value(base)}")
    return ratio
