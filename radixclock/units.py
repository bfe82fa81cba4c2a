#
# Radixclock Unit Places
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from fractions import Fraction
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .digits import digits_conf, fraction_digits, is_radix_power, radix_digits
from .tools import fmt_type, fmt_value
from .validators import ConfigurationError, validate_positive, validate_range


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitPlace:
    """
    One place of a mixed-radix time representation.

    A place is only meaningful relative to a base unit, the unit that the
    formatter's base ratio converts milliseconds into. One increment of this place
    stands for ``place_value`` base units, and the place cycles through ``modulus``
    values before the next coarser place increments.

    Attributes:
        label (str)       : Name of the unit, documentation only.
        place_value (int) : Base units per one increment of this place, > 0.
        modulus (int)     : Distinct digit values before carrying; 0 means no wraparound.
        width (int)       : Minimum rendered digit count.
        radix (int)       : Display radix, from 2 to 36.
        fraction (bool)   : Render as digits after a radix point, trailing zeros trimmed;
                            requires modulus to be a power of radix.

    Whether the places of a layout form a consistent decomposition of the base unit
    (``place_value`` of a place equal to ``modulus * place_value`` of the next finer
    one) is up to the caller and is not checked.

    Examples:
        >>> minute = UnitPlace("minute", 60_000, 60)
        >>> minute.render(Fraction(7_679_092))
        '07'
    """

    label: str
    place_value: int
    modulus: int
    width: int = digits_conf.DEFAULT_WIDTH
    radix: int = digits_conf.DEFAULT_RADIX
    fraction: bool = False

    def __post_init__(self):
        if not isinstance(self.label, str):
            raise TypeError(f"label must be a str, but found {fmt_type(self.label)}")
        validate_positive(self.place_value, name="place_value")
        validate_positive(self.modulus, name="modulus", strict=False)
        validate_positive(self.width, name="width", strict=False)
        validate_range(self.radix, digits_conf.MIN_RADIX, digits_conf.MAX_RADIX, name="radix")
        if not isinstance(self.fraction, bool):
            raise TypeError(f"fraction must be a bool, but found {fmt_type(self.fraction)}")
        if self.fraction and self.modulus == 0:
            raise ConfigurationError(f"fractional place {fmt_value(self.label)} requires a non-zero modulus")
        if self.fraction and not is_radix_power(self.modulus, self.radix):
            raise ConfigurationError(
                f"fractional place {fmt_value(self.label)} requires a modulus that is a power of radix {self.radix}, "
                f"but found {fmt_value(self.modulus)}"
            )

    @classmethod
    def from_spec(cls, spec: tuple) -> Self:
        """Create a place from a short tuple form.

        Accepted forms:
            (label, place_value, modulus)
            (radix, label, place_value, modulus)
            (label, place_value, modulus, width)
            (radix, label, place_value, modulus, width)

        A leading int is the radix; otherwise the radix defaults to 10. The width
        defaults to 2.

        Examples:
            >>> UnitPlace.from_spec((6, "snap", 1, 6, 0))
            UnitPlace(label='snap', place_value=1, modulus=6, width=0, radix=6, fraction=False)
        """
        if not isinstance(spec, tuple):
            raise TypeError(f"spec must be a tuple, but found {fmt_type(spec)}")

        if len(spec) in (4, 5) and isinstance(spec[0], int) and not isinstance(spec[0], bool):
            radix, *rest = spec
        else:
            radix, rest = digits_conf.DEFAULT_RADIX, list(spec)

        if len(rest) == 3:
            label, place_value, modulus = rest
            width = digits_conf.DEFAULT_WIDTH
        elif len(rest) == 4:
            label, place_value, modulus, width = rest
        else:
            raise ConfigurationError(f"unit place spec must have 3 to 5 items, but found {fmt_value(spec)}")

        return cls(label, place_value, modulus, width=width, radix=radix)

    @property
    def is_bounded(self) -> bool:
        """True if this place wraps around at its modulus."""
        return self.modulus != 0

    def digit(self, total: Fraction | int, *, bounded: bool = True) -> int:
        """
        Extract this place's digit value from a total expressed in base units.

        digit = floor(total / place_value) mod modulus

        The total stays exact until this single truncation, so no rounding error
        carries over from other places. With bounded=False, or a modulus of 0, the
        digit is not wrapped; fractional places always wrap.
        """
        value = total // self.place_value
        if self.modulus and (bounded or self.fraction):
            value %= self.modulus
        return int(value)

    def render_digit(self, value: int) -> str:
        """Render an already extracted digit value."""
        if self.fraction:
            return fraction_digits(value, self.radix, self.modulus, self.width)
        return radix_digits(value, self.radix, self.width)

    def render(self, total: Fraction | int, *, bounded: bool = True) -> str:
        """Extract and render this place's digit from a total in base units."""
        return self.render_digit(self.digit(total, bounded=bounded))
