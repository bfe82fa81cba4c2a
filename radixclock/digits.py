#
# Radixclock Digit Rendering
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_value
from .validators import ConfigurationError, validate_int, validate_range


# @formatter:off

class DigitsConf:
    ALPHABET: Final = "0123456789abcdefghijklmnopqrstuvwxyz"
    MIN_RADIX: Final = 2
    MAX_RADIX: Final = 36
    DEFAULT_RADIX: Final = 10
    DEFAULT_WIDTH: Final = 2


digits_conf = DigitsConf()
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def radix_digits(value: int, radix: int = digits_conf.DEFAULT_RADIX, width: int = 0) -> str:
    """
    Render a non-negative integer in the given radix, left-padded with zeros.

    Digits are lowercase, ``0``-``9`` then ``a``-``z``. The width is a floor, not
    a cap: a representation longer than width is never truncated. Zero renders
    as a single ``"0"`` before padding.

    Args:
        value: Non-negative integer to render.
        radix: Digit alphabet size, from 2 to 36.
        width: Minimum number of rendered digits.

    Returns:
        str: The padded digit string.

    Raises:
        TypeError: If an argument is not an int.
        ValueError: If value or width is negative.
        ConfigurationError: If radix is outside [2, 36].

    Examples:
        >>> radix_digits(39, 8, 3)
        '047'
        >>> radix_digits(255, 16)
        'ff'
        >>> radix_digits(0, 6, 0)
        '0'
    """
    validate_int(value, name="value")
    validate_range(radix, digits_conf.MIN_RADIX, digits_conf.MAX_RADIX, name="radix")
    validate_int(width, name="width")
    if value < 0:
        raise ValueError(f"value must be non-negative, but found {fmt_value(value)}")
    if width < 0:
        raise ValueError(f"width must be non-negative, but found {fmt_value(width)}")

    if value == 0:
        return "0".rjust(width, "0")

    alphabet = digits_conf.ALPHABET
    out = []
    while value:
        value, rem = divmod(value, radix)
        out.append(alphabet[rem])
    return "".join(reversed(out)).rjust(width, "0")


def fraction_digits(value: int, radix: int, modulus: int, width: int = 1) -> str:
    """
    Render a digit as the digits after a radix point.

    The value is read as ``value / modulus``, so modulus must be a power of the
    radix: only then are the digits of value, left-padded to the digit count of
    ``modulus - 1``, the exact digits after the point. Trailing zeros are trimmed,
    keeping at least one digit, and the result is right-padded with zeros to at
    least width digits.

    Raises:
        ConfigurationError: If modulus is not a power of radix.
        ValueError: If value is outside [0, modulus).

    Examples:
        >>> fraction_digits(92, 10, 1000)
        '092'
        >>> fraction_digits(500, 10, 1000)
        '5'
        >>> fraction_digits(0, 10, 1000, width=3)
        '000'
    """
    validate_range(modulus, 1, name="modulus")
    if not is_radix_power(modulus, radix):
        raise ConfigurationError(f"modulus must be a power of radix {radix}, but found {fmt_value(modulus)}")
    if not 0 <= value < modulus:
        raise ValueError(f"value must be in range [0, {modulus}), but found {fmt_value(value)}")
    full_width = len(radix_digits(modulus - 1, radix))
    digits = radix_digits(value, radix, full_width).rstrip("0") or "0"
    return digits.ljust(width, "0")


def is_radix_power(n: int, radix: int) -> bool:
    """True if n == radix ** k for some k >= 0."""
    while n > 1 and n % radix == 0:
        n //= radix
    return n == 1


def parse_digits(text: str, radix: int = digits_conf.DEFAULT_RADIX) -> int:
    """
    Read back a digit string produced by radix_digits().

    Raises:
        ValueError: If text contains characters outside the radix alphabet.

    Examples:
        >>> parse_digits("047", 8)
        39
    """
    validate_range(radix, digits_conf.MIN_RADIX, digits_conf.MAX_RADIX, name="radix")
    allowed = digits_conf.ALPHABET[:radix]
    if not text or any(ch not in allowed for ch in text.lower()):
        raise ValueError(f"not a radix-{radix} digit string: {fmt_value(text)}")
    return int(text, radix)
