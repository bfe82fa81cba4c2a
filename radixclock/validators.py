"""
Radixclock Configuration Validators

Checks applied to unit places, segments and formatters at construction time.
A formatter that was built successfully never fails while rendering, so every
configuration problem is reported here, eagerly, to the constructing caller.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class ConfigurationError(ValueError):
    """Invalid formatter configuration, e.g. a zero place value or a radix outside [2, 36]."""


# Methods --------------------------------------------------------------------------------------------------------------

def validate_int(value: Any, *, name: str = "value") -> int:
    """
    Validate value is a plain integer.

    Booleans are rejected even though bool is a subclass of int.

    Raises:
        TypeError: If value is not an int, or is a bool.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, but found {fmt_type(value)}")
    return value


def validate_positive(value: Any, *, name: str = "value", strict: bool = True) -> int:
    """
    Validate value is a positive integer (optionally allowing zero).

    Args:
        value: The value to validate.
        name: Name used in error messages.
        strict: If True, value must be > 0; if False, value must be >= 0.

    Returns:
        int: The original value if valid.

    Raises:
        TypeError: If value is not an int.
        ConfigurationError: If value violates the positivity constraint.
    """
    validate_int(value, name=name)
    if strict and value <= 0:
        raise ConfigurationError(f"{name} must be positive, but found {fmt_value(value)}")
    if not strict and value < 0:
        raise ConfigurationError(f"{name} must be non-negative, but found {fmt_value(value)}")
    return value


def validate_range(
        value: Any,
        min_value: int | None = None,
        max_value: int | None = None,
        *,
        name: str = "value",
) -> int:
    """
    Validate an integer falls within the specified bounds, inclusive.

    Raises:
        TypeError: If value is not an int.
        ConfigurationError: If value is outside [min_value, max_value].
    """
    validate_int(value, name=name)
    if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
        lo = "-inf" if min_value is None else min_value
        hi = "inf" if max_value is None else max_value
        raise ConfigurationError(f"{name} must be in range [{lo}, {hi}], but found {fmt_value(value)}")
    return value
