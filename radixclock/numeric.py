"""
Standardize millisecond inputs for rendering.

Accepts Python ints and anything implementing ``__index__`` (NumPy integers and
the like), plus whole-valued float, Decimal and Fraction values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def std_millis(value: Any, *, name: str = "ms") -> int:
    """
    Convert a millisecond count to a non-negative Python int.

    Detection priority:
        1. bool is rejected, it is almost always a bug at a call site.
        2. __index__() gives an exact int.
        3. float, Decimal and Fraction are accepted when whole-valued.

    Raises:
        TypeError: For bool and unsupported types (str, None, list, ...).
        ValueError: For negative, non-finite or non-whole values.

    Examples:
        >>> std_millis(1500)
        1500
        >>> std_millis(Fraction(3000, 2))
        1500
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, but found {fmt_type(value)}")

    if hasattr(type(value), "__index__"):
        ms = operator.index(value)
    elif isinstance(value, (float, Decimal, Fraction)):
        if not isinstance(value, Fraction) and not math.isfinite(value):
            raise ValueError(f"{name} must be finite, but found {fmt_value(value)}")
        if value != int(value):
            raise ValueError(f"{name} must be a whole number of milliseconds, but found {fmt_value(value)}")
        ms = int(value)
    else:
        raise TypeError(f"{name} must be an integer, but found {fmt_type(value)}")

    if ms < 0:
        raise ValueError(f"{name} must be non-negative, but found {fmt_value(value)}")
    return ms
