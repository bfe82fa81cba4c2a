#
# Radixclock Message Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    return f"<type: {getattr(target_type, '__name__', str(target_type))}>"


def fmt_value(x: Any, *, max_repr: int = 120, ellipsis: str = "...") -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long reprs are truncated to max_repr characters, ellipsis included.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("abcdefgh", max_repr=6)
        "<str: 'ab...>"
    """
    type_name = type(x).__name__
    try:
        value_repr = repr(x)
    except Exception as e:
        value_repr = f"<{type_name} object (repr failed: {type(e).__name__})>"

    if len(value_repr) > max_repr:
        keep = max(max_repr - len(ellipsis), 0)
        value_repr = value_repr[:keep] + ellipsis
    return f"<{type_name}: {value_repr}>"
