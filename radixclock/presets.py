#
# Radixclock Formatter Presets
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique
from fractions import Fraction
from types import MappingProxyType
from typing import Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .formatter import TimeFormatter
from .segments import Literal, Value
from .tools import fmt_value
from .units import UnitPlace


# @formatter:off

# Misalian-Kunimunean snaps per millisecond, 36 * 36 * 36 * 6 snaps in a day
MK_BASE = Fraction(36 * 36 * 36 * 6, 86_400_000)
MK_SNAPS_PER_DAY = 36 * 36 * 36 * 6
MK_RADIX = 6

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class PresetName(StrEnum):
    """
    Names of the preconfigured formatters.

    Attributes:
        EXTENDED (str) : Misalian-Kunimunean lapse:lull:moment.snap - 31:44:45.4
        SPAN (str)     : Misalian-Kunimunean spans, three senary digits - 314
        SNAP (str)     : Misalian-Kunimunean snaps, seven senary digits - 3144454
        SI (str)       : Decimal hours:minutes:seconds.milliseconds - 13:11:53.888
    """
    EXTENDED = "extended"
    SPAN = "span"
    SNAP = "snap"
    SI = "si"


# Methods --------------------------------------------------------------------------------------------------------------

def mk_time_formatter() -> TimeFormatter:
    """Return a time formatter for Misalian-Kunimunean seximal units."""
    return TimeFormatter(
        MK_BASE,
        [
            Value(UnitPlace("lapse", 7776, 36, radix=MK_RADIX)),
            Literal(":"),
            Value(UnitPlace("lull", 216, 36, radix=MK_RADIX)),
            Literal(":"),
            Value(UnitPlace("moment", 6, 36, radix=MK_RADIX)),
            Literal("."),
            Value(UnitPlace("snap", 1, 6, width=0, radix=MK_RADIX)),
        ],
    )


def mk_span_time_formatter() -> TimeFormatter:
    """Return a time formatter for Misalian-Kunimunean spans, ``000`` to ``555``."""
    return TimeFormatter(MK_BASE, [Value(UnitPlace("span", 1296, 1296, width=3, radix=MK_RADIX))])


def mk_snap_time_formatter() -> TimeFormatter:
    """
    Return a time formatter for Misalian-Kunimunean snaps, ``0000000`` to ``5555555``.

    Same digits as the extended form without the delimiters: extended ``20:34:05.0``
    is basic ``2034050``.
    """
    return TimeFormatter(MK_BASE, [Value(UnitPlace("snap", 1, MK_SNAPS_PER_DAY, width=7, radix=MK_RADIX))])


def si_time_formatter() -> TimeFormatter:
    """Return a decimal hours:minutes:seconds.milliseconds formatter."""
    return TimeFormatter(
        1,
        [
            Value(UnitPlace("hour", 3_600_000, 24)),
            Literal(":"),
            Value(UnitPlace("minute", 60_000, 60)),
            Literal(":"),
            Value(UnitPlace("second", 1_000, 60)),
            Literal("."),
            Value(UnitPlace("millisecond", 1, 1_000, width=1, fraction=True)),
        ],
    )


PRESETS: Mapping[PresetName, TimeFormatter] = MappingProxyType({
    PresetName.EXTENDED: mk_time_formatter(),
    PresetName.SPAN: mk_span_time_formatter(),
    PresetName.SNAP: mk_snap_time_formatter(),
    PresetName.SI: si_time_formatter(),
})


def get_preset(name: str | PresetName) -> TimeFormatter:
    """
    Return the shared preset formatter by name.

    Raises:
        ValueError: If name is not a known preset.
    """
    try:
        return PRESETS[PresetName(name)]
    except ValueError:
        known = ", ".join(p.value for p in PresetName)
        raise ValueError(f"unknown preset {fmt_value(name)}, expected one of: {known}") from None
