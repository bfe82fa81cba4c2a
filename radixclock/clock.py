"""
Clock and time-of-day parsing for the command line.

Turns a user-supplied time of day, or the current time, into the number of
milliseconds elapsed since midnight.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from datetime import datetime, time, timedelta, timezone

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

# Tried in order; whitespace in a format matches one or more spaces, %p ignores case
TIME_FORMATS = (
    "%H:%M:%S",             # 00:34:59
    "%H:%M",                # 00:35
    "%I:%M:%S %p",          # 12:34:59 AM
    "%I:%M %p",             # 12:35 AM
    "%Hh %Mm %Ss",          # 12h 34m 59s
    "%Hh %Mm",              # 12h 35m
    "%Hh%Mm%Ss",            # 8h24m36s
    "%Hh%Mm",               # 8h24m
    "%Hh",                  # 12h
    "%I %p",                # 12 am
    "%I%p",                 # 4pm
    "%I%M %p",              # 1235 am
    "%I%M%p",               # 1235am
    "%H%M",                 # 1235
    "%a %b %d %H:%M:%S %Y",  # Sun Jul  8 00:34:59 2001
)

_MILLISECOND = timedelta(milliseconds=1)


# Methods --------------------------------------------------------------------------------------------------------------

def millis_of_day(t: time) -> int:
    """Return whole milliseconds from midnight to the wall-clock time t."""
    return ((t.hour * 60 + t.minute) * 60 + t.second) * 1000 + t.microsecond // 1000


def parse_time_of_day(text: str) -> int:
    """
    Parse a user-provided time of day into milliseconds since midnight.

    Attempts every entry of TIME_FORMATS, then ISO-8601 date/time. Any date part is
    ignored, and an ISO UTC offset is not applied: the wall-clock time is used as is.

    Raises:
        TypeError: If text is not a str.
        ValueError: If no format matches.

    Examples:
        >>> parse_time_of_day("4pm")
        57600000
        >>> parse_time_of_day("2001-07-08T00:34:59.026490+09:30")
        2099026
    """
    if not isinstance(text, str):
        raise TypeError(f"time of day must be a str, but found {fmt_type(text)}")

    when = text.strip()
    last_error = None
    for fmt in TIME_FORMATS:
        try:
            parsed = datetime.strptime(when, fmt)
        except ValueError as e:
            last_error = e
            continue
        logger.debug("Parsed %r with format %r", when, fmt)
        return millis_of_day(parsed.time())

    try:
        parsed = datetime.fromisoformat(when)
    except ValueError as e:
        last_error = e
    else:
        logger.debug("Parsed %r as ISO-8601", when)
        return millis_of_day(parsed.time())

    raise ValueError(f"unrecognized time of day {fmt_value(text)}: {last_error}")


def time_since_midnight(now: datetime) -> timedelta:
    """Return the wall-clock duration elapsed since the midnight of now's own day, in now's own zone."""
    if not isinstance(now, datetime):
        raise TypeError(f"now must be a datetime, but found {fmt_type(now)}")
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return now - midnight


def time_since_utc_midnight(now: datetime | None = None) -> timedelta:
    """Get the duration that has elapsed since midnight today, UTC."""
    return time_since_midnight(now if now is not None else datetime.now(timezone.utc))


def time_since_local_midnight(now: datetime | None = None) -> timedelta:
    """Get the duration that has elapsed since midnight today, in the system time zone."""
    return time_since_midnight(now if now is not None else datetime.now().astimezone())


def millis_since_midnight(now: datetime) -> int:
    """Return whole milliseconds elapsed since the midnight of now's own day."""
    return time_since_midnight(now) // _MILLISECOND
