"""
Radixclock CLI

Usage:
    radixclock                  current UTC time, extended form
    radixclock --local --span   current local time as a span
    radixclock "4pm" --basic    a given time of day as snaps
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
from datetime import timedelta
from importlib.metadata import PackageNotFoundError, version as metadata_version

# Local ----------------------------------------------------------------------------------------------------------------
from .clock import parse_time_of_day, time_since_local_midnight, time_since_utc_midnight
from .presets import PresetName, get_preset

logger = logging.getLogger(__name__)

_MILLISECOND_DELTA = timedelta(milliseconds=1)


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixclock",
        description="Display the time of day in Misalian-Kunimunean seximal units.",
    )
    parser.add_argument(
        "when", nargs="?", default=None,
        help="What time to display, defaults to the current time. Accepts e.g. `00:34:59`, "
             "`12:34:59 AM`, `4pm`, `6h 45m`, `8h24m36s`, ISO-8601 and ctime formats; the date is ignored.",
    )
    parser.add_argument(
        "-b", "--basic", action="store_true",
        help="Display the current snap: the extended form without delimiters, seven digits, 0000000 to 5555555.",
    )
    parser.add_argument("--snap", action="store_true", help="Alias of --basic.")
    parser.add_argument(
        "-s", "--span", action="store_true",
        help="Display the number of spans elapsed since midnight, three digits, 000 to 555.",
    )
    parser.add_argument("--si", action="store_true", help="Display decimal hours:minutes:seconds.milliseconds.")
    parser.add_argument("-l", "--local", action="store_true", help="Use system time zone instead of UTC.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def select_preset(args: argparse.Namespace) -> PresetName:
    """Pick the preset from parsed flags: --span, then --basic/--snap, then --si, else extended."""
    if args.span:
        return PresetName.SPAN
    if args.basic or args.snap:
        return PresetName.SNAP
    if args.si:
        return PresetName.SI
    return PresetName.EXTENDED


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.when is not None:
        try:
            ms = parse_time_of_day(args.when)
        except ValueError as e:
            parser.error(str(e))
    elif args.local:
        ms = time_since_local_midnight() // _MILLISECOND_DELTA
    else:
        ms = time_since_utc_midnight() // _MILLISECOND_DELTA

    preset = select_preset(args)
    logger.debug("Rendering %d ms with preset %r", ms, preset.value)
    print(get_preset(preset).render(ms))
    return 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _package_version() -> str:
    try:
        return metadata_version("radixclock")
    except PackageNotFoundError:
        return "unknown"
