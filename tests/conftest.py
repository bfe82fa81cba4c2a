#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from radixclock.formatter import TimeFormatter
from radixclock.segments import Literal, Value
from radixclock.units import UnitPlace

MK_BASE = (279_936, 86_400_000)


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def hms_formatter() -> TimeFormatter:
    """Decimal h:m:s.ms layout at 1 unit/ms."""
    return TimeFormatter(
        (1, 1),
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


@pytest.fixture
def senary_formatter() -> TimeFormatter:
    """Six-valued lapse:lull:moment.snap layout at 279936 snaps per day."""
    return TimeFormatter(
        MK_BASE,
        [
            (6, "lapse", 7776, 36),
            ":",
            (6, "lull", 216, 36),
            ":",
            (6, "moment", 6, 36),
            ".",
            (6, "snap", 1, 6, 0),
        ],
    )
