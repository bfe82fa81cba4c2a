#
# Radixclock - Time Formatter Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import io
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from radixclock.digits import radix_digits
from radixclock.formatter import TimeFormatter
from radixclock.segments import Literal, Value
from radixclock.units import UnitPlace
from radixclock.validators import ConfigurationError


def senary_reference(ms: int) -> str:
    """Successive integer division of a total truncated right after the base conversion."""
    remaining = ms * 279_936 // 86_400_000
    snaps = remaining % 6
    remaining //= 6
    moments = remaining % 36
    remaining //= 36
    lulls = remaining % 36
    lapses = remaining // 36
    return (f"{radix_digits(lapses, 6, 2)}:{radix_digits(lulls, 6, 2)}:"
            f"{radix_digits(moments, 6, 2)}.{radix_digits(snaps, 6, 0)}")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDecimalLayout:

    @pytest.mark.parametrize(
        "ms, expected",
        [
            pytest.param(0, "00:00:00.0", id="midnight"),
            pytest.param(7_679_092, "02:07:59.092", id="early"),
            pytest.param(49_029_000, "13:37:09.0", id="whole-second"),
            pytest.param(49_029_500, "13:37:09.5", id="half-second"),
            pytest.param(86_399_999, "23:59:59.999", id="last-ms-of-day"),
            pytest.param(90_000_000, "25:00:00.0", id="past-a-day"),
        ],
    )
    def test_render(self, hms_formatter, ms, expected):
        assert hms_formatter.render(ms) == expected

    def test_wrap_leading(self, hms_formatter):
        wrapped = TimeFormatter(hms_formatter.base, hms_formatter.segments, wrap_leading=True)
        assert wrapped.render(90_000_000) == "01:00:00.0"
        assert wrapped.render(7_679_092) == "02:07:59.092"


class TestSenaryLayout:

    @pytest.mark.parametrize(
        "ms, expected",
        [
            pytest.param(0, "00:00:00.0", id="midnight"),
            pytest.param(47_521_888, "31:44:45.4", id="afternoon"),
            pytest.param(81_218_884, "53:50:14.1", id="evening"),
            pytest.param(130_967_197, "130:32:30.1", id="past-a-day"),
        ],
    )
    def test_render(self, senary_formatter, ms, expected):
        assert senary_formatter.render(ms) == expected

    @pytest.mark.parametrize(
        "ms, expected",
        [
            pytest.param(2_399_999, "00:55:55.5", id="before-first-lapse"),
            pytest.param(2_400_000, "01:00:00.0", id="first-lapse"),
            pytest.param(199_999, "00:02:55.5", id="before-third-lull"),
            pytest.param(200_000, "00:03:00.0", id="third-lull"),
        ],
    )
    def test_carry_at_boundaries(self, senary_formatter, ms, expected):
        assert senary_formatter.render(ms) == expected

    @pytest.mark.parametrize(
        "start",
        [
            pytest.param(199_900, id="lull"),
            pytest.param(2_399_900, id="lapse"),
            pytest.param(43_199_900, id="noon"),
            pytest.param(86_399_800, id="end-of-day"),
        ],
    )
    def test_agrees_with_integer_reference_near_boundaries(self, senary_formatter, start):
        for ms in range(start, start + 200):
            assert senary_formatter.render(ms) == senary_reference(ms)

    def test_agrees_with_integer_reference_across_day(self, senary_formatter):
        for ms in range(0, 86_400_000, 86_413):
            assert senary_formatter.render(ms) == senary_reference(ms)


class TestTimeFormatterProperties:

    @pytest.mark.parametrize("ms", [0, 1, 999, 47_521_888, 86_399_999, 10 ** 12])
    def test_output_length(self, senary_formatter, ms):
        total = senary_formatter.total(ms)
        expected = 0
        for i, segment in enumerate(senary_formatter.segments):
            if isinstance(segment, Literal):
                expected += len(segment.text)
            else:
                place = segment.place
                natural = len(radix_digits(place.digit(total, bounded=i != 0), place.radix))
                expected += max(place.width, natural)
        assert len(senary_formatter.render(ms)) == expected

    def test_deterministic(self, senary_formatter):
        first = senary_formatter.render(47_521_888)
        assert all(senary_formatter.render(47_521_888) == first for _ in range(10))

    def test_concurrent_renders(self, senary_formatter):
        values = list(range(0, 86_400_000, 1_000_003))
        with ThreadPoolExecutor(max_workers=4) as pool:
            rendered = list(pool.map(senary_formatter.render, values))
        assert rendered == [senary_formatter.render(ms) for ms in values]

    def test_frozen(self, senary_formatter):
        with pytest.raises(dataclasses.FrozenInstanceError):
            senary_formatter.base = Fraction(1)

    def test_equal_and_hashable(self):
        a = TimeFormatter((1, 1), [("second", 1_000, 60)])
        b = TimeFormatter(1, [Value(UnitPlace("second", 1_000, 60))])
        assert a == b
        assert hash(a) == hash(b)

    def test_places(self, senary_formatter):
        assert [p.label for p in senary_formatter.places] == ["lapse", "lull", "moment", "snap"]

    def test_literals_only(self):
        assert TimeFormatter(1, ["no", "-", "places"]).render(123) == "no-places"

    def test_empty_layout(self):
        assert TimeFormatter(1).render(123) == ""

    def test_leading_is_first_value_not_first_segment(self):
        formatter = TimeFormatter(1, ["T+", ("hour", 3_600_000, 24), "h"])
        assert formatter.render(90_000_000) == "T+25h"


class TestTimeFormatterBase:

    @pytest.mark.parametrize(
        "base",
        [
            pytest.param(Fraction(279_936, 86_400_000), id="fraction"),
            pytest.param((279_936, 86_400_000), id="tuple"),
            pytest.param((81, 25_000), id="reduced-tuple"),
        ],
    )
    def test_base_forms(self, base):
        assert TimeFormatter(base).base == Fraction(81, 25_000)

    def test_int_base(self):
        assert TimeFormatter(3).base == Fraction(3)

    def test_total_is_exact(self):
        assert TimeFormatter((279_936, 86_400_000)).total(47_521_888) == Fraction(47_521_888 * 81, 25_000)

    def test_zero_base(self):
        formatter = TimeFormatter(0, [("x", 1, 10)])
        assert formatter.render(10 ** 9) == "00"

    @pytest.mark.parametrize(
        "base, exc",
        [
            pytest.param((1, 0), ConfigurationError, id="zero-denominator"),
            pytest.param((-1, 2), ConfigurationError, id="negative"),
            pytest.param(Fraction(-1, 2), ConfigurationError, id="negative-fraction"),
            pytest.param((1, 2, 3), ConfigurationError, id="triple"),
            pytest.param((1.0, 2), TypeError, id="float-numerator"),
            pytest.param(1.5, TypeError, id="float"),
            pytest.param(True, TypeError, id="bool"),
            pytest.param(None, TypeError, id="none"),
        ],
    )
    def test_invalid_base(self, base, exc):
        with pytest.raises(exc):
            TimeFormatter(base)

    def test_invalid_wrap_leading(self):
        with pytest.raises(TypeError):
            TimeFormatter(1, wrap_leading=1)

    def test_invalid_segment(self):
        with pytest.raises(ConfigurationError):
            TimeFormatter(1, [":", 42])

    def test_sexagesimal_fraction_place_rejected(self):
        with pytest.raises(ConfigurationError, match="power of radix"):
            TimeFormatter(1, [("minute", 60_000, 0), ".", UnitPlace("second", 1_000, 60, width=1, fraction=True)])


class TestTimeFormatterInput:

    @pytest.mark.parametrize(
        "ms",
        [
            pytest.param(7_679_092.0, id="whole-float"),
            pytest.param(Decimal("7679092"), id="decimal"),
            pytest.param(Fraction(15_358_184, 2), id="fraction"),
        ],
    )
    def test_whole_values_accepted(self, hms_formatter, ms):
        assert hms_formatter.render(ms) == "02:07:59.092"

    @pytest.mark.parametrize(
        "ms, exc",
        [
            pytest.param(-1, ValueError, id="negative"),
            pytest.param(1.5, ValueError, id="fractional-float"),
            pytest.param(float("nan"), ValueError, id="nan"),
            pytest.param("5", TypeError, id="str"),
            pytest.param(None, TypeError, id="none"),
            pytest.param(True, TypeError, id="bool"),
        ],
    )
    def test_invalid_ms(self, hms_formatter, ms, exc):
        with pytest.raises(exc):
            hms_formatter.render(ms)


class TestTimeFormatterOutputs:

    def test_render_to(self, hms_formatter):
        stream = io.StringIO()
        written = hms_formatter.render_to(7_679_092, stream)
        assert stream.getvalue() == "02:07:59.092"
        assert written == len("02:07:59.092")

    def test_render_to_invalid_writes_nothing(self, hms_formatter):
        stream = io.StringIO()
        with pytest.raises(ValueError):
            hms_formatter.render_to(-5, stream)
        assert stream.getvalue() == ""

    def test_render_timedelta(self, hms_formatter):
        delta = timedelta(hours=2, minutes=7, seconds=59, milliseconds=92)
        assert hms_formatter.render_timedelta(delta) == "02:07:59.092"

    def test_render_timedelta_truncates_microseconds(self, hms_formatter):
        assert hms_formatter.render_timedelta(timedelta(microseconds=1_999)) == "00:00:00.001"

    def test_render_timedelta_negative(self, hms_formatter):
        with pytest.raises(ValueError):
            hms_formatter.render_timedelta(timedelta(seconds=-1))

    def test_render_timedelta_type(self, hms_formatter):
        with pytest.raises(TypeError):
            hms_formatter.render_timedelta(1_000)
