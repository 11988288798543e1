"""Tests for the digital style of format_duration()."""

import math

import pytest

from chronofmt.core.config import FormatOptions
from chronofmt.core.units import MS_PER_DAY, MS_PER_MINUTE, MS_PER_YEAR
from chronofmt.duration.formatter import DurationFormatter, format_duration


class TestDigitalDefaults:
    """Default digital output."""

    @pytest.mark.parametrize(
        ("magnitude", "expected"),
        [
            (-4_443_454, "1:14:03.454"),
            (968_588_820, "11d05:03:08.820"),
            (982_440_990, "11d08:54:00.990"),
            (3454, "00:03.454"),
            (455, "00:00.455"),
            (1, "00:00.001"),
            (0, "00:00.000"),
        ],
    )
    def test_defaults(self, magnitude: float, expected: str) -> None:
        assert format_duration(magnitude) == expected

    def test_style_argument(self) -> None:
        assert format_duration(-4_443_454, "digital") == "1:14:03.454"

    def test_sign_ignored(self) -> None:
        assert format_duration(-982_440_990) == format_duration(982_440_990)


class TestDigitalFractionalDigits:
    """Fraction truncation in the digital style."""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            (6, "00:03.454345"),
            (9, "00:03.454345898"),
            (7, "00:03.4543458"),
            (1, "00:03.4"),
            (2, "00:03.45"),
        ],
    )
    def test_subsecond_sample(self, digits: int, expected: str) -> None:
        assert DurationFormatter().digital.fractional_digits(digits).format(3454.345898) == expected

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            (6, "03:03.454345"),
            (9, "03:03.454345897"),
            (7, "03:03.4543458"),
            (1, "03:03.4"),
            (2, "03:03.45"),
        ],
    )
    def test_with_minutes(self, digits: int, expected: str) -> None:
        magnitude = 3454.345898 + 3 * MS_PER_MINUTE
        assert format_duration(magnitude, fractional_digits=digits) == expected

    def test_zero_digits_drops_fraction(self) -> None:
        assert format_duration(3454, fractional_digits=0) == "00:03"

    def test_digits_beyond_nanoseconds_padded(self) -> None:
        assert format_duration(3454, fractional_digits=11) == "00:03.45400000000"

    def test_truncates_not_rounds(self) -> None:
        assert format_duration(999, fractional_digits=1) == "00:00.9"


class TestDigitalYears:
    """Years and days prefixes in the digital style."""

    def test_one_year(self) -> None:
        assert format_duration(MS_PER_YEAR) == "1y00:00.000"

    def test_year_and_days(self) -> None:
        assert format_duration(MS_PER_YEAR + 5 * MS_PER_DAY) == "1y5d00:00.000"

    def test_fractional_years(self) -> None:
        assert format_duration(2.5 * MS_PER_YEAR) == "2y182d15:00:00.000"


class TestDigitalSeparators:
    """Separator overrides in the digital style."""

    def test_hours_minutes_separator(self) -> None:
        opts = FormatOptions(hours_minutes_separator="h", minutes_seconds_separator="m")
        assert format_duration(-4_443_454, options=opts) == "1h14m03.454"

    def test_seconds_unit(self) -> None:
        assert format_duration(3454, seconds_unit="s") == "00:03.454s"

    def test_day_separator(self) -> None:
        assert format_duration(982_440_990, days_hours_separator=" days ") == "11 days 08:54:00.990"


class TestDigitalNonFinite:
    """NaN and infinities never raise."""

    @pytest.mark.parametrize("magnitude", [math.nan, math.inf, -math.inf])
    def test_does_not_raise(self, magnitude: float) -> None:
        assert isinstance(format_duration(magnitude), str)

    def test_nan_rendered(self) -> None:
        assert "nan" in format_duration(math.nan)
