"""Tests for the narrow style of format_duration()."""

import pytest

from chronofmt.core.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_YEAR
from chronofmt.duration.formatter import DurationFormatter, format_duration

NARROW = DurationFormatter().narrow


class TestNarrowDefaults:
    """Default narrow output."""

    @pytest.mark.parametrize(
        ("magnitude", "expected"),
        [
            (-4_443_454, "1h14m03.454s"),
            (968_588_820, "11d05h03m08.820s"),
            (982_440_990, "11d08h54m00.990s"),
            (3454, "3.454s"),
            (455, "0.455s"),
            (1, "0.001s"),
            (0, "0.000s"),
        ],
    )
    def test_defaults(self, magnitude: float, expected: str) -> None:
        assert format_duration(magnitude, "narrow") == expected

    def test_half_century(self) -> None:
        assert NARROW.format(-1_760_451_163_065) == "55y286d20h12m43.065s"

    def test_minutes_without_hours_not_padded(self) -> None:
        """Leading zeros cascade down to the most significant unit."""
        assert NARROW.format(3 * MS_PER_MINUTE + 5000) == "3m05.000s"


class TestNarrowFractionalDigits:
    """Fraction truncation in the narrow style."""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            (3, "3.454s"),
            (6, "3.454345s"),
            (9, "3.454345898s"),
            (7, "3.4543458s"),
            (1, "3.4s"),
            (2, "3.45s"),
        ],
    )
    def test_subsecond_sample(self, digits: int, expected: str) -> None:
        assert NARROW.fractional_digits(digits).format(3454.345898) == expected

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [(9, "3m03.454345897s"), (7, "3m03.4543458s"), (1, "3m03.4s")],
    )
    def test_with_minutes(self, digits: int, expected: str) -> None:
        magnitude = 3454.345898 + 3 * MS_PER_MINUTE
        assert NARROW.digits(digits).format(magnitude) == expected

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [(9, "8h03m03.454345897s"), (7, "8h03m03.4543458s"), (1, "8h03m03.4s")],
    )
    def test_with_hours(self, digits: int, expected: str) -> None:
        magnitude = 3454.345898 + 3 * MS_PER_MINUTE + 8 * MS_PER_HOUR
        assert NARROW.digits(digits).format(magnitude) == expected


class TestNarrowYears:
    """Years in the narrow style."""

    def test_one_year(self) -> None:
        assert NARROW.format(MS_PER_YEAR) == "1y00.000s"

    def test_year_and_days(self) -> None:
        assert NARROW.format(MS_PER_YEAR + 5 * MS_PER_DAY) == "1y5d00.000s"

    def test_fractional_years(self) -> None:
        assert NARROW.format(2.5 * MS_PER_YEAR) == "2y182d15h00m00.000s"
        assert NARROW.format(1.5 * MS_PER_YEAR) == "1y182d15h00m00.000s"

    def test_century(self) -> None:
        assert NARROW.format(100 * MS_PER_YEAR) == "100y00.000s"


class TestNarrowUnitBounds:
    """min_unit and max_unit in the narrow style."""

    def test_min_unit_seconds_drops_fraction_digits(self) -> None:
        assert NARROW.min("seconds").format(-4_443_454) == "1h14m03.000s"

    def test_max_unit_hours_folds_days(self) -> None:
        assert NARROW.max("hours").format(2 * MS_PER_DAY + 3 * MS_PER_HOUR) == "51h00m00.000s"

    def test_max_unit_minutes(self) -> None:
        assert NARROW.max("minutes").format(-4_443_454) == "74m03.454s"
