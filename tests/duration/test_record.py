"""Tests for DurationRecord decomposition and pruning."""

import math

import pytest

from chronofmt.core.units import FIELDS, MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_YEAR
from chronofmt.duration.record import DurationRecord


def _fields(record: DurationRecord) -> dict[str, float]:
    return {name: value for name, value in record.items() if value}


class TestDecomposition:
    """Tests for building a record from milliseconds."""

    def test_zero(self) -> None:
        record = DurationRecord(0)
        assert record.is_zero()
        assert record.total_ms == 0

    def test_default_is_zero(self) -> None:
        assert DurationRecord().is_zero()

    def test_milliseconds_only(self) -> None:
        assert _fields(DurationRecord(1)) == {"milliseconds": 1}

    def test_seconds_and_milliseconds(self) -> None:
        assert _fields(DurationRecord(2345)) == {"seconds": 2, "milliseconds": 345}

    def test_sign_dropped(self) -> None:
        """Negative magnitudes decompose like their absolute value."""
        record = DurationRecord(-4_443_454)
        assert record.total_ms == 4_443_454
        assert _fields(record) == {"hours": 1, "minutes": 14, "seconds": 3, "milliseconds": 454}

    def test_subsecond_fields(self) -> None:
        """Microseconds and nanoseconds come from the sub-millisecond fraction."""
        record = DurationRecord(3454.345898)
        assert _fields(record) == {
            "seconds": 3,
            "milliseconds": 454,
            "microseconds": 345,
            "nanoseconds": 898,
        }

    @pytest.mark.parametrize(
        ("days", "hours", "minutes", "seconds", "ms", "us", "ns"),
        [
            (0, 0, 0, 2, 345, 0, 0),
            (0, 1, 1, 1, 1, 1, 1),
            (3, 23, 59, 59, 999, 999, 999),
        ],
    )
    def test_every_unit(
        self, days: int, hours: int, minutes: int, seconds: int, ms: int, us: int, ns: int
    ) -> None:
        magnitude = (
            (days * 24 * 3600 + hours * 3600 + minutes * 60 + seconds) * 1000
            + ms
            + us / 1000
            + ns / 1_000_000
        )
        record = DurationRecord(magnitude)
        assert record.to_dict() == {
            "years": 0,
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds,
            "milliseconds": ms,
            "microseconds": us,
            "nanoseconds": ns,
        }

    def test_years_and_days(self) -> None:
        """Days stay whole once the fractional year is split off."""
        record = DurationRecord(2.5 * MS_PER_YEAR)
        assert record.years == 2
        assert record.days == 182
        assert record.hours == 15
        assert record.minutes == 0

    def test_half_century(self) -> None:
        record = DurationRecord(-1_760_451_163_065)
        assert _fields(record) == {
            "years": 55,
            "days": 286,
            "hours": 20,
            "minutes": 12,
            "seconds": 43,
            "milliseconds": 65,
        }

    def test_from_ms_alias(self) -> None:
        assert DurationRecord.from_ms(2345) == DurationRecord(2345)

    @pytest.mark.parametrize("magnitude", [math.nan, math.inf, -math.inf])
    def test_non_finite_does_not_raise(self, magnitude: float) -> None:
        """NaN and infinities propagate into the fields."""
        record = DurationRecord(magnitude)
        assert not math.isfinite(record.years)
        assert not record.is_zero()


class TestFromFields:
    """Tests for DurationRecord.from_fields."""

    def test_keyword_fields(self) -> None:
        record = DurationRecord.from_fields(hours=1, minutes=30)
        assert record.hours == 1
        assert record.minutes == 30
        assert record.total_ms == 90 * MS_PER_MINUTE

    def test_mapping_fields_include_years(self) -> None:
        record = DurationRecord.from_fields({"years": 1, "days": 2})
        assert record.total_ms == MS_PER_YEAR + 2 * MS_PER_DAY

    def test_values_kept_as_given(self) -> None:
        """from_fields does not normalize, so 90 minutes stay 90 minutes."""
        record = DurationRecord.from_fields(minutes=90)
        assert record.minutes == 90
        assert record.hours == 0

    def test_unknown_keys_ignored(self) -> None:
        record = DurationRecord.from_fields({"weeks": 3, "seconds": 5})
        assert _fields(record) == {"seconds": 5}


class TestFieldAccess:
    """Tests for get_field/set_field and helpers."""

    def test_get_unknown_field_is_zero(self) -> None:
        assert DurationRecord(5000).get_field("weeks") == 0

    def test_set_unknown_field_is_noop(self) -> None:
        record = DurationRecord(5000)
        record.set_field("weeks", 3)
        assert _fields(record) == {"seconds": 5}

    def test_non_zero_fields(self) -> None:
        assert DurationRecord(3_661_000).non_zero_fields() == ["hours", "minutes", "seconds"]

    def test_items_in_field_order(self) -> None:
        assert [name for name, _ in DurationRecord(1).items()] == list(FIELDS)

    def test_copy_is_independent(self) -> None:
        record = DurationRecord(3_661_000)
        clone = record.copy()
        clone.prune_adaptive(1)
        assert clone != record
        assert record.minutes == 1

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(DurationRecord(1))

    def test_repr(self) -> None:
        assert repr(DurationRecord(0)) == "DurationRecord(zero)"
        assert "hours=1" in repr(DurationRecord(MS_PER_HOUR))


class TestRoundTrip:
    """reconstruct_ms() matches the input for un-pruned records."""

    @pytest.mark.parametrize(
        "magnitude",
        [0, 1, 455, 4_443_454, 982_440_990, 3454.345898, 2.5 * MS_PER_YEAR, 1_760_451_163_065],
    )
    def test_reconstruct(self, magnitude: float) -> None:
        record = DurationRecord(magnitude)
        assert record.reconstruct_ms() == pytest.approx(magnitude, rel=1e-12, abs=1e-5)


class TestPruneMin:
    """Tests for prune_min."""

    def test_finer_units_dropped(self) -> None:
        record = DurationRecord(10_000).prune_min("milliseconds")
        assert _fields(record) == {"seconds": 10}
        record.prune_min("seconds")
        assert _fields(record) == {"seconds": 10}

    def test_unit_keeps_fraction(self) -> None:
        """The kept unit is recomputed from the total and may be fractional."""
        record = DurationRecord(6000 + 4 * MS_PER_MINUTE).prune_min("seconds")
        assert _fields(record) == {"minutes": 4, "seconds": 6}
        record.prune_min("minutes")
        assert _fields(record) == {"minutes": 4.1}

    def test_years(self) -> None:
        record = DurationRecord(2.5 * MS_PER_YEAR).prune_min("years")
        assert _fields(record) == {"years": 2.5}

    @pytest.mark.parametrize("unit", [None, "weeks"])
    def test_noop(self, unit: str | None) -> None:
        record = DurationRecord(4_443_454)
        assert record.prune_min(unit) == DurationRecord(4_443_454)

    def test_returns_self(self) -> None:
        record = DurationRecord(1)
        assert record.prune_min("seconds") is record


class TestPruneMax:
    """Tests for prune_max."""

    def test_fold_into_milliseconds(self) -> None:
        record = DurationRecord(10_000).prune_max("seconds")
        assert _fields(record) == {"seconds": 10}
        record.prune_max("milliseconds")
        assert _fields(record) == {"milliseconds": 10_000}

    def test_days_fold_into_hours(self) -> None:
        record = DurationRecord(2 * MS_PER_DAY + 3 * MS_PER_HOUR).prune_max("hours")
        assert _fields(record) == {"hours": 51}

    def test_unknown_unit_noop(self) -> None:
        record = DurationRecord(2 * MS_PER_DAY)
        assert record.prune_max("fortnights") == DurationRecord(2 * MS_PER_DAY)


class TestCarrySubseconds:
    """Tests for carry_subseconds."""

    def test_folded_milliseconds_return_to_seconds(self) -> None:
        record = DurationRecord(10_000).prune_max("milliseconds").carry_subseconds()
        assert _fields(record) == {"seconds": 10}

    def test_folded_nanoseconds_keep_remainder(self) -> None:
        record = DurationRecord(3454.345898).prune_max("nanoseconds").carry_subseconds()
        assert _fields(record) == {
            "seconds": 3,
            "milliseconds": 454,
            "microseconds": 345,
            "nanoseconds": 898,
        }

    def test_no_overflow_is_noop(self) -> None:
        record = DurationRecord(3454.345898)
        assert record.copy().carry_subseconds() == record

    def test_non_finite_left_alone(self) -> None:
        record = DurationRecord(math.inf)
        assert record.carry_subseconds() is record


class TestPruneAdaptive:
    """Tests for prune_adaptive."""

    def test_window_from_first_non_zero(self) -> None:
        record = DurationRecord(-1_760_451_163_065).prune_adaptive(2)
        assert _fields(record) == {"years": 55, "days": 286}

    def test_zero_inside_window_counts(self) -> None:
        """A zero field inside the window still uses a slot."""
        record = DurationRecord(2 * MS_PER_YEAR + 5 * MS_PER_HOUR).prune_adaptive(2)
        assert _fields(record) == {"years": 2}

    def test_at_most_n_non_zero(self) -> None:
        for n in range(1, 9):
            record = DurationRecord(1_760_451_163_065.123).prune_adaptive(n)
            assert len(record.non_zero_fields()) <= n

    def test_idempotent(self) -> None:
        once = DurationRecord(982_440_990).prune_adaptive(3)
        twice = once.copy().prune_adaptive(3)
        assert once == twice

    def test_zero_record_untouched(self) -> None:
        assert DurationRecord(0).prune_adaptive(2).is_zero()

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_disables(self, n: int) -> None:
        record = DurationRecord(4_443_454).prune_adaptive(n)
        assert record == DurationRecord(4_443_454)

    def test_window_larger_than_fields(self) -> None:
        record = DurationRecord(4_443_454).prune_adaptive(20)
        assert record == DurationRecord(4_443_454)


class TestToDict:
    """Tests for to_dict."""

    def test_floors_fractional_values(self) -> None:
        record = DurationRecord(6000 + 4 * MS_PER_MINUTE).prune_min("minutes")
        assert record.to_dict()["minutes"] == 4

    def test_passes_non_finite(self) -> None:
        assert math.isnan(DurationRecord(math.nan).to_dict()["years"])
