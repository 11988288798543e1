"""Unit table for duration decomposition.

Every duration unit is described by two constants:
- its measure: how many milliseconds one unit holds
- its ratio: the modulo base used to pull that unit out of a larger total

A year is the fixed 365.25-day average, not a calendar year. Years never
wrap, so their ratio is infinite.

Usage:
    from chronofmt.core.units import FIELDS, MEASURES, RATIOS

    hours = (total_ms / MEASURES["hours"]) % RATIOS["hours"]
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Final, Literal

from chronofmt.core.types import Field

# Solar year (365d 5h 48m 46s) kept for reference; decomposition uses the
# 365.25-day calendar average below.
SECONDS_PER_SOLAR_YEAR: Final[int] = ((365 * 24 + 5) * 60 + 48) * 60 + 46
SECONDS_PER_CALENDAR_YEAR: Final[float] = (365.25 * 24) * 3600

MS_PER_SECOND: Final[int] = 1_000
MS_PER_MINUTE: Final[int] = 60 * MS_PER_SECOND
MS_PER_HOUR: Final[int] = 60 * MS_PER_MINUTE
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR
MS_PER_WEEK: Final[int] = 7 * MS_PER_DAY
MS_PER_YEAR: Final[float] = SECONDS_PER_CALENDAR_YEAR * 1000

# Most significant first. Order matters for every pruning operation.
FIELDS: Final[tuple[Field, ...]] = (
    "years",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)

# Units rendered as whole numbers by the numeric styles; the rest form the
# fractional part of seconds.
WHOLE_FIELDS: Final[tuple[Field, ...]] = FIELDS[:5]
SUBSECOND_FIELDS: Final[tuple[Field, ...]] = FIELDS[5:]

MEASURES: Final = MappingProxyType(
    {
        "years": MS_PER_YEAR,
        "days": MS_PER_DAY,
        "hours": MS_PER_HOUR,
        "minutes": MS_PER_MINUTE,
        "seconds": MS_PER_SECOND,
        "milliseconds": 1,
        "microseconds": 1 / 1000,
        "nanoseconds": 1 / 1_000_000,
    }
)

RATIOS: Final = MappingProxyType(
    {
        "years": math.inf,
        "days": 365.25,
        "hours": 24,
        "minutes": 60,
        "seconds": 60,
        "milliseconds": 1000,
        "microseconds": 1000,
        "nanoseconds": 1000,
    }
)


def is_field(name: object) -> bool:
    """Check whether a value names a duration field.

    Examples:
        >>> is_field("hours")
        True
        >>> is_field("weeks")
        False

    """
    return isinstance(name, str) and name in MEASURES


def compare_fields(a: Field, b: Field) -> Literal[-1, 0, 1]:
    """Compare two fields by the size of the unit.

    Args:
        a: First field.
        b: Second field.

    Returns:
        -1 if a is the finer unit, 0 if equal, 1 if a is the coarser unit.

    Examples:
        >>> compare_fields("minutes", "hours")
        -1
        >>> compare_fields("days", "days")
        0

    """
    if MEASURES[a] < MEASURES[b]:
        return -1
    if MEASURES[a] > MEASURES[b]:
        return 1
    return 0


def finer_fields(unit: Field) -> tuple[Field, ...]:
    """Return the fields strictly smaller than unit, most significant first."""
    return tuple(f for f in FIELDS if MEASURES[f] < MEASURES[unit])


def coarser_fields(unit: Field) -> tuple[Field, ...]:
    """Return the fields strictly larger than unit, most significant first."""
    return tuple(f for f in FIELDS if MEASURES[f] > MEASURES[unit])
