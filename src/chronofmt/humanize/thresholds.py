"""Threshold table for humanized durations.

Each entry covers magnitudes up to and including its limit. The first
entry whose limit is >= the absolute magnitude wins; magnitudes past the
last entry are counted in years.

Count entries are "gated": when rounding the count moves it by more than
ABOUT_TOLERANCE units, the phrase is prefixed with the locale's "about".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

from chronofmt.core.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_WEEK
from chronofmt.i18n.phrases import CountUnit, Phrase

ABOUT_TOLERANCE: Final[float] = 0.2

_DAYS_PER_YEAR: Final[int] = 365


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() rounds halves to even (round(2.5) == 2), which would
    turn 2.5 hours into "2 hours". NaN and infinities pass through.

    Examples:
        >>> round_half_up(1.5)
        2
        >>> round_half_up(2.5)
        3

    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ThresholdEntry:
    """One row of the threshold table.

    Attributes:
        limit: Inclusive upper bound in milliseconds.
        kind: Fixed phrase, or the unit to count in.

    """

    limit: float
    kind: Phrase | CountUnit

    @property
    def gated(self) -> bool:
        """Whether this entry counts a unit (and may be wrapped in "about")."""
        return isinstance(self.kind, CountUnit)

    def covers(self, absolute: float) -> bool:
        return absolute <= self.limit


THRESHOLDS: Final[tuple[ThresholdEntry, ...]] = (
    ThresholdEntry(0, Phrase.NOW),
    ThresholdEntry(1_500, Phrase.MOMENT),
    ThresholdEntry(44_999, CountUnit.SECONDS),
    ThresholdEntry(52_499, Phrase.LESS_THAN_MINUTE),
    ThresholdEntry(70_000, Phrase.ABOUT_MINUTE),
    ThresholdEntry(89_999, Phrase.OVER_MINUTE),
    # Exactly 90 seconds is the rounding midpoint: "about 2 minutes"
    ThresholdEntry(90_000, CountUnit.MINUTES),
    ThresholdEntry(110_000, Phrase.UNDER_TWO_MINUTES),
    ThresholdEntry(57 * MS_PER_MINUTE, CountUnit.MINUTES),
    ThresholdEntry(1.2 * MS_PER_HOUR, Phrase.ABOUT_HOUR),
    ThresholdEntry(1.5 * MS_PER_HOUR - 1, Phrase.OVER_HOUR),
    ThresholdEntry(23.5 * MS_PER_HOUR - 1, CountUnit.HOURS),
    ThresholdEntry(1.1 * MS_PER_DAY, Phrase.ABOUT_DAY),
    ThresholdEntry(1.5 * MS_PER_DAY - 1, Phrase.OVER_DAY),
    ThresholdEntry(13.5 * MS_PER_DAY, CountUnit.DAYS),
    ThresholdEntry(7.5 * MS_PER_WEEK, CountUnit.WEEKS),
    ThresholdEntry(49 * MS_PER_WEEK, CountUnit.MONTHS),
    ThresholdEntry(1.2 * _DAYS_PER_YEAR * MS_PER_DAY, Phrase.ABOUT_YEAR),
    ThresholdEntry(1.5 * _DAYS_PER_YEAR * MS_PER_DAY, Phrase.OVER_YEAR),
)


def find_threshold(absolute: float) -> ThresholdEntry | None:
    """Return the first entry covering absolute, or None past the table.

    NaN is covered by no entry and so yields None.
    """
    for entry in THRESHOLDS:
        if entry.covers(absolute):
            return entry
    return None
