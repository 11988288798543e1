"""Core type definitions for chronofmt.

Type aliases shared by the record, formatter and humanizer so the accepted
literal values live in one place.
"""

from __future__ import annotations

from typing import Literal, TypeAlias, get_args

# Duration fields, most significant first
Field: TypeAlias = Literal[
    "years",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
]

# Output shape of a formatted duration
# - digital: 11d08:54:00.990
# - narrow: 11d08h54m00.990s
# - long: 1 hour, 14 minutes, 3 seconds
# - short: 1 hr 14 min 3 sec
Style: TypeAlias = Literal["digital", "narrow", "long", "short"]

# Whether a unit is shown when its value is zero
Display: TypeAlias = Literal["auto", "always"]

STYLES: tuple[str, ...] = get_args(Style)
DISPLAYS: tuple[str, ...] = get_args(Display)
