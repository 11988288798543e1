"""Per-style assembly of a pruned DurationRecord into text.

Two families of styles:
- numeric (digital, narrow): fixed-width fields glued by separators, with
  seconds carrying a truncated decimal fraction
- named (long, short): "<value> <unit name>" parts joined by a separator

The display rules follow the numeric duration conventions: a unit is shown
when non-zero or marked "always", and minutes are also shown whenever hours
and seconds are both shown so the clock never skips a column.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from chronofmt.core.config import FormatOptions
from chronofmt.core.types import Display, Field
from chronofmt.core.units import FIELDS, compare_fields
from chronofmt.duration.record import DurationRecord
from chronofmt.i18n.units import UnitLocale


@dataclass(frozen=True)
class NumericSeparators:
    """Text placed after each unit in the digital and narrow styles."""

    years: str
    days: str
    hours: str
    minutes: str
    seconds: str


def _number(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    return str(int(value))


def _padded(value: float, two_digit: bool) -> str:
    text = _number(value)
    if two_digit and math.isfinite(value):
        return text.zfill(2)
    return text


def _shown(value: float, display: Display) -> bool:
    return value != 0 or display == "always"


def seconds_fraction(values: Mapping[str, float], digits: int) -> str:
    """Return the decimal part of seconds, truncated to digits.

    The sub-second fields are concatenated as 3-digit groups and cut at the
    requested precision, so 454 ms 345 us 898 ns at 5 digits is ".45434".
    Precision beyond nanoseconds is padded with zeros. Returns "" for 0
    digits.
    """
    if digits <= 0:
        return ""
    subseconds = [values["milliseconds"], values["microseconds"], values["nanoseconds"]]
    for value in subseconds:
        if not math.isfinite(value):
            return "." + str(value)
    text = "".join(f"{int(value):03d}" for value in subseconds)
    return "." + text[:digits].ljust(digits, "0")


def numeric_separators(style: str, options: FormatOptions, locale: UnitLocale) -> NumericSeparators:
    """Resolve separators for a numeric style, applying option overrides."""
    if style == "narrow":
        defaults = NumericSeparators(
            years=locale.year_suffix,
            days=locale.day_suffix,
            hours=locale.hour_suffix,
            minutes=locale.minute_suffix,
            seconds=locale.second_suffix,
        )
    else:
        defaults = NumericSeparators(
            years=locale.year_suffix,
            days=locale.day_suffix,
            hours=":",
            minutes=":",
            seconds="",
        )

    def pick(override: str | None, default: str) -> str:
        return default if override is None else override

    return NumericSeparators(
        years=pick(options.years_days_separator, defaults.years),
        days=pick(options.days_hours_separator, defaults.days),
        hours=pick(options.hours_minutes_separator, defaults.hours),
        minutes=pick(options.minutes_seconds_separator, defaults.minutes),
        seconds=pick(options.seconds_unit, defaults.seconds),
    )


def assemble_numeric(
    record: DurationRecord,
    displays: Mapping[str, Display],
    digits: int,
    separators: NumericSeparators,
    cascade: bool,
) -> str:
    """Assemble the digital or narrow form of a record.

    Hours are padded to two digits only when years or days are present.
    With cascade (narrow), the padding is also dropped from minutes when
    there are no hours, and from seconds when there are no minutes either.

    Args:
        record: Pruned record.
        displays: Display mode per whole unit.
        digits: Fractional digits for seconds.
        separators: Text after each unit.
        cascade: Drop leading zeros down to the most significant unit.

    Returns:
        Formatted string.

    """
    values = record.to_dict()
    fraction = seconds_fraction(values, digits)

    leading = values["years"] == 0 and values["days"] == 0
    pad_hours = not leading
    pad_minutes = not (cascade and leading and values["hours"] == 0)
    pad_seconds = not (cascade and leading and values["hours"] == 0 and values["minutes"] == 0)

    years_shown = _shown(values["years"], displays["years"])
    days_shown = _shown(values["days"], displays["days"])
    hours_shown = _shown(values["hours"], displays["hours"])
    seconds_shown = (
        values["seconds"] != 0 or fraction.strip(".0") != "" or displays["seconds"] == "always"
    )
    minutes_shown = _shown(values["minutes"], displays["minutes"]) or (
        hours_shown and seconds_shown
    )

    parts: list[str] = []
    if years_shown:
        parts += [_number(values["years"]), separators.years]
    if days_shown:
        parts += [_number(values["days"]), separators.days]
    if hours_shown:
        parts += [_padded(values["hours"], pad_hours), separators.hours]
    if minutes_shown:
        parts += [_padded(values["minutes"], pad_minutes), separators.minutes]
    if seconds_shown:
        parts += [_padded(values["seconds"], pad_seconds) + fraction, separators.seconds]
    return "".join(parts)


def _zero_field(options: FormatOptions) -> Field:
    """Unit used to render a duration with nothing to show."""
    if options.min_unit is not None and compare_fields(options.min_unit, "seconds") > 0:
        return options.min_unit
    if options.max_unit is not None and compare_fields(options.max_unit, "seconds") < 0:
        return options.max_unit
    return "seconds"


def assemble_named(
    record: DurationRecord,
    displays: Mapping[str, Display],
    style: str,
    options: FormatOptions,
    locale: UnitLocale,
) -> str:
    """Assemble the long or short form of a record.

    Every non-zero unit (and every unit marked "always") becomes
    "<value><gap><name>", most significant first. A record with nothing to
    show renders as zero of the finest displayed unit, e.g. "0 seconds".
    """
    values = record.to_dict()
    separator = options.separator
    if separator is None:
        separator = locale.default_separator(style)

    parts: list[str] = []
    for field in FIELDS:
        value = values[field]
        if _shown(value, displays.get(field, "auto")):
            name = locale.unit_name(field, value, style)
            parts.append(f"{_number(value)}{locale.unit_gap}{name}")
    if not parts:
        field = _zero_field(options)
        parts.append(f"0{locale.unit_gap}{locale.unit_name(field, 0, style)}")
    return separator.join(parts)
