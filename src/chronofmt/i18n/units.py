"""Locale tables for the duration formatter.

Each supported locale has one complete UnitLocale entry: the single-letter
suffixes used by the digital and narrow styles, the singular/plural unit
names used by the long and short styles, and the default joiners.

There is no per-field fallback. A locale that is not in the table falls
back to the whole English entry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from chronofmt.core.types import Field

logger = logging.getLogger(__name__)

DEFAULT_LOCALE: Final[str] = "en"


@dataclass(frozen=True)
class UnitName:
    """Singular and plural name of a unit."""

    one: str
    other: str

    def pick(self, value: float, one_values: frozenset[int] = frozenset({1})) -> str:
        """Return the singular name when value is in one_values, else the plural."""
        return self.one if value in one_values else self.other


def _same(name: str) -> UnitName:
    return UnitName(name, name)


@dataclass(frozen=True)
class UnitLocale:
    """Formatter strings for one locale.

    Attributes:
        tag: Locale tag, e.g. "fr".
        year_suffix: Marker after years (digital, narrow).
        day_suffix: Marker after days (digital, narrow).
        hour_suffix: Marker after hours (narrow).
        minute_suffix: Marker after minutes (narrow).
        second_suffix: Marker after seconds (narrow).
        long_names: Unit names for the long style.
        short_names: Unit names for the short style.
        long_separator: Default joiner between units, long style.
        short_separator: Default joiner between units, short style.
        unit_gap: Text between a value and its unit name.
        one_values: Values that take the singular name.

    """

    tag: str
    year_suffix: str
    day_suffix: str
    hour_suffix: str
    minute_suffix: str
    second_suffix: str
    long_names: Mapping[Field, UnitName]
    short_names: Mapping[Field, UnitName]
    long_separator: str = ", "
    short_separator: str = " "
    unit_gap: str = " "
    one_values: frozenset[int] = frozenset({1})

    def unit_name(self, field: Field, value: float, style: str) -> str:
        """Return the localized name of field for value in the given style."""
        names = self.short_names if style == "short" else self.long_names
        return names[field].pick(value, self.one_values)

    def default_separator(self, style: str) -> str:
        """Return the default joiner for the long or short style."""
        return self.short_separator if style == "short" else self.long_separator


UNIT_LOCALES: Final[Mapping[str, UnitLocale]] = MappingProxyType(
    {
        "en": UnitLocale(
            tag="en",
            year_suffix="y",
            day_suffix="d",
            hour_suffix="h",
            minute_suffix="m",
            second_suffix="s",
            long_names={
                "years": UnitName("year", "years"),
                "days": UnitName("day", "days"),
                "hours": UnitName("hour", "hours"),
                "minutes": UnitName("minute", "minutes"),
                "seconds": UnitName("second", "seconds"),
                "milliseconds": UnitName("millisecond", "milliseconds"),
                "microseconds": UnitName("microsecond", "microseconds"),
                "nanoseconds": UnitName("nanosecond", "nanoseconds"),
            },
            short_names={
                "years": UnitName("yr", "yrs"),
                "days": UnitName("day", "days"),
                "hours": _same("hr"),
                "minutes": _same("min"),
                "seconds": _same("sec"),
                "milliseconds": _same("ms"),
                "microseconds": _same("μs"),
                "nanoseconds": _same("ns"),
            },
        ),
        "fr": UnitLocale(
            tag="fr",
            year_suffix="a",
            day_suffix="j",
            hour_suffix="h",
            minute_suffix="m",
            second_suffix="s",
            long_names={
                "years": UnitName("an", "ans"),
                "days": UnitName("jour", "jours"),
                "hours": UnitName("heure", "heures"),
                "minutes": UnitName("minute", "minutes"),
                "seconds": UnitName("seconde", "secondes"),
                "milliseconds": UnitName("milliseconde", "millisecondes"),
                "microseconds": UnitName("microseconde", "microsecondes"),
                "nanoseconds": UnitName("nanoseconde", "nanosecondes"),
            },
            short_names={
                "years": UnitName("an", "ans"),
                "days": _same("j"),
                "hours": _same("h"),
                "minutes": _same("min"),
                "seconds": _same("s"),
                "milliseconds": _same("ms"),
                "microseconds": _same("μs"),
                "nanoseconds": _same("ns"),
            },
            # French treats 0 as singular: "0 heure"
            one_values=frozenset({0, 1}),
        ),
        "es": UnitLocale(
            tag="es",
            year_suffix="a",
            day_suffix="d",
            hour_suffix="h",
            minute_suffix="m",
            second_suffix="s",
            long_names={
                "years": UnitName("año", "años"),
                "days": UnitName("día", "días"),
                "hours": UnitName("hora", "horas"),
                "minutes": UnitName("minuto", "minutos"),
                "seconds": UnitName("segundo", "segundos"),
                "milliseconds": UnitName("milisegundo", "milisegundos"),
                "microseconds": UnitName("microsegundo", "microsegundos"),
                "nanoseconds": UnitName("nanosegundo", "nanosegundos"),
            },
            short_names={
                "years": _same("a"),
                "days": _same("d"),
                "hours": _same("h"),
                "minutes": _same("min"),
                "seconds": _same("s"),
                "milliseconds": _same("ms"),
                "microseconds": _same("μs"),
                "nanoseconds": _same("ns"),
            },
        ),
        "zh": UnitLocale(
            tag="zh",
            year_suffix="年",
            day_suffix="天",
            hour_suffix="时",
            minute_suffix="分",
            second_suffix="秒",
            long_names={
                "years": _same("年"),
                "days": _same("天"),
                "hours": _same("小时"),
                "minutes": _same("分钟"),
                "seconds": _same("秒钟"),
                "milliseconds": _same("毫秒"),
                "microseconds": _same("微秒"),
                "nanoseconds": _same("纳秒"),
            },
            short_names={
                "years": _same("年"),
                "days": _same("天"),
                "hours": _same("小时"),
                "minutes": _same("分钟"),
                "seconds": _same("秒"),
                "milliseconds": _same("毫秒"),
                "microseconds": _same("微秒"),
                "nanoseconds": _same("纳秒"),
            },
            long_separator="",
            short_separator="",
            unit_gap="",
        ),
    }
)

SUPPORTED_LOCALES: Final[tuple[str, ...]] = tuple(UNIT_LOCALES)


def _match_locale(tag: str | None, supported: Mapping[str, object]) -> str | None:
    if not isinstance(tag, str):
        return None
    normalized = tag.strip().replace("_", "-").lower()
    if normalized in supported:
        return normalized
    primary = normalized.split("-", 1)[0]
    return primary if primary in supported else None


def is_supported_locale(tag: str | None) -> bool:
    """Check whether a tag resolves to a locale table without falling back."""
    return _match_locale(tag, UNIT_LOCALES) is not None


def resolve_locale(tag: str | None, supported: Mapping[str, object] = UNIT_LOCALES) -> str:
    """Resolve a locale tag to a supported table key.

    Matching is case-insensitive and falls back to the primary subtag, so
    "fr-CA" and "zh_Hans" resolve to "fr" and "zh". Anything else resolves
    to the default locale.

    Examples:
        >>> resolve_locale("fr-CA")
        'fr'
        >>> resolve_locale("de")
        'en'

    """
    matched = _match_locale(tag, supported)
    if matched is not None:
        return matched
    logger.debug("Unsupported locale %r, using %s", tag, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def get_unit_locale(tag: str | None) -> UnitLocale:
    """Return the formatter table for a locale tag, English if unsupported."""
    return UNIT_LOCALES[resolve_locale(tag)]
