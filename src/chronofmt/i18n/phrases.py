"""Locale tables for the humanizer.

Humanized phrases come in two kinds:
- Phrase: a fixed phrase that does not depend on the exact count
  ("a moment", "over an hour")
- CountUnit: a count of a unit with singular/plural templates
  ("a minute", "5 minutes")

Each PhraseLocale maps every kind to a template, plus the wrappers for
"about", future ("in ...") and past ("... ago"). Templates use str.format
placeholders: {n} for counts and {phrase} for wrappers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from chronofmt.core.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from chronofmt.core.units import MS_PER_WEEK, MS_PER_YEAR
from chronofmt.i18n.units import resolve_locale


class Phrase(str, Enum):
    """Fixed phrases, independent of the exact magnitude."""

    NOW = "now"
    MOMENT = "moment"
    LESS_THAN_MINUTE = "less_than_minute"
    ABOUT_MINUTE = "about_minute"
    OVER_MINUTE = "over_minute"
    UNDER_TWO_MINUTES = "under_two_minutes"
    ABOUT_HOUR = "about_hour"
    OVER_HOUR = "over_hour"
    ABOUT_DAY = "about_day"
    OVER_DAY = "over_day"
    ABOUT_YEAR = "about_year"
    OVER_YEAR = "over_year"


class CountUnit(str, Enum):
    """Units a humanized count can be expressed in."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def ms(self) -> float:
        """Length of one unit in milliseconds."""
        return _COUNT_UNIT_MS[self]


# Months are a flat 30 days; calendar months are out of scope.
_COUNT_UNIT_MS: Final[Mapping[CountUnit, float]] = MappingProxyType(
    {
        CountUnit.SECONDS: MS_PER_SECOND,
        CountUnit.MINUTES: MS_PER_MINUTE,
        CountUnit.HOURS: MS_PER_HOUR,
        CountUnit.DAYS: MS_PER_DAY,
        CountUnit.WEEKS: MS_PER_WEEK,
        CountUnit.MONTHS: 30 * MS_PER_DAY,
        CountUnit.YEARS: MS_PER_YEAR,
    }
)


@dataclass(frozen=True)
class CountTemplate:
    """Templates for a count: one is used for exactly 1, other otherwise."""

    one: str
    other: str

    def render(self, n: float) -> str:
        """Fill in the count."""
        template = self.one if n == 1 else self.other
        return template.format(n=n)


@dataclass(frozen=True)
class PhraseLocale:
    """Humanizer templates for one locale."""

    tag: str
    phrases: Mapping[Phrase, str]
    counts: Mapping[CountUnit, CountTemplate]
    about: str
    future: str
    past: str

    def phrase(self, kind: Phrase) -> str:
        """Return a fixed phrase."""
        return self.phrases[kind]

    def count(self, unit: CountUnit, n: float, approximate: bool = False) -> str:
        """Return a count phrase, wrapped in "about" when approximate."""
        text = self.counts[unit].render(n)
        return self.about.format(phrase=text) if approximate else text

    def with_suffix(self, phrase: str, negative: bool) -> str:
        """Wrap a phrase as past ("... ago") or future ("in ...")."""
        template = self.past if negative else self.future
        return template.format(phrase=phrase)


PHRASE_LOCALES: Final[Mapping[str, PhraseLocale]] = MappingProxyType(
    {
        "en": PhraseLocale(
            tag="en",
            phrases={
                Phrase.NOW: "now",
                Phrase.MOMENT: "a moment",
                Phrase.LESS_THAN_MINUTE: "less than a minute",
                Phrase.ABOUT_MINUTE: "about a minute",
                Phrase.OVER_MINUTE: "over a minute",
                Phrase.UNDER_TWO_MINUTES: "under 2 minutes",
                Phrase.ABOUT_HOUR: "about an hour",
                Phrase.OVER_HOUR: "over an hour",
                Phrase.ABOUT_DAY: "about a day",
                Phrase.OVER_DAY: "over a day",
                Phrase.ABOUT_YEAR: "about a year",
                Phrase.OVER_YEAR: "over a year",
            },
            counts={
                CountUnit.SECONDS: CountTemplate("a second", "{n} seconds"),
                CountUnit.MINUTES: CountTemplate("a minute", "{n} minutes"),
                CountUnit.HOURS: CountTemplate("an hour", "{n} hours"),
                CountUnit.DAYS: CountTemplate("a day", "{n} days"),
                CountUnit.WEEKS: CountTemplate("a week", "{n} weeks"),
                CountUnit.MONTHS: CountTemplate("a month", "{n} months"),
                CountUnit.YEARS: CountTemplate("a year", "{n} years"),
            },
            about="about {phrase}",
            future="in {phrase}",
            past="{phrase} ago",
        ),
        "fr": PhraseLocale(
            tag="fr",
            phrases={
                Phrase.NOW: "maintenant",
                Phrase.MOMENT: "un instant",
                Phrase.LESS_THAN_MINUTE: "moins d'une minute",
                Phrase.ABOUT_MINUTE: "environ une minute",
                Phrase.OVER_MINUTE: "plus d'une minute",
                Phrase.UNDER_TWO_MINUTES: "moins de 2 minutes",
                Phrase.ABOUT_HOUR: "environ une heure",
                Phrase.OVER_HOUR: "plus d'une heure",
                Phrase.ABOUT_DAY: "environ un jour",
                Phrase.OVER_DAY: "plus d'un jour",
                Phrase.ABOUT_YEAR: "environ un an",
                Phrase.OVER_YEAR: "plus d'un an",
            },
            counts={
                CountUnit.SECONDS: CountTemplate("une seconde", "{n} secondes"),
                CountUnit.MINUTES: CountTemplate("une minute", "{n} minutes"),
                CountUnit.HOURS: CountTemplate("une heure", "{n} heures"),
                CountUnit.DAYS: CountTemplate("un jour", "{n} jours"),
                CountUnit.WEEKS: CountTemplate("une semaine", "{n} semaines"),
                CountUnit.MONTHS: CountTemplate("un mois", "{n} mois"),
                CountUnit.YEARS: CountTemplate("un an", "{n} ans"),
            },
            about="environ {phrase}",
            future="dans {phrase}",
            past="il y a {phrase}",
        ),
        "es": PhraseLocale(
            tag="es",
            phrases={
                Phrase.NOW: "ahora",
                Phrase.MOMENT: "un momento",
                Phrase.LESS_THAN_MINUTE: "menos de un minuto",
                Phrase.ABOUT_MINUTE: "alrededor de un minuto",
                Phrase.OVER_MINUTE: "más de un minuto",
                Phrase.UNDER_TWO_MINUTES: "menos de 2 minutos",
                Phrase.ABOUT_HOUR: "alrededor de una hora",
                Phrase.OVER_HOUR: "más de una hora",
                Phrase.ABOUT_DAY: "alrededor de un día",
                Phrase.OVER_DAY: "más de un día",
                Phrase.ABOUT_YEAR: "alrededor de un año",
                Phrase.OVER_YEAR: "más de un año",
            },
            counts={
                CountUnit.SECONDS: CountTemplate("un segundo", "{n} segundos"),
                CountUnit.MINUTES: CountTemplate("un minuto", "{n} minutos"),
                CountUnit.HOURS: CountTemplate("una hora", "{n} horas"),
                CountUnit.DAYS: CountTemplate("un día", "{n} días"),
                CountUnit.WEEKS: CountTemplate("una semana", "{n} semanas"),
                CountUnit.MONTHS: CountTemplate("un mes", "{n} meses"),
                CountUnit.YEARS: CountTemplate("un año", "{n} años"),
            },
            about="alrededor de {phrase}",
            future="en {phrase}",
            past="hace {phrase}",
        ),
        "zh": PhraseLocale(
            tag="zh",
            phrases={
                Phrase.NOW: "现在",
                Phrase.MOMENT: "片刻",
                Phrase.LESS_THAN_MINUTE: "不到一分钟",
                Phrase.ABOUT_MINUTE: "大约一分钟",
                Phrase.OVER_MINUTE: "一分多钟",
                Phrase.UNDER_TWO_MINUTES: "不到两分钟",
                Phrase.ABOUT_HOUR: "大约一小时",
                Phrase.OVER_HOUR: "一个多小时",
                Phrase.ABOUT_DAY: "大约一天",
                Phrase.OVER_DAY: "一天多",
                Phrase.ABOUT_YEAR: "大约一年",
                Phrase.OVER_YEAR: "一年多",
            },
            counts={
                CountUnit.SECONDS: CountTemplate("1秒", "{n}秒"),
                CountUnit.MINUTES: CountTemplate("1分钟", "{n}分钟"),
                CountUnit.HOURS: CountTemplate("1小时", "{n}小时"),
                CountUnit.DAYS: CountTemplate("1天", "{n}天"),
                CountUnit.WEEKS: CountTemplate("1周", "{n}周"),
                CountUnit.MONTHS: CountTemplate("1个月", "{n}个月"),
                CountUnit.YEARS: CountTemplate("1年", "{n}年"),
            },
            about="大约{phrase}",
            future="{phrase}后",
            past="{phrase}前",
        ),
    }
)


def get_phrase_locale(tag: str | None) -> PhraseLocale:
    """Return the humanizer table for a locale tag, English if unsupported."""
    return PHRASE_LOCALES[resolve_locale(tag, PHRASE_LOCALES)]
