"""Natural-language approximation of a duration.

Usage:
    >>> humanize(90_000)
    'about 2 minutes'
    >>> humanize(-3_600_000, with_suffix=True)
    'about an hour ago'
    >>> humanize(500, locale="fr", with_suffix=True)
    'dans un instant'

humanize() works on the raw magnitude; it does not go through a
DurationRecord.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from chronofmt.core.config import HumanizeOptions
from chronofmt.core.units import MS_PER_YEAR
from chronofmt.humanize.thresholds import (
    ABOUT_TOLERANCE,
    ThresholdEntry,
    find_threshold,
    round_half_up,
)
from chronofmt.i18n.phrases import CountUnit, Phrase, PhraseLocale, get_phrase_locale

logger = logging.getLogger(__name__)


def _count_phrase(locale: PhraseLocale, unit: CountUnit, absolute: float, gated: bool) -> str:
    exact = absolute / unit.ms
    rounded = round_half_up(exact)
    approximate = gated and abs(rounded - exact) > ABOUT_TOLERANCE
    return locale.count(unit, rounded, approximate=approximate)


def _base_phrase(locale: PhraseLocale, entry: ThresholdEntry | None, absolute: float) -> str:
    if entry is None:
        # Past the table: plain year count, never wrapped in "about"
        return _count_phrase(locale, CountUnit.YEARS, absolute, gated=False)
    if isinstance(entry.kind, CountUnit):
        return _count_phrase(locale, entry.kind, absolute, gated=True)
    return locale.phrase(entry.kind)


def humanize(
    magnitude: float,
    options: HumanizeOptions | Mapping[str, Any] | bool | None = None,
    *,
    locale: str | None = None,
    with_suffix: bool | None = None,
) -> str:
    """Describe a duration in words.

    Args:
        magnitude: Duration in milliseconds. Negative values are in the past.
        options: HumanizeOptions, a mapping, or a bare bool meaning
            with_suffix.
        locale: Locale tag, overriding options.locale.
        with_suffix: Add "in ..."/"... ago", overriding options.with_suffix.

    Returns:
        Localized phrase. Zero is always the bare "now" phrase.

    """
    opts = HumanizeOptions.coerce(options)
    tag = opts.locale if locale is None else locale
    suffix = opts.with_suffix if with_suffix is None else with_suffix

    phrases = get_phrase_locale(tag)
    absolute = abs(magnitude)
    entry = find_threshold(absolute)
    if entry is None:
        logger.debug(
            "Magnitude %r past threshold table (%.0f years)", magnitude, absolute / MS_PER_YEAR
        )

    base = _base_phrase(phrases, entry, absolute)
    if not suffix or (entry is not None and entry.kind is Phrase.NOW):
        return base
    return phrases.with_suffix(base, negative=magnitude < 0)
