"""Locale tables for the formatter and the humanizer."""

from chronofmt.i18n.phrases import PHRASE_LOCALES, PhraseLocale, get_phrase_locale
from chronofmt.i18n.units import (
    SUPPORTED_LOCALES,
    UNIT_LOCALES,
    UnitLocale,
    get_unit_locale,
    is_supported_locale,
    resolve_locale,
)

__all__ = [
    "PHRASE_LOCALES",
    "SUPPORTED_LOCALES",
    "UNIT_LOCALES",
    "PhraseLocale",
    "UnitLocale",
    "get_phrase_locale",
    "get_unit_locale",
    "is_supported_locale",
    "resolve_locale",
]
