"""Configuration models and YAML loading for chronofmt.

This module provides:
- FormatOptions: immutable options for a single format call
- HumanizeOptions: immutable options for a single humanize call
- Config: file-level defaults for both, loaded from chronofmt.yaml

Option models never reject a malformed value. Unknown styles, locales,
units or display modes fall back to their defaults and the fallback is
logged at DEBUG level. Only load_config() raises, with ConfigError.

Usage:
    from chronofmt.core.config import FormatOptions, load_config

    opts = FormatOptions(style="narrow", adaptive_units=2)
    config = load_config(Path("chronofmt.yaml"))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Self

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from chronofmt.core.exceptions import ConfigError
from chronofmt.core.types import DISPLAYS, STYLES, Display, Style
from chronofmt.core.types import Field as UnitField
from chronofmt.core.units import is_field

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "chronofmt.yaml"
DEFAULT_LOCALE: Final[str] = "en"
DEFAULT_FRACTIONAL_DIGITS: Final[int] = 3

# Maximum config file size (1MB)
MAX_CONFIG_SIZE: Final[int] = 1_048_576


def _non_negative_int(value: Any, default: int, name: str) -> int:
    """Coerce value to an int >= 0, falling back to default."""
    if isinstance(value, bool):
        logger.debug("Ignoring boolean %s=%r, using %d", name, value, default)
        return default
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Invalid %s=%r, using %d", name, value, default)
        return default
    if number < 0:
        logger.debug("Negative %s=%r clamped to 0", name, value)
        return 0
    return number


def _locale_tag(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    logger.debug("Invalid locale %r, using %s", value, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


class FormatOptions(BaseModel):
    """Options for formatting a duration.

    Separator fields left as None are resolved per style and locale at
    format time, so the same options can be reused across styles.

    Attributes:
        style: Output shape (digital, narrow, long, short).
        locale: Locale tag for unit names and suffixes.
        fractional_digits: Digits shown after the seconds decimal point.
        min_unit: Finest unit to show; finer units are dropped.
        max_unit: Coarsest unit to show; coarser units fold into it.
        adaptive_units: Size of the adaptive window (0 disables it).
        adaptive_display: Whether zero units inside the window are shown.
        separator: Joiner between units for the long and short styles.
        years_days_separator: Text after the years value (digital/narrow).
        days_hours_separator: Text after the days value (digital/narrow).
        hours_minutes_separator: Text after the hours value (digital/narrow).
        minutes_seconds_separator: Text after the minutes value (digital/narrow).
        seconds_unit: Text after the seconds value (digital/narrow).

    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    style: Style = Field(default="digital", description="Output style")
    locale: str = Field(default=DEFAULT_LOCALE, description="Locale tag")
    fractional_digits: int = Field(
        default=DEFAULT_FRACTIONAL_DIGITS,
        validation_alias=AliasChoices("fractional_digits", "fractionalDigits", "digits"),
        description="Digits shown after the seconds decimal point",
    )
    min_unit: UnitField | None = Field(
        default=None,
        validation_alias=AliasChoices("min_unit", "minDisplayUnit", "min_display_unit"),
        description="Finest unit to display",
    )
    max_unit: UnitField | None = Field(
        default=None,
        validation_alias=AliasChoices("max_unit", "maxDisplayUnit", "max_display_unit"),
        description="Coarsest unit to display",
    )
    adaptive_units: int = Field(
        default=0,
        validation_alias=AliasChoices("adaptive_units", "adaptiveUnits", "adaptive"),
        description="Number of significant units to keep (0 disables)",
    )
    adaptive_display: Display = Field(
        default="auto",
        validation_alias=AliasChoices("adaptive_display", "adaptiveDisplay"),
        description="Show zero units inside the adaptive window",
    )
    separator: str | None = None
    years_days_separator: str | None = None
    days_hours_separator: str | None = None
    hours_minutes_separator: str | None = None
    minutes_seconds_separator: str | None = None
    seconds_unit: str | None = None

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, v: Any) -> Any:
        if v in STYLES:
            return v
        logger.debug("Unknown style %r, falling back to digital", v)
        return "digital"

    @field_validator("locale", mode="before")
    @classmethod
    def _coerce_locale(cls, v: Any) -> str:
        return _locale_tag(v)

    @field_validator("fractional_digits", mode="before")
    @classmethod
    def _coerce_digits(cls, v: Any) -> int:
        return _non_negative_int(v, DEFAULT_FRACTIONAL_DIGITS, "fractional_digits")

    @field_validator("adaptive_units", mode="before")
    @classmethod
    def _coerce_adaptive_units(cls, v: Any) -> int:
        return _non_negative_int(v, 0, "adaptive_units")

    @field_validator("min_unit", "max_unit", mode="before")
    @classmethod
    def _coerce_unit(cls, v: Any) -> Any:
        if v is None or is_field(v):
            return v
        logger.debug("Unknown display unit %r ignored", v)
        return None

    @field_validator("adaptive_display", mode="before")
    @classmethod
    def _coerce_display(cls, v: Any) -> Any:
        if v in DISPLAYS:
            return v
        logger.debug("Unknown adaptive display %r, using auto", v)
        return "auto"

    @field_validator(
        "separator",
        "years_days_separator",
        "days_hours_separator",
        "hours_minutes_separator",
        "minutes_seconds_separator",
        "seconds_unit",
        mode="before",
    )
    @classmethod
    def _coerce_separator(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        logger.debug("Non-string separator %r ignored", v)
        return None

    @classmethod
    def coerce(cls, value: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
        """Build FormatOptions from None, a mapping or an existing instance.

        Args:
            value: Options in any accepted form.

        Returns:
            FormatOptions instance (value itself when already one).

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        if value is not None:
            logger.debug("Unsupported options type %s, using defaults", type(value).__name__)
        return cls()

    def with_overrides(self, **overrides: Any) -> FormatOptions:
        """Return a copy with overrides applied and re-validated.

        Unlike model_copy(update=...), the overrides pass through the same
        coercion as the constructor.
        """
        data = self.model_dump()
        data.update(overrides)
        return type(self).model_validate(data)


class HumanizeOptions(BaseModel):
    """Options for humanizing a duration.

    Attributes:
        locale: Locale tag for phrase templates.
        with_suffix: Wrap the phrase as "in ..." or "... ago" by sign.

    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    locale: str = DEFAULT_LOCALE
    with_suffix: bool = Field(
        default=False,
        validation_alias=AliasChoices("with_suffix", "withSuffix", "suffix"),
    )

    @field_validator("locale", mode="before")
    @classmethod
    def _coerce_locale(cls, v: Any) -> str:
        return _locale_tag(v)

    @field_validator("with_suffix", mode="before")
    @classmethod
    def _coerce_suffix(cls, v: Any) -> bool:
        return bool(v)

    @classmethod
    def coerce(cls, value: HumanizeOptions | Mapping[str, Any] | bool | None) -> HumanizeOptions:
        """Build HumanizeOptions from None, a bool, a mapping or an instance.

        A bare bool is the legacy with_suffix flag.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls(with_suffix=value)
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        if value is not None:
            logger.debug("Unsupported options type %s, using defaults", type(value).__name__)
        return cls()


class Config(BaseModel):
    """File-level defaults for chronofmt.

    A top-level locale is inherited by the format and humanize sections
    unless a section sets its own.

    Attributes:
        locale: Default locale for both sections.
        format: Default format options.
        humanize: Default humanize options.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = DEFAULT_LOCALE
    format: FormatOptions = Field(default_factory=FormatOptions)
    humanize: HumanizeOptions = Field(default_factory=HumanizeOptions)

    @model_validator(mode="before")
    @classmethod
    def _inherit_locale(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "locale" not in data:
            return data
        data = dict(data)
        for section in ("format", "humanize"):
            value = data.get(section)
            if value is None:
                data[section] = {"locale": data["locale"]}
            elif isinstance(value, dict) and "locale" not in value:
                data[section] = {**value, "locale": data["locale"]}
        return data

    @field_validator("locale", mode="before")
    @classmethod
    def _coerce_locale(cls, v: Any) -> str:
        return _locale_tag(v)

    @model_validator(mode="after")
    def _log_loaded(self) -> Self:
        logger.debug(
            "Config: locale=%s style=%s humanize.locale=%s",
            self.locale,
            self.format.style,
            self.humanize.locale,
        )
        return self


def find_config(start: Path | None = None) -> Path | None:
    """Find chronofmt.yaml in a directory.

    Args:
        start: Directory to search, defaults to the current directory.

    Returns:
        Path to the config file, or None if absent.

    """
    directory = start if start is not None else Path.cwd()
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Path | str) -> Config:
    """Load configuration from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to the YAML config file.

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If the file is missing, unreadable, too large, not a
            YAML mapping, or fails validation.

    """
    path = Path(path)

    try:
        size = path.stat().st_size
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", path=path) from None
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e

    if size > MAX_CONFIG_SIZE:
        raise ConfigError(
            f"Config file {path} exceeds {MAX_CONFIG_SIZE} bytes ({size} bytes)",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e

    if data is None:
        logger.debug("Empty config file %s, using defaults", path)
        return Config()

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            path=path,
        )

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", path=path) from e

    logger.info("Loaded config from %s", path)
    return config
