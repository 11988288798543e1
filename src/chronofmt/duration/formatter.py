"""Duration formatting.

format_duration() turns a millisecond magnitude into text in one of four
styles:

    >>> format_duration(-4443454)
    '1:14:03.454'
    >>> format_duration(982440990, "narrow")
    '11d08h54m00.990s'
    >>> format_duration(7323000, "narrow", adaptive_units=2)
    '2h02m'
    >>> format_duration(-4443454, "long")
    '1 hour, 14 minutes, 3 seconds, 454 milliseconds'

The sign of the magnitude is ignored; callers decide how to show it.

DurationFormatter wraps the same function in an immutable builder for
callers that reuse a configuration:

    fmt = DurationFormatter().narrow.adaptive(2)
    fmt.format(3_600_000)  # '1h'
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

from chronofmt.core.config import FormatOptions
from chronofmt.core.types import Display, Field, Style
from chronofmt.core.units import WHOLE_FIELDS
from chronofmt.duration.assemble import assemble_named, assemble_numeric, numeric_separators
from chronofmt.duration.record import DurationRecord
from chronofmt.i18n.units import get_unit_locale

# Display mode of each whole unit before adaptive pruning. Units missing
# from a mapping are "auto".
STYLE_DISPLAYS: Final[Mapping[str, Mapping[str, Display]]] = MappingProxyType(
    {
        "digital": {
            "years": "auto",
            "days": "auto",
            "hours": "auto",
            "minutes": "always",
            "seconds": "always",
        },
        "narrow": {
            "years": "auto",
            "days": "auto",
            "hours": "auto",
            "minutes": "auto",
            "seconds": "always",
        },
        "long": {},
        "short": {},
    }
)


def _base_displays(style: str) -> dict[str, Display]:
    displays: dict[str, Display] = {field: "auto" for field in WHOLE_FIELDS}
    displays.update(STYLE_DISPLAYS[style])
    return displays


def adaptive_displays(
    record: DurationRecord,
    displays: Mapping[str, Display],
    window: int,
    policy: Display,
) -> dict[str, Display]:
    """Adjust unit displays after adaptive pruning.

    Zero units fall back to "auto" so trailing zeros disappear. With the
    "always" policy, the units inside the adaptive window (counted from the
    first non-zero unit) are forced back on, zero or not.

    Args:
        record: Record after prune_adaptive().
        displays: Display modes before adjustment.
        window: Adaptive window size.
        policy: "auto" or "always".

    Returns:
        New display mapping.

    """
    result = dict(displays)
    for field in WHOLE_FIELDS:
        if record.get_field(field) == 0:
            result[field] = "auto"

    if policy == "always":
        position = 0
        for field in WHOLE_FIELDS:
            if position == 0 and record.get_field(field) > 0:
                position = 1
            elif position:
                position += 1
            if position and position <= window:
                result[field] = "always"
    return result


def truncate_subseconds(
    record: DurationRecord, digits: int, keep: Field | None = None
) -> DurationRecord:
    """Drop sub-second units beyond the requested precision.

    0 digits drops milliseconds, up to 3 drops microseconds and fewer
    than 7 drops nanoseconds. Values are truncated, never rounded.

    Args:
        record: Record to truncate in place.
        digits: Fractional digits of seconds.
        keep: Unit never dropped, e.g. the max_unit that the coarser
            units were folded into.

    Returns:
        This record.

    """
    dropped: list[Field] = []
    if digits == 0:
        dropped.append("milliseconds")
    if digits <= 3:
        dropped.append("microseconds")
    if digits < 7:
        dropped.append("nanoseconds")
    for field in dropped:
        if field != keep:
            record.set_field(field, 0)
    return record


def format_duration(
    magnitude: float,
    style: Style | str | None = None,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format a duration in milliseconds.

    Never raises for malformed input: unknown styles fall back to digital,
    unknown locales to English, and NaN or infinite magnitudes come out as
    "nan"/"inf" in the text.

    Args:
        magnitude: Duration in milliseconds; the sign is ignored.
        style: Output style, overriding options.style when given.
        options: FormatOptions, a mapping of option values, or None.
        **overrides: Individual option values, e.g. adaptive_units=2.

    Returns:
        Formatted duration.

    """
    opts = FormatOptions.coerce(options)
    if style is not None:
        overrides["style"] = style
    if overrides:
        opts = opts.with_overrides(**overrides)

    record = DurationRecord(magnitude).prune_min(opts.min_unit).prune_max(opts.max_unit)
    named = opts.style in ("long", "short")
    if not named:
        # Numeric styles show sub-second overflow as whole seconds
        record.carry_subseconds()
    displays = _base_displays(opts.style)
    digits = opts.fractional_digits

    if opts.adaptive_units > 0 and not record.is_zero():
        record.prune_adaptive(opts.adaptive_units)
        displays = adaptive_displays(record, displays, opts.adaptive_units, opts.adaptive_display)
        # Seconds inside an adaptive window render as a whole unit
        if record.seconds > 0:
            digits = 0

    truncate_subseconds(record, digits, keep=opts.max_unit if named else None)
    locale = get_unit_locale(opts.locale)

    if named:
        return assemble_named(record, displays, opts.style, opts, locale)
    separators = numeric_separators(opts.style, opts, locale)
    return assemble_numeric(record, displays, digits, separators, cascade=opts.style == "narrow")


class DurationFormatter:
    """Immutable, reusable duration format configuration.

    Every configuration method returns a new formatter, so a base formatter
    can be shared and specialised without aliasing:

        base = DurationFormatter(locale="fr")
        short = base.short.separator("; ")
        short.format(4443454)  # '1 h; 14 min; 3 s; 454 ms'

    Switching style starts over from that style's defaults and keeps only
    the locale.
    """

    __slots__ = ("_options",)

    def __init__(
        self,
        options: FormatOptions | Mapping[str, Any] | None = None,
        *,
        locale: str | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            options: Starting options, digital style by default.
            locale: Locale tag, overriding options.locale.

        """
        opts = FormatOptions.coerce(options)
        if locale is not None:
            opts = opts.with_overrides(locale=locale)
        self._options = opts

    @property
    def options(self) -> FormatOptions:
        """Current (frozen) options."""
        return self._options

    def _with(self, **overrides: Any) -> DurationFormatter:
        return DurationFormatter(self._options.with_overrides(**overrides))

    @property
    def digital(self) -> DurationFormatter:
        """Formatter using the digital style."""
        return self.style("digital")

    @property
    def narrow(self) -> DurationFormatter:
        """Formatter using the narrow style."""
        return self.style("narrow")

    @property
    def long(self) -> DurationFormatter:
        """Formatter using the long style."""
        return self.style("long")

    @property
    def short(self) -> DurationFormatter:
        """Formatter using the short style."""
        return self.style("short")

    def style(self, style: Style | str) -> DurationFormatter:
        """Return a formatter for style with that style's default options."""
        return DurationFormatter(FormatOptions(style=style, locale=self._options.locale))

    def locale(self, tag: str) -> DurationFormatter:
        return self._with(locale=tag)

    def fractional_digits(self, digits: int) -> DurationFormatter:
        return self._with(fractional_digits=digits)

    digits = fractional_digits

    def separator(self, value: str) -> DurationFormatter:
        return self._with(separator=value)

    def min(self, unit: Field) -> DurationFormatter:
        """Do not show units finer than unit."""
        return self._with(min_unit=unit)

    def max(self, unit: Field) -> DurationFormatter:
        """Do not show units coarser than unit; they fold into it."""
        return self._with(max_unit=unit)

    def adaptive(self, units: int) -> DurationFormatter:
        """Show only the given number of most significant units (0 disables)."""
        return self._with(adaptive_units=units)

    def adaptive_display(self, display: Display) -> DurationFormatter:
        """Set whether zero units inside the adaptive window are shown."""
        return self._with(adaptive_display=display)

    def apply(self, **overrides: Any) -> DurationFormatter:
        """Return a formatter with arbitrary option overrides applied."""
        return self._with(**overrides)

    def format(self, magnitude: float) -> str:
        """Format a duration in milliseconds."""
        return format_duration(magnitude, options=self._options)

    def __repr__(self) -> str:
        changed = self._options.model_dump(exclude_defaults=True)
        return f"DurationFormatter({changed})"


__all__ = [
    "DurationFormatter",
    "STYLE_DISPLAYS",
    "adaptive_displays",
    "format_duration",
    "truncate_subseconds",
]
