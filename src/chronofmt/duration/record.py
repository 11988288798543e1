"""Duration record: a millisecond magnitude split into unit fields.

A DurationRecord holds one non-negative value per unit, from years down to
nanoseconds. The sign of the original magnitude is not stored; callers that
care about it keep it themselves.

The pruning operations reshape which fields carry values. Each one mutates
the record and returns it so calls can be chained:

    record = DurationRecord(982_440_990).prune_min("seconds").prune_adaptive(2)

Unknown unit names are ignored rather than rejected, and NaN or infinite
magnitudes propagate into the fields without raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping

from chronofmt.core.types import Field
from chronofmt.core.units import FIELDS, MEASURES, RATIOS, coarser_fields, finer_fields, is_field

logger = logging.getLogger(__name__)


def _floor(value: float) -> float:
    """Floor that passes NaN and infinities through instead of raising."""
    if math.isfinite(value):
        return math.floor(value)
    return value


class DurationRecord:
    """A duration broken down into years, days, ..., nanoseconds.

    Attributes:
        total_ms: Absolute magnitude the record was built from.
        years, days, hours, minutes, seconds: Whole-unit fields.
        milliseconds, microseconds, nanoseconds: Sub-second fields.

    """

    __slots__ = ("total_ms", *FIELDS)

    def __init__(self, magnitude: float = 0) -> None:
        """Decompose a millisecond magnitude.

        Each unit is taken from what remains after removing the larger
        units, so days never exceed the length of a year once years are
        split off.

        Args:
            magnitude: Duration in milliseconds. The sign is dropped.

        """
        ms = abs(magnitude)
        self.total_ms = ms

        self.years = _floor(ms / MEASURES["years"])
        remainder = ms - self.years * MEASURES["years"]
        self.days = _floor(remainder / MEASURES["days"])
        remainder = remainder - self.days * MEASURES["days"]
        self.hours = _floor(remainder / MEASURES["hours"])
        remainder = remainder - self.hours * MEASURES["hours"]
        self.minutes = _floor(remainder / MEASURES["minutes"])
        remainder = remainder - self.minutes * MEASURES["minutes"]
        self.seconds = _floor(remainder / MEASURES["seconds"])
        remainder = remainder - self.seconds * MEASURES["seconds"]
        self.milliseconds = _floor(remainder)
        fraction = remainder - self.milliseconds
        # Float error can leave a tiny negative remainder; clamp at zero.
        self.microseconds = _floor(max(fraction * 1000, 0))
        fraction = fraction - self.microseconds / 1000
        self.nanoseconds = _floor(max(fraction * 1_000_000, 0))

    @classmethod
    def from_ms(cls, magnitude: float) -> DurationRecord:
        """Decompose a millisecond magnitude (alias of the constructor)."""
        return cls(magnitude)

    @classmethod
    def from_fields(
        cls, fields: Mapping[str, float] | None = None, **kwargs: float
    ) -> DurationRecord:
        """Build a record from explicit field values.

        Unset fields default to 0 and unknown keys are ignored. The
        magnitude is the weighted sum of the fields rather than a
        decomposition, so values such as 90 minutes are kept as given.

        Args:
            fields: Mapping of field name to value.
            **kwargs: Field values, applied after the mapping.

        Returns:
            New DurationRecord.

        Examples:
            >>> DurationRecord.from_fields(hours=1, minutes=30).total_ms
            5400000.0

        """
        values = dict(fields or {})
        values.update(kwargs)

        record = cls(0)
        for name, value in values.items():
            if is_field(name):
                record.set_field(name, value)
            else:
                logger.debug("Ignoring unknown duration field %r", name)
        record.total_ms = record.reconstruct_ms()
        return record

    def get_field(self, name: str) -> float:
        """Return a field value, or 0 for an unknown name."""
        if not is_field(name):
            return 0
        return getattr(self, name)

    def set_field(self, name: str, value: float) -> None:
        """Set a field value; unknown names are ignored."""
        if is_field(name):
            setattr(self, name, value)

    def items(self) -> Iterator[tuple[Field, float]]:
        """Iterate (field, value) pairs, most significant first."""
        for name in FIELDS:
            yield name, getattr(self, name)

    def prune_min(self, unit: str | None) -> DurationRecord:
        """Drop every unit finer than unit.

        The unit itself is recomputed from the total magnitude so it keeps
        the dropped precision as a fraction, e.g. 90.5 seconds pruned to
        minutes leaves minutes at 1.508...

        Args:
            unit: Finest unit to keep. None or an unknown name is a no-op.

        Returns:
            This record.

        """
        if not is_field(unit):
            return self
        for name in finer_fields(unit):
            setattr(self, name, 0)
        setattr(self, unit, (self.total_ms / MEASURES[unit]) % RATIOS[unit])
        return self

    def prune_max(self, unit: str | None) -> DurationRecord:
        """Fold every unit coarser than unit into it.

        Two days pruned to hours become 48 hours on top of the existing
        hours value.

        Args:
            unit: Coarsest unit to keep. None or an unknown name is a no-op.

        Returns:
            This record.

        """
        if not is_field(unit):
            return self
        for name in coarser_fields(unit):
            value = getattr(self, name)
            if value > 0:
                folded = getattr(self, unit) + (MEASURES[name] / MEASURES[unit]) * value
                setattr(self, unit, folded)
                setattr(self, name, 0)
        return self

    def prune_adaptive(self, max_units: int = 2) -> DurationRecord:
        """Keep only the max_units most significant units.

        The window starts at the first non-zero field and spans max_units
        consecutive fields, zeros inside the window included. Everything
        outside the window is set to 0.

        A zero record is left untouched, and max_units <= 0 disables
        pruning.

        Args:
            max_units: Size of the window.

        Returns:
            This record.

        """
        if max_units <= 0 or self.is_zero():
            return self

        kept = 0
        counting = False
        for name in FIELDS:
            if not counting and getattr(self, name) != 0:
                counting = True
            if counting:
                kept += 1
                if kept > max_units:
                    setattr(self, name, 0)
        return self

    def carry_subseconds(self) -> DurationRecord:
        """Move whole seconds held by the sub-second fields into seconds.

        prune_max to a sub-second unit leaves the whole duration in that
        field, e.g. 10 seconds as 10000 milliseconds. After carrying, each
        sub-second field is below 1000 again and the fields are whole
        numbers. Non-finite fields are left alone.

        Returns:
            This record.

        """
        subseconds = (self.milliseconds, self.microseconds, self.nanoseconds)
        if not all(math.isfinite(value) for value in subseconds):
            return self

        ms, us, ns = (int(value) for value in subseconds)
        whole, rest = divmod(ms * 1_000_000 + us * 1_000 + ns, 1_000_000_000)
        if whole == 0:
            return self

        self.seconds += whole
        self.milliseconds, rest = divmod(rest, 1_000_000)
        self.microseconds, self.nanoseconds = divmod(rest, 1_000)
        return self

    def is_zero(self) -> bool:
        """Check whether every field is exactly 0."""
        return all(getattr(self, name) == 0 for name in FIELDS)

    def non_zero_fields(self) -> list[Field]:
        """Return the fields holding a non-zero value, most significant first."""
        return [name for name, value in self.items() if value != 0]

    def reconstruct_ms(self) -> float:
        """Return the weighted sum of the fields in milliseconds."""
        return sum(value * MEASURES[name] for name, value in self.items())

    def to_dict(self) -> dict[str, float]:
        """Return every field floored to a whole number.

        Fractional values left by prune_min are truncated; NaN and
        infinities are passed through.
        """
        return {name: _floor(value) for name, value in self.items()}

    def copy(self) -> DurationRecord:
        """Return an independent copy of this record."""
        clone = DurationRecord(0)
        clone.total_ms = self.total_ms
        for name, value in self.items():
            setattr(clone, name, value)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DurationRecord):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in FIELDS)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={value!r}" for name, value in self.items() if value)
        return f"DurationRecord({parts or 'zero'})"
