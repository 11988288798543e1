"""Duration decomposition and formatting."""

from chronofmt.duration.formatter import DurationFormatter, format_duration
from chronofmt.duration.record import DurationRecord

__all__ = ["DurationFormatter", "DurationRecord", "format_duration"]
