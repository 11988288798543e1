"""Natural-language duration approximation."""

from chronofmt.humanize.humanize import humanize
from chronofmt.humanize.thresholds import THRESHOLDS, ThresholdEntry, round_half_up

__all__ = ["THRESHOLDS", "ThresholdEntry", "humanize", "round_half_up"]
