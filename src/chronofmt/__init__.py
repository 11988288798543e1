"""chronofmt - duration decomposition, formatting and humanization.

Public API:
- format_duration(): millisecond magnitude to digital/narrow/long/short text
- DurationFormatter: immutable, reusable format configuration
- humanize(): natural-language approximation ("about 2 minutes")
- DurationRecord: the unit breakdown behind the formatter
"""

from importlib.metadata import version

from chronofmt.core.config import Config, FormatOptions, HumanizeOptions, load_config
from chronofmt.core.exceptions import ChronofmtError, ConfigError
from chronofmt.duration.formatter import DurationFormatter, format_duration
from chronofmt.duration.record import DurationRecord
from chronofmt.humanize.humanize import humanize
from chronofmt.i18n.units import SUPPORTED_LOCALES

try:
    __version__ = version("chronofmt")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    "SUPPORTED_LOCALES",
    "ChronofmtError",
    "Config",
    "ConfigError",
    "DurationFormatter",
    "DurationRecord",
    "FormatOptions",
    "HumanizeOptions",
    "__version__",
    "format_duration",
    "humanize",
    "load_config",
]
