"""Core module for chronofmt: unit table, types, exceptions and configuration.

This module provides:
- The unit table (measures, ratios, field order) in core.units
- Option and config models plus YAML loading via load_config()
- Exception hierarchy with ChronofmtError as base
"""

from chronofmt.core.config import (
    CONFIG_FILENAME,
    MAX_CONFIG_SIZE,
    Config,
    FormatOptions,
    HumanizeOptions,
    find_config,
    load_config,
)
from chronofmt.core.exceptions import ChronofmtError, ConfigError

__all__ = [
    # Config constants
    "CONFIG_FILENAME",
    "MAX_CONFIG_SIZE",
    # Config models
    "Config",
    "FormatOptions",
    "HumanizeOptions",
    # Config functions
    "find_config",
    "load_config",
    # Exceptions
    "ChronofmtError",
    "ConfigError",
]
