"""Exception hierarchy for chronofmt.

Formatting and humanizing never raise for malformed durations; they degrade
to defaults instead. Exceptions are reserved for the outer layers, such as
reading a configuration file.
"""


class ChronofmtError(Exception):
    """Base exception for all chronofmt errors."""

    pass


class ConfigError(ChronofmtError):
    """Configuration file is missing, unreadable or invalid.

    Attributes:
        path: Path of the offending config file, if known.

    """

    def __init__(self, message: str, path: object | None = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Human-readable error message.
            path: Path of the config file that caused the error.

        """
        super().__init__(message)
        self.path = path
