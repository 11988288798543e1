"""Command-line interface for chronofmt.

Thin wrapper over the library: every command builds options, calls
format_duration() or humanize() and prints the result.

Examples:
    chronofmt format 4443454                  # 1:14:03.454
    chronofmt format 982440990 -s narrow -a 2 # 11d08h
    chronofmt humanize --suffix -- -90000     # about 2 minutes ago
    chronofmt table --locale fr

Negative magnitudes go after "--" (options before it) so they are not
read as options. NaN and infinite magnitudes are rejected with
EXIT_ERROR.
"""

import math
from pathlib import Path

import typer
from rich.table import Table

from chronofmt.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _setup_logging,
    _warning,
    console,
)
from chronofmt.core.config import Config, find_config, load_config
from chronofmt.core.exceptions import ConfigError
from chronofmt.core.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_YEAR
from chronofmt.duration.formatter import format_duration
from chronofmt.humanize.humanize import humanize
from chronofmt.i18n.units import SUPPORTED_LOCALES, is_supported_locale

app = typer.Typer(
    name="chronofmt",
    help="Format and humanize durations given in milliseconds",
    no_args_is_help=True,
)

# Sample magnitudes for the table command
SAMPLE_MAGNITUDES: tuple[float, ...] = (
    0,
    500,
    3_454,
    44_999,
    90_000,
    4_443_454,
    5_400_000,
    MS_PER_DAY,
    3 * MS_PER_DAY + 4 * MS_PER_HOUR,
    982_440_990,
    45 * MS_PER_DAY,
    MS_PER_YEAR + 5 * MS_PER_DAY,
    2 * MS_PER_YEAR + 7 * MS_PER_MINUTE,
    -1_760_451_163_065,
)


def _load_defaults(config_path: Path | None) -> Config:
    """Load defaults from --config, or chronofmt.yaml in the cwd if present.

    Exits with EXIT_CONFIG_ERROR when the file cannot be loaded.
    """
    path = config_path if config_path is not None else find_config()
    if path is None:
        return Config()
    try:
        return load_config(path)
    except ConfigError as e:
        _error(f"Config error: {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None


def _check_magnitude(magnitude: float) -> None:
    """Exit with EXIT_ERROR unless magnitude is a finite number."""
    if not math.isfinite(magnitude):
        _error(f"Magnitude must be a finite number of milliseconds, got {magnitude}")
        raise typer.Exit(code=EXIT_ERROR)


def _check_locale(tag: str | None) -> None:
    if tag is not None and not is_supported_locale(tag):
        _warning(f"Locale '{tag}' not supported, using en ({', '.join(SUPPORTED_LOCALES)})")


@app.command("format")
def format_command(
    magnitude: float = typer.Argument(..., help="Duration in milliseconds"),
    style: str | None = typer.Option(
        None,
        "--style",
        "-s",
        help="Output style: digital, narrow, long or short",
    ),
    locale: str | None = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. 'fr')"),
    digits: int | None = typer.Option(
        None,
        "--digits",
        "-d",
        help="Fractional digits after the seconds",
    ),
    min_unit: str | None = typer.Option(None, "--min", help="Finest unit to show"),
    max_unit: str | None = typer.Option(None, "--max", help="Coarsest unit to show"),
    adaptive: int | None = typer.Option(
        None,
        "--adaptive",
        "-a",
        help="Show only this many significant units (0 disables)",
    ),
    adaptive_display: str | None = typer.Option(
        None,
        "--adaptive-display",
        help="Zero units inside the adaptive window: auto or always",
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        help="Joiner between units (long and short styles)",
    ),
    signed: bool = typer.Option(
        False,
        "--signed",
        help="Prefix negative durations with '-'",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to chronofmt.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Format a duration.

    Options on the command line override the format section of the
    config file.

    Examples:
        chronofmt format 4443454                     # 1:14:03.454
        chronofmt format 4443454 -s long             # 1 hour, 14 minutes, ...
        chronofmt format --signed -- -4443454        # -1:14:03.454

    """
    _setup_logging(verbose=verbose, quiet=False)
    _check_magnitude(magnitude)
    _check_locale(locale)

    defaults = _load_defaults(config).format
    overrides = {
        "style": style,
        "locale": locale,
        "fractional_digits": digits,
        "min_unit": min_unit,
        "max_unit": max_unit,
        "adaptive_units": adaptive,
        "adaptive_display": adaptive_display,
        "separator": separator,
    }
    options = defaults.with_overrides(**{k: v for k, v in overrides.items() if v is not None})

    text = format_duration(magnitude, options=options)
    if signed and magnitude < 0:
        text = f"-{text}"
    typer.echo(text)


@app.command("humanize")
def humanize_command(
    magnitude: float = typer.Argument(..., help="Duration in milliseconds (negative = past)"),
    locale: str | None = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. 'fr')"),
    suffix: bool | None = typer.Option(
        None,
        "--suffix/--no-suffix",
        help="Add 'in ...' or '... ago'",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to chronofmt.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Describe a duration in words.

    Examples:
        chronofmt humanize 90000                 # about 2 minutes
        chronofmt humanize --suffix -- -90000    # about 2 minutes ago

    """
    _setup_logging(verbose=verbose, quiet=False)
    _check_magnitude(magnitude)
    _check_locale(locale)

    defaults = _load_defaults(config).humanize
    typer.echo(humanize(magnitude, defaults, locale=locale, with_suffix=suffix))


@app.command("table")
def table_command(
    locale: str | None = typer.Option(None, "--locale", "-l", help="Locale tag (e.g. 'fr')"),
    adaptive: int = typer.Option(
        2,
        "--adaptive",
        "-a",
        help="Significant units in the narrow column",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to chronofmt.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Print sample durations in every style."""
    _setup_logging(verbose=verbose, quiet=False)
    _check_locale(locale)

    defaults = _load_defaults(config)
    tag = locale if locale is not None else defaults.locale

    table = Table(title=f"Durations ({tag})", show_header=True)
    table.add_column("ms", justify="right", style="cyan")
    table.add_column("digital")
    table.add_column("narrow")
    table.add_column("long")
    table.add_column("humanized")

    for magnitude in SAMPLE_MAGNITUDES:
        table.add_row(
            f"{magnitude:.0f}",
            format_duration(magnitude, "digital", locale=tag),
            format_duration(magnitude, "narrow", locale=tag, adaptive_units=adaptive),
            format_duration(magnitude, "long", locale=tag, min_unit="seconds"),
            humanize(magnitude, locale=tag, with_suffix=True),
        )

    console.print(table)


def main() -> None:
    """Entry point for the chronofmt console script."""
    app()


if __name__ == "__main__":
    main()
