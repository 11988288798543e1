"""Pytest configuration and fixtures for chronofmt tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from chronofmt.core.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes config content into tmp_path.

    Usage:
        def test_something(write_config):
            path = write_config("locale: fr\\n")
    """

    def _write(content: str, name: str = "chronofmt.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def long_sample_ms() -> float:
    """1y 87d 2h 3m 3s 454ms 345us, built the way the locale tables are checked."""
    return 3454.345898 + 3 * MS_PER_MINUTE + 8 * MS_PER_HOUR + 452 * MS_PER_DAY
