"""Pytest configuration and fixtures."""

import io

import pytest
from rich.console import Console

from unit_converter.conversions import UnitConverter


@pytest.fixture
def converter():
    """Return a fresh UnitConverter."""
    return UnitConverter()


@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def err_console():
    """Error console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace stdin with the given lines."""
    def _feed(*lines: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))
    return _feed
