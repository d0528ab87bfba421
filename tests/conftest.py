"""
Pytest configuration and fixtures for macsetup tests.
"""

import tempfile
from pathlib import Path

import pytest

from macsetup.settings import MacsetupSettings, reload_settings
from tests.fakes import FakeRunner, SimulatedHost


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def runner():
    """A scripted runner where every command succeeds unless told otherwise."""
    return FakeRunner()


@pytest.fixture
def host():
    """A simulated machine where installs make later presence checks pass."""
    return SimulatedHost()


@pytest.fixture
def settings(temp_dir):
    """Settings pointing every path into a temporary home directory."""
    return MacsetupSettings(home=temp_dir, brew_prefix="/opt/homebrew")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached global settings after each test."""
    yield
    reload_settings()
