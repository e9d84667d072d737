"""Shared test fixtures for nsdebug test suite."""

import io
from datetime import datetime, timedelta, timezone

import pytest

from nsdebug.core import device as _device_mod


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
def pytest_configure(config):
    config.addinivalue_line("markers", "slow: multi-threaded stress tests")


# ---------------------------------------------------------------------------
# Fake sinks and clocks
# ---------------------------------------------------------------------------
class TtyBuffer(io.StringIO):
    """StringIO that claims to be an interactive terminal."""

    def isatty(self):
        return True


class FakeClock:
    """Callable clock returning a fixed, manually advanced time."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 10, 17, 9, 30, 12, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing plain output."""
    return io.StringIO()


@pytest.fixture
def tty():
    """A buffer that reports itself as a terminal."""
    return TtyBuffer()


@pytest.fixture
def clock():
    """A FakeClock starting at 2026-10-17 09:30:12 UTC."""
    return FakeClock()


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Run every test without DEBUG/LOG_LEVEL/NO_COLOR and away from any .nsdebug.json."""
    for name in ("DEBUG", "LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_device():
    """Restore the module-level default Device after each test."""
    old = _device_mod._device
    _device_mod._device = None
    yield
    _device_mod._device = old
