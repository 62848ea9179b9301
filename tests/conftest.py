"""
Worklog Test Configuration

Shared fixtures for all tests.
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from worklog import InMemoryLogStore, LocalFileLogStore, TimeTracker
from worklog import config as config_module


# =============================================================================
# FIXTURES: Date/Time
# =============================================================================

class FrozenClock:
    """Callable clock that can be moved forward between calls."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def set(self, moment: datetime):
        self.moment = moment


@pytest.fixture
def clock():
    """Saturday 2016-12-31 18:00:42, seconds are dropped by the tracker."""
    return FrozenClock(datetime(2016, 12, 31, 18, 0, 42))


# =============================================================================
# FIXTURES: Stores
# =============================================================================

@pytest.fixture
def memory_store():
    return InMemoryLogStore()


@pytest.fixture
def file_store(tmp_path):
    return LocalFileLogStore(tmp_path / "timetracker.txt")


@pytest.fixture
def tracker(memory_store, clock):
    return TimeTracker(memory_store, clock=clock)


# =============================================================================
# FIXTURES: Config
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config and WORKLOG__* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("WORKLOG__"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("WORKLOG_CONFIG", str(tmp_path / "no-such-config.yml"))
    monkeypatch.setattr(config_module, "_config", None)
    yield
