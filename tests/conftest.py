"""Shared test fixtures."""

import time
from datetime import datetime, timezone

import pytest

from humanfmt.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and HUMANFMT_* variables out of tests."""
    monkeypatch.setattr(Settings, "CONFIG_PATH", tmp_path / "missing.toml")
    for name in ("UNITS", "PAST_LABEL", "FUTURE_LABEL", "LOG_LEVEL"):
        monkeypatch.delenv(f"HUMANFMT_{name}", raising=False)


@pytest.fixture
def now() -> datetime:
    """A fixed reference instant."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process-local timezone; restored after the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def set_tz(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield set_tz
    monkeypatch.undo()
    time.tzset()
