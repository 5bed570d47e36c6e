"""Pytest configuration and fixtures for waiter tests."""

import pytest


# Clear backend caches before each test to avoid cache pollution
@pytest.fixture(autouse=True)
def _clear_backend_cache():
    """Clear notifier/speaker cache before each test."""
    from waiter.alert import _clear_backend_cache
    _clear_backend_cache()
    yield
    _clear_backend_cache()


@pytest.fixture(autouse=True)
def tmp_home(tmp_path, monkeypatch):
    """
    Mock home directory and clear WAITER_* variables for isolated tests.

    Args:
        tmp_path: Pytest temporary directory
        monkeypatch: Pytest monkeypatch fixture

    Yields:
        Path: Temporary home directory
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("WAITER_TICK", "WAITER_SPEECH_TIMEOUT", "WAITER_LOG"):
        monkeypatch.delenv(name, raising=False)
    yield tmp_path


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    """
    Fake clock/sleep pair for the timed wait.

    Yields:
        FakeClock: call it for the time, use .sleep to advance it
    """
    yield FakeClock()


@pytest.fixture
def silent_alerts():
    """
    Patch out notification and speech so tests never touch the desktop.

    Yields:
        tuple[Mock, Mock]: (notifier, speaker) mocks
    """
    from unittest.mock import Mock, patch

    notifier = Mock()
    notifier.name.return_value = "mock-notifier"
    speaker = Mock()
    speaker.name.return_value = "mock-speaker"

    with patch("waiter.alert.get_notifier", return_value=notifier), \
            patch("waiter.alert.get_speaker", return_value=speaker):
        yield notifier, speaker


@pytest.fixture(autouse=True)
def _reset_waiter_logger():
    """Drop handlers added by setup_logging so streams don't leak between tests."""
    import logging

    yield
    logger = logging.getLogger("waiter")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
