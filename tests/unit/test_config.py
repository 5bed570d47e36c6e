"""Tests for WaitConfig and environment settings."""

import dataclasses
from pathlib import Path

import pytest

from waiter.config import (
    DEFAULT_SPEECH_TIMEOUT,
    DEFAULT_TICK,
    Settings,
    WaitConfig,
    load_settings,
)
from waiter.errors import ConfigError


class TestWaitConfig:
    """Tests for WaitConfig."""

    def test_defaults(self):
        config = WaitConfig()
        assert config.duration == 0.0
        assert config.message == ""
        assert config.speak is False
        assert config.wait_pid is None
        assert config.show_bar is True

    def test_immutable(self):
        config = WaitConfig(duration=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.duration = 2.0

    @pytest.mark.parametrize("pid,expected", [(None, False), (0, False), (-1, False), (42, True)])
    def test_waits_on_process(self, pid, expected):
        assert WaitConfig(wait_pid=pid).waits_on_process is expected


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, tmp_home):
        settings = load_settings({})
        assert settings.tick_period == DEFAULT_TICK
        assert settings.speech_timeout == DEFAULT_SPEECH_TIMEOUT
        assert settings.log_path == Path.home() / ".waiter.log"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("WAITER_TICK", "0.2")
        assert load_settings().tick_period == 0.2

    def test_overrides(self, tmp_path):
        settings = load_settings({
            "WAITER_TICK": "0.2",
            "WAITER_SPEECH_TIMEOUT": "10",
            "WAITER_LOG": str(tmp_path / "w.log"),
        })
        assert settings.tick_period == 0.2
        assert settings.speech_timeout == 10.0
        assert settings.log_path == tmp_path / "w.log"

    def test_blank_uses_default(self):
        assert load_settings({"WAITER_TICK": "  "}).tick_period == DEFAULT_TICK

    def test_not_a_number(self):
        with pytest.raises(ConfigError, match="WAITER_TICK must be a number"):
            load_settings({"WAITER_TICK": "fast"})

    @pytest.mark.parametrize("value", ["0", "-1", "inf", "nan"])
    def test_tick_out_of_range(self, value):
        with pytest.raises(ConfigError, match="WAITER_TICK"):
            load_settings({"WAITER_TICK": value})

    def test_speech_timeout_out_of_range(self):
        with pytest.raises(ConfigError, match="WAITER_SPEECH_TIMEOUT"):
            load_settings({"WAITER_SPEECH_TIMEOUT": "0"})


class TestSettingsValidate:
    """Tests for Settings.validate."""

    def test_valid(self, tmp_path):
        settings = Settings(tick_period=0.1, speech_timeout=5.0, log_path=tmp_path / "x.log")
        assert settings.validate() == (True, None)

    def test_invalid_tick(self, tmp_path):
        settings = Settings(tick_period=0, speech_timeout=5.0, log_path=tmp_path / "x.log")
        is_valid, error = settings.validate()
        assert is_valid is False
        assert "WAITER_TICK" in error
