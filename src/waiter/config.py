"""Configuration for a single waiter run."""

import math
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError


# Environment variables read by load_settings()
TICK_ENV = "WAITER_TICK"
SPEECH_TIMEOUT_ENV = "WAITER_SPEECH_TIMEOUT"
LOG_PATH_ENV = "WAITER_LOG"

DEFAULT_TICK = 0.1
DEFAULT_SPEECH_TIMEOUT = 5.0


@dataclass(frozen=True)
class WaitConfig:
    """What to wait for and how to announce it. Built once by the CLI."""

    duration: float = 0.0
    message: str = ""
    speak: bool = False
    wait_pid: int | None = None
    show_bar: bool = True

    @property
    def waits_on_process(self) -> bool:
        return self.wait_pid is not None and self.wait_pid > 0


@dataclass(frozen=True)
class Settings:
    """Tunables taken from the environment."""

    tick_period: float
    speech_timeout: float
    log_path: Path

    def validate(self) -> tuple[bool, str | None]:
        """
        Validate settings values.

        Returns:
            tuple[bool, str | None]: (is_valid, error_message)
        """
        if not math.isfinite(self.tick_period) or self.tick_period <= 0:
            return False, f"{TICK_ENV} must be a positive number of seconds"

        if not math.isfinite(self.speech_timeout) or self.speech_timeout <= 0:
            return False, f"{SPEECH_TIMEOUT_ENV} must be a positive number of seconds"

        return True, None


def _float_env(environ, name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_settings(environ=None) -> Settings:
    """
    Build Settings from WAITER_* environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ

    Returns:
        Settings: Validated settings

    Raises:
        ConfigError: If a variable is not a number or out of range
    """
    if environ is None:
        environ = os.environ

    log_path = environ.get(LOG_PATH_ENV)
    settings = Settings(
        tick_period=_float_env(environ, TICK_ENV, DEFAULT_TICK),
        speech_timeout=_float_env(environ, SPEECH_TIMEOUT_ENV, DEFAULT_SPEECH_TIMEOUT),
        log_path=Path(log_path).expanduser() if log_path else Path.home() / ".waiter.log",
    )

    is_valid, error = settings.validate()
    if not is_valid:
        raise ConfigError(error)

    return settings
