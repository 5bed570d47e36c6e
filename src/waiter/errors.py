"""Custom exception types for waiter."""


class WaiterError(Exception):
    """Base exception for all waiter errors."""

    pass


class UsageError(WaiterError):
    """Raised when command-line input cannot be turned into a wait."""

    pass


class DurationError(UsageError):
    """Raised when a duration string is malformed or negative."""

    pass


class ConfigError(WaiterError):
    """Raised when an environment setting has an invalid value."""

    pass


class ProcessNotFoundError(WaiterError):
    """Raised when the process to wait on was never observed alive."""

    def __init__(self, pid: int):
        super().__init__(f"No such process: {pid}")
        self.pid = pid


class NotificationError(WaiterError):
    """Raised when a desktop notification cannot be posted."""

    pass


class SpeechError(WaiterError):
    """Raised when the text-to-speech command is missing, fails or times out."""

    pass
