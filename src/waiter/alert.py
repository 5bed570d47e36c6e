"""End-of-wait alerts: desktop notification, speech and terminal bell."""

import logging
import platform
import sys
import time
from typing import Callable, TextIO

from .backends.base import Notifier, Speaker
from .errors import NotificationError, SpeechError


NOTIFICATION_TITLE = "waiter"
DEFAULT_NOTIFICATION = "Done"
DEFAULT_SPOKEN = "done"

BELL = "\a"
BEEP_GAP = 0.6


# Cache for backend instances (for testing purposes)
_notifier_cache = None
_speaker_cache = None


def _clear_backend_cache() -> None:
    """Clear the backend caches. Used for testing purposes."""
    global _notifier_cache, _speaker_cache
    _notifier_cache = None
    _speaker_cache = None


def get_notifier() -> Notifier:
    """
    Auto-detect and return the notification backend for this platform.

    Returns:
        Notifier: Platform-specific notifier

    Raises:
        NotificationError: If no suitable backend is found
    """
    global _notifier_cache

    if _notifier_cache is not None:
        return _notifier_cache

    system = platform.system()

    if system == "Darwin":
        from .backends.macos import OsascriptNotifier

        notifier = OsascriptNotifier()
    elif system == "Linux":
        from .backends.linux import NotifySendNotifier

        notifier = NotifySendNotifier()
    elif system == "Windows":
        from .backends.windows import PowerShellNotifier

        notifier = PowerShellNotifier()
    else:
        raise NotificationError(f"Unsupported platform: {system}")

    if not notifier.available():
        raise NotificationError(f"{notifier.name()} not available on {system}")

    _notifier_cache = notifier
    return notifier


def get_speaker() -> Speaker:
    """
    Auto-detect and return the speech backend for this platform.

    Returns:
        Speaker: Platform-specific speaker

    Raises:
        SpeechError: If no suitable backend is found
    """
    global _speaker_cache

    if _speaker_cache is not None:
        return _speaker_cache

    system = platform.system()

    if system == "Darwin":
        from .backends.macos import SaySpeaker

        speaker = SaySpeaker()
    elif system == "Linux":
        from .backends.linux import get_linux_speaker

        speaker = get_linux_speaker()
    elif system == "Windows":
        from .backends.windows import PowerShellSpeaker

        speaker = PowerShellSpeaker()
    else:
        raise SpeechError(f"Unsupported platform: {system}")

    if not speaker.available():
        raise SpeechError(f"{speaker.name()} not available on {system}")

    _speaker_cache = speaker
    return speaker


def notification_body(message: str) -> str:
    """Notification text: the message without double quotes, or "Done"."""
    if not message:
        return DEFAULT_NOTIFICATION
    return message.replace('"', "")


def spoken_text(message: str) -> str:
    return message or DEFAULT_SPOKEN


def post_notification(message: str, logger: logging.Logger) -> bool:
    """
    Show the completion notification. Failures are logged, never raised.

    Returns:
        bool: True if the notification was posted
    """
    body = notification_body(message)
    try:
        notifier = get_notifier()
        notifier.notify(NOTIFICATION_TITLE, body)
    except NotificationError as e:
        logger.warning(f"Notification failed: {e}")
        return False

    logger.info(f"Posted notification via {notifier.name()}: {body}")
    return True


def beep(stream: TextIO | None = None, sleep: Callable[[float], None] = time.sleep) -> None:
    """Ring the terminal bell twice, BEEP_GAP seconds apart."""
    out = stream if stream is not None else sys.stderr
    out.write(BELL)
    out.flush()
    sleep(BEEP_GAP)
    out.write(BELL)
    out.flush()


def speak(
    message: str,
    timeout: float,
    logger: logging.Logger,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Say the message out loud, or beep if speech is unavailable or fails.

    Returns:
        bool: True if speech succeeded, False if the beep fallback was used
    """
    text = spoken_text(message)
    try:
        speaker = get_speaker()
        speaker.speak(text, timeout)
    except SpeechError as e:
        logger.warning(f"Speech failed, beeping instead: {e}")
        beep(sleep=sleep)
        return False

    logger.info(f"Spoke via {speaker.name()}: {text}")
    return True
