"""Notification and speech backends for each platform."""

from .base import Notifier, Speaker
from .linux import ESpeakSpeaker, NotifySendNotifier, SpdSaySpeaker, get_linux_speaker
from .macos import OsascriptNotifier, SaySpeaker
from .windows import PowerShellNotifier, PowerShellSpeaker

__all__ = [
    "Notifier",
    "Speaker",
    "NotifySendNotifier",
    "SpdSaySpeaker",
    "ESpeakSpeaker",
    "get_linux_speaker",
    "OsascriptNotifier",
    "SaySpeaker",
    "PowerShellNotifier",
    "PowerShellSpeaker",
]
