"""macOS notification and speech backends."""

from shutil import which

from ..errors import NotificationError, SpeechError
from .base import run_command


class OsascriptNotifier:
    """Notification Center via AppleScript."""

    def notify(self, title: str, body: str) -> None:
        script = f'display notification "{body}" with title "{title}"'
        run_command(["osascript", "-e", script], NotificationError)

    def available(self) -> bool:
        """Check if osascript is available."""
        return which("osascript") is not None

    def name(self) -> str:
        """Return backend name."""
        return "osascript"


class SaySpeaker:
    """The built-in `say` command."""

    def speak(self, text: str, timeout: float) -> None:
        run_command(["say", "--", text], SpeechError, timeout=timeout)

    def available(self) -> bool:
        """Check if say is available."""
        return which("say") is not None

    def name(self) -> str:
        """Return backend name."""
        return "say"
