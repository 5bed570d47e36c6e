"""Linux notification and speech backends."""

from shutil import which

from ..errors import NotificationError, SpeechError
from .base import Speaker, run_command


class NotifySendNotifier:
    """libnotify's notify-send."""

    def notify(self, title: str, body: str) -> None:
        run_command(["notify-send", "--app-name", title, "--", title, body], NotificationError)

    def available(self) -> bool:
        """Check if notify-send is available."""
        return which("notify-send") is not None

    def name(self) -> str:
        """Return backend name."""
        return "notify-send"


class SpdSaySpeaker:
    """speech-dispatcher client (spd-say)."""

    def speak(self, text: str, timeout: float) -> None:
        # -w blocks until the message has been spoken; "--" keeps a leading "-" in text
        run_command(["spd-say", "-w", "--", text], SpeechError, timeout=timeout)

    def available(self) -> bool:
        """Check if spd-say is available."""
        return which("spd-say") is not None

    def name(self) -> str:
        """Return backend name."""
        return "spd-say"


class ESpeakSpeaker:
    """eSpeak / eSpeak NG."""

    def __init__(self):
        self.command = "espeak-ng" if which("espeak-ng") else "espeak"

    def speak(self, text: str, timeout: float) -> None:
        run_command([self.command, "--", text], SpeechError, timeout=timeout)

    def available(self) -> bool:
        """Check if espeak or espeak-ng is available."""
        return which(self.command) is not None

    def name(self) -> str:
        """Return backend name."""
        return self.command


def get_linux_speaker() -> Speaker:
    """
    Get the first available Linux speech backend.

    Tries in order: spd-say, espeak-ng/espeak

    Returns:
        Speaker: First available speaker

    Raises:
        SpeechError: If no speech command is installed
    """
    speakers = [SpdSaySpeaker(), ESpeakSpeaker()]

    for speaker in speakers:
        if speaker.available():
            return speaker

    available_names = ", ".join(s.name() for s in speakers)
    raise SpeechError(f"No speech command available. Tried: {available_names}")
