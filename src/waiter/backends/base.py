"""Base protocols for notification and speech backends."""

import subprocess
from typing import Protocol


class Notifier(Protocol):
    """Interface for posting a desktop notification."""

    def notify(self, title: str, body: str) -> None:
        """
        Show a notification.

        Args:
            title: Notification title
            body: Notification text (already free of double quotes)

        Raises:
            NotificationError: If the notification could not be posted
        """
        ...

    def available(self) -> bool:
        """
        Check if the notification command exists on this system.

        Returns:
            bool: True if the backend can be used
        """
        ...

    def name(self) -> str:
        """Human-readable backend name (e.g., "osascript", "notify-send")."""
        ...


class Speaker(Protocol):
    """Interface for text-to-speech."""

    def speak(self, text: str, timeout: float) -> None:
        """
        Say `text` out loud and return when done.

        Args:
            text: Words to speak
            timeout: Seconds before the speech process is killed

        Raises:
            SpeechError: If the command fails or times out
        """
        ...

    def available(self) -> bool:
        """Check if the speech command exists on this system."""
        ...

    def name(self) -> str:
        """Human-readable backend name (e.g., "say", "espeak")."""
        ...


def run_command(cmd: list[str], error_cls: type[Exception], timeout: float | None = None) -> None:
    """
    Run a helper command to completion, converting failures to `error_cls`.

    subprocess.run kills the child when the timeout expires.
    """
    try:
        subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            check=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise error_cls(f"{cmd[0]} not found") from e
    except subprocess.TimeoutExpired as e:
        raise error_cls(f"{cmd[0]} timed out after {timeout}s") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode(errors="replace").strip()
        raise error_cls(f"{cmd[0]} exited with {e.returncode}: {stderr}") from e
    except OSError as e:
        raise error_cls(f"{cmd[0]} could not be started: {e}") from e
