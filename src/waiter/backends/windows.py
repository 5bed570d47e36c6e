"""Windows and WSL notification and speech backends (PowerShell)."""

from shutil import which

from ..errors import NotificationError, SpeechError
from .base import run_command


def _ps_quote(text: str) -> str:
    """Quote text as a PowerShell single-quoted literal."""
    return "'" + text.replace("'", "''") + "'"


class PowerShellNotifier:
    """Tray balloon notification through System.Windows.Forms."""

    def notify(self, title: str, body: str) -> None:
        ps_script = f"""
Add-Type -AssemblyName System.Windows.Forms
$icon = New-Object System.Windows.Forms.NotifyIcon
$icon.Icon = [System.Drawing.SystemIcons]::Information
$icon.Visible = $true
$icon.ShowBalloonTip(5000, {_ps_quote(title)}, {_ps_quote(body)}, 'Info')
Start-Sleep -Milliseconds 500
$icon.Dispose()
"""
        run_command(["powershell.exe", "-NoProfile", "-Command", ps_script], NotificationError)

    def available(self) -> bool:
        """Check if PowerShell is available."""
        return which("powershell.exe") is not None

    def name(self) -> str:
        """Return backend name."""
        return "PowerShell"


class PowerShellSpeaker:
    """System.Speech synthesizer."""

    def speak(self, text: str, timeout: float) -> None:
        ps_script = (
            "Add-Type -AssemblyName System.Speech; "
            "(New-Object System.Speech.Synthesis.SpeechSynthesizer)"
            f".Speak({_ps_quote(text)})"
        )
        run_command(
            ["powershell.exe", "-NoProfile", "-Command", ps_script],
            SpeechError,
            timeout=timeout,
        )

    def available(self) -> bool:
        """Check if PowerShell is available."""
        return which("powershell.exe") is not None

    def name(self) -> str:
        """Return backend name."""
        return "PowerShell"
