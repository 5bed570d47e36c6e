"""Tests for the wait Runner."""

from unittest.mock import patch

import pytest

from waiter.config import WaitConfig
from waiter.runner import Runner


@pytest.fixture
def runner(fake_clock):
    return Runner(tick=0.25, speech_timeout=5.0, sleep=fake_clock.sleep, clock=fake_clock)


class TestTimedWait:
    """Runner with a duration only."""

    def test_zero_duration_alerts_without_progress(self, runner, fake_clock, silent_alerts, capsys):
        notifier, speaker = silent_alerts

        assert runner.run(WaitConfig(duration=0, message="now")) == 0

        captured = capsys.readouterr()
        assert captured.err == ""
        assert fake_clock.sleeps == []
        notifier.notify.assert_called_once_with("waiter", "now")
        speaker.speak.assert_not_called()

    def test_progress_then_alert(self, runner, fake_clock, silent_alerts, capsys):
        notifier, _ = silent_alerts

        assert runner.run(WaitConfig(duration=1.0, message="tea")) == 0

        err = capsys.readouterr().err
        lines = err.split("\r")
        # four ticks, final zero line, newline
        assert len(lines) == 6
        assert lines[0].startswith("  [" + "-" * 20 + "]")
        assert lines[4].startswith("  [" + "#" * 20 + "]")
        assert lines[-1] == "\n"
        assert sum(fake_clock.sleeps) == pytest.approx(1.0)
        notifier.notify.assert_called_once_with("waiter", "tea")

    def test_plain_progress(self, runner, silent_alerts, capsys):
        runner.run(WaitConfig(duration=0.5, show_bar=False))

        err = capsys.readouterr().err
        assert "time remaining:" in err
        assert "[" not in err

    def test_speak_flag(self, runner, silent_alerts):
        _, speaker = silent_alerts

        runner.run(WaitConfig(duration=2.5, message="lunch ready", speak=True))

        speaker.speak.assert_called_once_with("lunch ready", 5.0)

    def test_speech_failure_does_not_change_exit_code(self, runner, silent_alerts, capsys):
        from waiter.errors import SpeechError

        _, speaker = silent_alerts
        speaker.speak.side_effect = SpeechError("say not found")

        assert runner.run(WaitConfig(speak=True)) == 0
        assert "\a\a" in capsys.readouterr().err

    def test_notification_failure_does_not_change_exit_code(self, runner, silent_alerts):
        from waiter.errors import NotificationError

        notifier, _ = silent_alerts
        notifier.notify.side_effect = NotificationError("notify-send exited with 1")

        assert runner.run(WaitConfig(message="x")) == 0


class TestProcessWait:
    """Runner with --pid."""

    def test_missing_process_fails_without_timed_wait(self, runner, fake_clock, silent_alerts, capsys):
        notifier, _ = silent_alerts

        with patch("waiter.runner.wait_for_process", return_value=False) as mock_wait:
            assert runner.run(WaitConfig(duration=10, wait_pid=4242)) == 1

        mock_wait.assert_called_once()
        err = capsys.readouterr().err
        assert "Waiting on process 4242..." in err
        assert "ERROR: No such process" in err
        assert "[" not in err
        notifier.notify.assert_not_called()

    def test_process_exit_then_timed_wait(self, runner, silent_alerts, capsys):
        notifier, _ = silent_alerts

        with patch("waiter.runner.wait_for_process", return_value=True) as mock_wait:
            assert runner.run(WaitConfig(duration=0.5, wait_pid=4242, message="built")) == 0

        assert mock_wait.call_args.args[0] == 4242
        assert mock_wait.call_args.kwargs["interval"] == 0.25
        err = capsys.readouterr().err
        assert err.startswith("Waiting on process 4242...DONE\n")
        assert "00:00" in err
        notifier.notify.assert_called_once_with("waiter", "built")

    def test_non_positive_pid_ignored(self, runner, silent_alerts):
        with patch("waiter.runner.wait_for_process") as mock_wait:
            assert runner.run(WaitConfig(wait_pid=0)) == 0
        mock_wait.assert_not_called()
