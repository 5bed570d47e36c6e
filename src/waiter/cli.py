"""waiter CLI - wait for a while (or for a process), then notify."""

import click

from . import __version__
from .config import WaitConfig, load_settings
from .durations import parse_duration
from .errors import ConfigError, DurationError, UsageError
from .logging import setup_logging
from .process import supports_pid_wait
from .runner import Runner


# Largest value kill(2) accepts as a pid_t
MAX_PID = 2**31 - 1

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Lets "-5" reach the duration argument so it can be rejected as negative
    "ignore_unknown_options": True,
}


def build_config(duration, message, speak, pid, no_bar) -> WaitConfig:
    """
    Turn raw command-line values into a WaitConfig.

    Raises:
        DurationError: If the duration is missing, malformed or negative
        UsageError: If --pid is given on a platform without a safe liveness probe
    """
    if pid is not None and not supports_pid_wait():
        raise UsageError("--pid is not supported on Windows")

    if duration is None:
        if pid is None:
            raise DurationError("duration is required (seconds, MM:SS or e.g. '1h 5m')")
        seconds = 0.0
    else:
        seconds = parse_duration(duration)

    return WaitConfig(
        duration=seconds,
        message=message or "",
        speak=speak,
        wait_pid=pid,
        show_bar=not no_bar,
    )


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("duration", required=False)
@click.argument("message", required=False, default="")
@click.option("-s", "--speak", is_flag=True, help="Speak the message when done (beeps if speech is unavailable)")
@click.option("-p", "--pid", type=click.IntRange(1, MAX_PID), help="Wait for this process to exit before the timed wait")
@click.option("--no-bar", is_flag=True, help="Show a plain countdown instead of a progress bar")
@click.option("-v", "--verbose", is_flag=True, help="Echo log messages to stderr")
@click.version_option(__version__, prog_name="waiter")
@click.pass_context
def cli(ctx, duration, message, speak, pid, no_bar, verbose):
    """Wait DURATION seconds, then post a notification with MESSAGE.

    DURATION may be plain seconds (2.5), MM:SS, HH:MM:SS or units such
    as '1h 30m'. It can be omitted when --pid is given.
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    logger = setup_logging(settings.log_path, verbose=verbose)

    try:
        config = build_config(duration, message, speak, pid, no_bar)
    except UsageError as e:
        logger.error(f"Invalid arguments: {e}")
        click.echo(str(e))
        ctx.exit(1)

    runner = Runner(
        tick=settings.tick_period,
        speech_timeout=settings.speech_timeout,
        logger=logger,
    )
    ctx.exit(runner.run(config))
