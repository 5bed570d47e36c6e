"""Wait runner: process wait, timed wait with progress, then alert."""

import logging
import sys
import time
from typing import Callable

from . import alert
from .config import DEFAULT_SPEECH_TIMEOUT, DEFAULT_TICK, WaitConfig
from .errors import ProcessNotFoundError
from .process import wait_for_process
from .progress import ProgressPrinter
from .timer import wait_until_deadline


class Runner:
    """Runs one wait described by a WaitConfig."""

    def __init__(
        self,
        tick: float = DEFAULT_TICK,
        speech_timeout: float = DEFAULT_SPEECH_TIMEOUT,
        logger: logging.Logger | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.tick = tick
        self.speech_timeout = speech_timeout
        self.logger = logger or logging.getLogger("waiter")
        self.sleep = sleep
        self.clock = clock

    def run(self, config: WaitConfig) -> int:
        """
        Run the wait and the completion alert.

        Returns the exit code: 0 on completion, 1 if the process to wait
        on never existed.
        """
        self.logger.info(f"Starting wait: {config}")

        if config.waits_on_process:
            try:
                self._wait_for_pid(config.wait_pid)
            except ProcessNotFoundError as e:
                self.logger.error(str(e))
                print("\nERROR: No such process", file=sys.stderr)
                return 1

        if config.duration > 0:
            self._timed_wait(config)

        alert.post_notification(config.message, self.logger)
        if config.speak:
            alert.speak(config.message, self.speech_timeout, self.logger, sleep=self.sleep)

        self.logger.info("Wait complete")
        return 0

    def _wait_for_pid(self, pid: int) -> None:
        sys.stderr.write(f"Waiting on process {pid}...")
        sys.stderr.flush()
        if not wait_for_process(pid, interval=self.tick, sleep=self.sleep):
            raise ProcessNotFoundError(pid)
        print("DONE", file=sys.stderr)

    def _timed_wait(self, config: WaitConfig) -> None:
        printer = ProgressPrinter(config.duration, show_bar=config.show_bar)
        wait_until_deadline(
            config.duration,
            self.tick,
            on_tick=printer.update,
            clock=self.clock,
            sleep=self.sleep,
        )
        printer.finish()
