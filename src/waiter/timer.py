"""Timed wait loop."""

import logging
import time
from typing import Callable


logger = logging.getLogger("waiter.timer")


def wait_until_deadline(
    duration: float,
    tick: float,
    on_tick: Callable[[float], None] | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Block for `duration` seconds, calling `on_tick` after every sleep.

    The callback receives the time that was remaining before the sleep.
    A zero duration returns immediately without calling it.

    Args:
        duration: Seconds to wait (non-negative)
        tick: Maximum length of one sleep
        on_tick: Progress callback
        clock: Monotonic time source
        sleep: Blocking sleep function

    Returns:
        int: Number of ticks performed
    """
    if duration <= 0:
        return 0

    end = clock() + duration
    ticks = 0
    logger.debug(f"Waiting {duration:.3f}s in ticks of {tick:.3f}s")

    while True:
        now = clock()
        if now >= end:
            break
        remaining = end - now
        sleep(min(remaining, tick))
        ticks += 1
        if on_tick is not None:
            on_tick(remaining)

    logger.debug(f"Timed wait finished after {ticks} ticks")
    return ticks
