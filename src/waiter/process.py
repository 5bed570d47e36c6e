"""Process liveness probing for the --pid mode.

The probe sends signal 0, which performs the existence and permission
checks of kill(2) without delivering anything.
"""

import logging
import os
import platform
import time
from typing import Callable


logger = logging.getLogger("waiter.process")

# Poll interval for liveness checks (seconds)
POLL_INTERVAL = 0.1


def supports_pid_wait() -> bool:
    """Signal 0 is only a probe on POSIX; on Windows os.kill terminates the target."""
    return platform.system() != "Windows"


def is_alive(pid: int) -> bool:
    """Check if `pid` refers to an existing process."""
    try:
        os.kill(pid, 0)
    except (ProcessLookupError, OverflowError):
        return False
    except PermissionError:
        # Exists, but owned by another user
        return True
    except OSError as e:
        logger.debug(f"Liveness probe for PID {pid} failed: {e}")
        return False
    return True


def wait_for_process(
    pid: int,
    interval: float = POLL_INTERVAL,
    probe: Callable[[int], bool] = is_alive,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Block until `pid` stops answering the liveness probe.

    The first probe happens one interval after the call.

    Args:
        pid: Process to watch
        interval: Seconds between probes
        probe: Liveness check
        sleep: Blocking sleep function

    Returns:
        bool: False if the process was already gone at the first probe,
            True once it has disappeared after being seen alive
    """
    seen_alive = False
    while True:
        sleep(interval)
        if not probe(pid):
            logger.info(f"PID {pid} gone (seen alive: {seen_alive})")
            return seen_alive
        seen_alive = True
