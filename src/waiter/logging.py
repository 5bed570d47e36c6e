"""Logging configuration for waiter."""

import logging
import sys
from pathlib import Path


def setup_logging(log_path: Path | None = None, verbose: bool = False) -> logging.Logger:
    """
    Configure logging to ~/.waiter.log

    Args:
        log_path: Log file location. Defaults to ~/.waiter.log
        verbose: Also echo DEBUG records to stderr

    Returns:
        logging.Logger: Configured logger instance
    """
    if log_path is None:
        log_path = Path.home() / ".waiter.log"

    logger = logging.getLogger("waiter")
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        handler = logging.FileHandler(log_path)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    except OSError as e:
        # If log file can't be created, log to console as fallback
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        logger.addHandler(console_handler)
        logger.warning(f"Could not create log file at {log_path}: {e}")

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(logging.Formatter("waiter: %(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    return logger
