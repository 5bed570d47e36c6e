"""Parsing and formatting of wait durations.

Accepted forms:

    2.5          plain (fractional) seconds
    10:04        minutes:seconds
    1:02:03      hours:minutes:seconds
    6h 10m3s     integer amounts with s/m/h/d units, summed
"""

import math
import re

from .errors import DurationError


HOUR_IN_SECS = 60 * 60

UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": HOUR_IN_SECS,
    "d": 24 * HOUR_IN_SECS,
}

_TOKEN = re.compile(r"\s*(?:(\d+)|(\S))")


def parse_duration(text: str) -> float:
    """
    Parse a duration string into seconds.

    Args:
        text: User supplied duration

    Returns:
        float: Non-negative number of seconds

    Raises:
        DurationError: If the text is not a valid duration or is negative
    """
    s = text.strip().lower()
    if not s:
        raise DurationError("duration must not be empty")

    try:
        secs = float(s)
    except ValueError:
        pass
    else:
        if not math.isfinite(secs):
            raise DurationError(f"'{text}' is not a finite number of seconds")
        if secs < 0:
            raise DurationError("duration must be non-negative")
        return secs

    if ":" in s:
        secs = _parse_colon(s)
        if secs is not None:
            return _to_seconds(secs, text)

    return _to_seconds(_parse_human(s, text), text)


def _to_seconds(secs: int, original: str) -> float:
    try:
        return float(secs)
    except OverflowError:
        raise DurationError(f"'{original}' is too large")


def _parse_colon(s: str) -> int | None:
    parts = s.split(":")
    if not all(p.isdigit() for p in parts):
        return None
    if len(parts) == 2:
        minutes, seconds = (int(p) for p in parts)
        return 60 * minutes + seconds
    if len(parts) == 3:
        hours, minutes, seconds = (int(p) for p in parts)
        return HOUR_IN_SECS * hours + 60 * minutes + seconds
    return None


def _tokenize(s: str) -> list[int | str]:
    tokens: list[int | str] = []
    pos = 0
    while pos < len(s):
        match = _TOKEN.match(s, pos)
        if match is None:
            # Only trailing whitespace is left
            break
        number, unit = match.groups()
        tokens.append(int(number) if number is not None else unit)
        pos = match.end()
    return tokens


def _parse_human(s: str, original: str) -> int:
    tokens = _tokenize(s)
    total = 0
    i = 0
    while i < len(tokens):
        amount = tokens[i]
        if not isinstance(amount, int):
            raise DurationError(f"'{original}' is not a valid duration (expecting a number)")
        i += 1

        multiplier = 1
        if i < len(tokens):
            unit = tokens[i]
            if isinstance(unit, int):
                raise DurationError(f"'{original}' is not a valid duration (expecting a time unit)")
            if unit not in UNIT_SECONDS:
                raise DurationError(f"'{original}' is not a valid duration (unknown unit '{unit}')")
            multiplier = UNIT_SECONDS[unit]
            i += 1

        total += amount * multiplier
    return total


def format_duration(seconds: float) -> str:
    """Format seconds as MM:SS, or HH:MM:SS once there is at least one hour."""
    secs = max(0, int(seconds))
    hours, rest = divmod(secs, HOUR_IN_SECS)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
