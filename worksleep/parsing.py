"""Free-text input parsing for WorkSleep.

Every parser returns None when the text is unusable. Callers drop that
result and keep whatever value they had before.

Accepted grammar, after surrounding whitespace is stripped:
    integer      [+-]?[0-9]+              ('1_0', '٣', '6.5' are rejected)
    time of day  HH:MM or HH:MM:SS        (no offsets, no 'T' prefix)
"""

from __future__ import annotations

import re
from datetime import time

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")


def parse_int(text: str) -> int | None:
    """'6' -> 6, ' -2 ' -> -2, '6.5' / '1_0' / '' / 'six' -> None."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def parse_quantity(text: str, default: int = 1) -> int:
    """Quantity field of the new-task form; unparsable text means *default*."""
    value = parse_int(text)
    return default if value is None else value


def parse_time_of_day(text: str) -> time | None:
    """'23:00' or '23:00:30' -> time; anything else -> None."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not _TIME_RE.fullmatch(text):
        return None
    try:
        parsed = time.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        return None
    return parsed


def parse_bounded_int(text: str, low: int, high: int | None = None) -> int | None:
    """Integer within [low, high] (no upper bound when *high* is None)."""
    value = parse_int(text)
    if value is None or value < low:
        return None
    if high is not None and value > high:
        return None
    return value
