"""Compact duration strings ("1m 30s", "2h", "1d12h") to milliseconds.

Parsing is lenient: chat input is messy and a single bad chunk should not
throw away the rest of the command.

    parse_duration("1m 30s")   -> 90000
    parse_duration("30s 1m")   -> 90000
    parse_duration("1m30s")    -> 90000
    parse_duration("5s abc")   -> 5000    (bad chunk contributes 0)
    parse_duration("1.5m")     -> 0       (no fractions)
"""

from __future__ import annotations

import re

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# longest cooldown accepted from chat
MAX_DURATION = 365 * DAY

UNIT_FACTORS: dict[str, int] = {
    "ms": 1,
    "s": SECOND,
    "sec": SECOND,
    "secs": SECOND,
    "second": SECOND,
    "seconds": SECOND,
    "m": MINUTE,
    "min": MINUTE,
    "mins": MINUTE,
    "minute": MINUTE,
    "minutes": MINUTE,
    "h": HOUR,
    "hr": HOUR,
    "hrs": HOUR,
    "hour": HOUR,
    "hours": HOUR,
    "d": DAY,
    "day": DAY,
    "days": DAY,
}

_CHUNK_PATTERN = re.compile(r"(?:\d+[a-z]+)+")
_PAIR_PATTERN = re.compile(r"(\d+)([a-z]+)")


def parse_duration(text: str) -> int:
    """Sum every `<integer><unit>` pair in text, in milliseconds."""
    total = 0
    for chunk in text.lower().split():
        if not _CHUNK_PATTERN.fullmatch(chunk):
            continue
        for amount, unit in _PAIR_PATTERN.findall(chunk):
            total += int(amount) * UNIT_FACTORS.get(unit, 0)
    return total


def format_duration(millis: int) -> str:
    """Render milliseconds back to the compact form, e.g. 90000 -> "1m 30s"."""
    if millis <= 0:
        return "0s"

    parts: list[str] = []
    for unit, factor in (("d", DAY), ("h", HOUR), ("m", MINUTE), ("s", SECOND), ("ms", 1)):
        amount, millis = divmod(millis, factor)
        if amount:
            parts.append(f"{amount}{unit}")
    return " ".join(parts)
