"""
String and number helpers.
"""

from __future__ import annotations

import locale
import math
import re
from functools import lru_cache

_PLAIN_INTEGER = re.compile(r"[1-9][0-9]*")

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")
_SI_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def zfill(num: int, length: int = 2) -> str:
    """Stringify `num` and left-pad it with zeros up to `length` characters."""
    return str(num).rjust(length, "0")


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(".*".join(re.escape(ch) for ch in keyword), re.IGNORECASE)


def keyword_compare(keyword: str, target: str) -> bool:
    """
    Fuzzy keyword match: every character of `keyword` must appear in
    `target`, in order, ignoring case. An empty keyword matches anything.

    Usage:
        keyword_compare("hw", "Hello World")   # True
        keyword_compare("wh", "Hello World")   # False
    """
    if not keyword:
        return True
    return _keyword_pattern(keyword).search(target) is not None


def numeric_compare(a: str, b: str) -> int:
    """
    Compare two strings, treating plain integers numerically.

    When both strings are digits only and neither starts with 0 they are
    compared as numbers; otherwise they are collated as strings ("019"
    sorts before "12"). Use with functools.cmp_to_key.
    """
    if _PLAIN_INTEGER.fullmatch(a) and _PLAIN_INTEGER.fullmatch(b):
        # no leading zeros, so the longer string is the larger number
        ka, kb = (len(a), a), (len(b), b)
        return (ka > kb) - (ka < kb)
    return locale.strcoll(a, b)


def safe_parse_int(
    value: str | int | float, fallback: int | None = None, base: int = 10
) -> int | None:
    """
    Parse an int, returning `fallback` when the value is not an integer.

    Strings must hold a whole integer ("12abc" gives `fallback`), floats are
    truncated and bools are not treated as ints.
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else fallback
    if isinstance(value, int):
        return value
    try:
        return int(value.strip(), base)
    except ValueError:
        return fallback


def safe_parse_float(value: str | int | float, fallback: float) -> float:
    """Parse a float, returning `fallback` unless the result is finite."""
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if math.isfinite(parsed) else fallback


def readable_size(size: float, si: bool = False, dp: int = 1) -> str:
    """
    Human readable file size.

    Args:
        size: Size in bytes
        si: Use powers of 1000 (kB, MB...) instead of 1024 (KiB, MiB...)
        dp: Decimal places

    Usage:
        readable_size(1536)             # "1.5 KiB"
        readable_size(1500, si=True)    # "1.5 kB"
    """
    thresh = 1000 if si else 1024
    if abs(size) < thresh:
        return f"{size} B"

    units = _SI_UNITS if si else _BINARY_UNITS
    r = 10**dp
    u = -1
    while True:
        size /= thresh
        u += 1
        if round(abs(size) * r) / r < thresh or u >= len(units) - 1:
            break
    return f"{size:.{dp}f} {units[u]}"
