"""Utility functions and helpers for the kindctl application."""
import re

_DURATION_RE = re.compile(r"(\d+(?:\.\d+)?)(h|ms|m|s)")
_UNITS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str) -> float:
    """Parse a duration such as ``30s``, ``1m30s`` or ``0`` into seconds.

    Raises:
        ValueError: If the value is not a valid duration
    """
    value = (value or "").strip()
    if value in ("", "0"):
        return 0.0
    pos = 0
    total = 0.0
    for match in _DURATION_RE.finditer(value):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    if pos != len(value):
        raise ValueError(f"invalid duration {value!r}")
    return total
