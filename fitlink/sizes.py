"""
Human-readable byte sizes.

Lowercase suffixes are binary (k=1024), uppercase are decimal (K=1000).
Formatting always uses decimal thresholds.
"""

import math

from fitlink.errors import InvalidFormat

SIZE_SUFFIXES = {
    "k": 1024,
    "K": 1000,
    "m": 1024**2,
    "M": 1000**2,
    "g": 1024**3,
    "G": 1000**3,
}

FORMAT_THRESHOLDS = (
    (1_000_000_000, "G"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def parse_size(text: str) -> int:
    """Parse a size string (e.g., '15M', '2.5g', '4096') into bytes."""
    cleaned = text.strip()
    if not cleaned:
        raise InvalidFormat(text, "empty string")

    number, suffix = cleaned[:-1], cleaned[-1]
    if suffix.isdigit() or suffix == ".":
        number, multiplier = cleaned, 1
    elif suffix in SIZE_SUFFIXES:
        multiplier = SIZE_SUFFIXES[suffix]
    else:
        raise InvalidFormat(text, f"unknown suffix '{suffix}'")

    try:
        value = float(number)
    except ValueError:
        raise InvalidFormat(text, "invalid number") from None

    if not math.isfinite(value) or value < 0:
        raise InvalidFormat(text, "invalid number")

    return int(value * multiplier)


def format_size(bytes_val: int) -> str:
    """Format bytes as a short human-readable string."""
    for threshold, unit in FORMAT_THRESHOLDS:
        if bytes_val >= threshold:
            return f"{bytes_val / threshold:.2f}{unit}"
    return str(bytes_val)
