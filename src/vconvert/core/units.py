"""Human-readable unit parsing.

Pure functions converting size and bitrate strings into integers.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from vconvert.exceptions import InvalidSizeUnit

# Size suffixes (binary multiples), longest first so "GB" wins over "B"
SIZE_UNITS: tuple[tuple[str, int], ...] = (
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
    ("B", 1),
)

_NUMBER_PATTERN = re.compile(r"^\d+(\.\d+)?$")


def parse_size(value: str) -> int:
    """Parse a size string like '2GB' or '500mb' into an exact byte count.

    Suffixes are case-insensitive. A bare number is interpreted as bytes.
    Fractional magnitudes are accepted when they resolve to a whole number
    of bytes (e.g. '1.5GB').

    Args:
        value: Size string with an optional GB, MB, KB or B suffix.

    Returns:
        Size in bytes.

    Raises:
        InvalidSizeUnit: If the string cannot be parsed.

    Examples:
        parse_size("2GB") -> 2147483648
        parse_size("100KB") -> 102400
        parse_size("12345") -> 12345
    """
    text = value.strip() if value else ""
    upper = text.upper()

    multiplier = 1
    number = upper
    for suffix, factor in SIZE_UNITS:
        if upper.endswith(suffix):
            multiplier = factor
            number = upper[: -len(suffix)].strip()
            break

    if not _NUMBER_PATTERN.match(number):
        raise InvalidSizeUnit(value)

    try:
        size = Decimal(number) * multiplier
    except InvalidOperation as e:
        raise InvalidSizeUnit(value) from e

    if size != size.to_integral_value():
        raise InvalidSizeUnit(value)
    return int(size)


def parse_bitrate(bitrate_str: str) -> int | None:
    """Parse a bitrate string like '10M' or '5000k' to bits per second.

    Args:
        bitrate_str: Bitrate string with M/m (megabits) or K/k (kilobits) suffix.

    Returns:
        Bitrate in bits per second, or None if parsing fails.

    Examples:
        parse_bitrate("10M") -> 10_000_000
        parse_bitrate("384k") -> 384_000
    """
    if not bitrate_str:
        return None

    bitrate_str = bitrate_str.strip()
    try:
        if bitrate_str[-1].casefold() == "m":
            result = int(float(bitrate_str[:-1]) * 1_000_000)
        elif bitrate_str[-1].casefold() == "k":
            result = int(float(bitrate_str[:-1]) * 1_000)
        else:
            # Assume bits per second
            result = int(bitrate_str)
    except (ValueError, IndexError, OverflowError):
        # OverflowError: "infk", "1e400M"
        return None
    return result if result > 0 else None
