"""Display formatting for sizes."""

from vconvert.core.units import SIZE_UNITS


def format_megabytes(size_bytes: int | None) -> str:
    """Render a subtitle payload size in MB with two decimals.

    Returns an empty string when the size is unknown.
    """
    if size_bytes is None:
        return ""
    return f"{size_bytes / 1024**2:.2f}"


def format_file_size(size_bytes: int) -> str:
    """Render a byte count with the largest unit of the size table that fits.

    Examples:
        format_file_size(2147483648) -> "2.0 GB"
        format_file_size(12) -> "12 B"
    """
    for suffix, factor in SIZE_UNITS:
        if factor > 1 and size_bytes >= factor:
            return f"{size_bytes / factor:.1f} {suffix}"
    return f"{size_bytes} B"
