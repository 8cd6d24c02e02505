"""Core utilities package.

Pure helpers with no dependencies on the rest of vconvert: unit parsing,
display formatting and subprocess invocation.
"""

from vconvert.core.formatting import format_file_size, format_megabytes
from vconvert.core.subprocess_utils import run_command
from vconvert.core.units import SIZE_UNITS, parse_bitrate, parse_size

__all__ = [
    # formatting
    "format_file_size",
    "format_megabytes",
    # subprocess_utils
    "run_command",
    # units
    "SIZE_UNITS",
    "parse_bitrate",
    "parse_size",
]
