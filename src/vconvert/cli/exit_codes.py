"""Exit codes for the vconvert CLI.

Every failure exits with GENERAL_ERROR; help and --version exit with
SUCCESS.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the vconvert CLI."""

    SUCCESS = 0
    GENERAL_ERROR = 1
