"""Short-lived external queries (ffprobe listings, version checks).

The encoder itself is run by vconvert.executor; this wrapper is for commands
whose output vconvert reads back. Argument vectors only, never a shell.
"""

from __future__ import annotations

import logging
import shlex
import subprocess  # nosec B404 - ffprobe, ffmpeg and x265 are external programs
import time
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120


def run_command(
    args: Sequence[str | Path], timeout: int = DEFAULT_TIMEOUT
) -> tuple[str, str, int]:
    """Run a query command and capture its output as text.

    Undecodable bytes in the output are replaced rather than raised, since
    stream titles and tags are not guaranteed to be valid UTF-8.

    Args:
        args: Program followed by its arguments.
        timeout: Seconds before the command is abandoned.

    Returns:
        Tuple of (stdout, stderr, returncode).

    Raises:
        subprocess.TimeoutExpired: If the command runs longer than timeout.
        OSError: If the program cannot be started.
    """
    argv = [str(arg) for arg in args]
    logger.debug("Running %s", shlex.join(argv), extra={"argv": argv})

    started = time.monotonic()
    try:
        completed = subprocess.run(  # nosec B603 - argv built by vconvert
            argv,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.warning("%s gave no answer within %ds", Path(argv[0]).name, timeout)
        raise

    logger.debug(
        "%s exited with %d after %.3fs",
        Path(argv[0]).name,
        completed.returncode,
        time.monotonic() - started,
    )
    return completed.stdout or "", completed.stderr or "", completed.returncode
