"""ffprobe-based implementation of the StreamProber protocol."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for ffprobe invocation
from pathlib import Path

from vconvert.core.subprocess_utils import run_command
from vconvert.domain import StreamDescriptor, StreamKind
from vconvert.introspector.interface import StreamProbeError
from vconvert.introspector.parsers import (
    AUDIO_ENTRIES,
    SUBTITLE_ENTRIES,
    parse_stream_records,
)

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 60

_ENTRIES = {
    StreamKind.AUDIO: AUDIO_ENTRIES,
    StreamKind.SUBTITLE: SUBTITLE_ENTRIES,
}


class FFprobeStreamProber:
    """ffprobe-based implementation of the StreamProber protocol.

    Issues one ``-select_streams`` query per stream kind and parses the
    line-oriented key/value output.
    """

    def __init__(self, ffprobe_path: Path | str) -> None:
        """Initialize the prober.

        Args:
            ffprobe_path: Path (or PATH-resolvable name) of ffprobe.
        """
        self._ffprobe_path = str(ffprobe_path)

    def build_command(self, path: Path, kind: StreamKind) -> list[str]:
        """Build the ffprobe argument vector for one stream kind."""
        entries = _ENTRIES.get(kind)
        if entries is None:
            raise ValueError(f"Unsupported stream kind for probing: {kind.value}")
        return [
            self._ffprobe_path,
            "-v",
            "error",
            "-select_streams",
            kind.selector,
            "-show_entries",
            entries,
            "-of",
            "default=noprint_wrappers=1",
            str(path),
        ]

    def probe(self, path: Path, kind: StreamKind) -> list[StreamDescriptor]:
        """List streams of one kind in a media file.

        A failing ffprobe run is logged and treated as "no streams".

        Args:
            path: Path to the media file.
            kind: Stream kind to query.

        Returns:
            StreamDescriptors sorted by stream index.

        Raises:
            StreamProbeError: If ffprobe cannot be started.
        """
        try:
            stdout, stderr, returncode = run_command(
                self.build_command(path, kind), timeout=PROBE_TIMEOUT
            )
        except OSError as e:
            raise StreamProbeError(
                f"Could not run ffprobe ({self._ffprobe_path}): {e}"
            ) from e
        except subprocess.TimeoutExpired:
            logger.warning(
                "ffprobe timed out listing %s streams of %s", kind.value, path
            )
            return []

        if returncode != 0:
            logger.warning(
                "ffprobe failed listing %s streams of %s: %s",
                kind.value,
                path,
                stderr.strip() or f"exit code {returncode}",
            )
            return []

        streams = parse_stream_records(stdout, kind)
        logger.debug("Found %d %s streams in %s", len(streams), kind.value, path)
        return streams
