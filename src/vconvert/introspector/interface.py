"""StreamProber interface for stream discovery."""

from pathlib import Path
from typing import Protocol

from vconvert.domain import StreamDescriptor, StreamKind
from vconvert.exceptions import ConversionError


class StreamProbeError(ConversionError):
    """Raised when the prober cannot be run at all."""


class StreamProber(Protocol):
    """Protocol for stream discovery implementations.

    Implementations issue one query per stream kind and return the streams
    sorted ascending by index. Unreadable or empty prober output yields an
    empty list rather than an error.
    """

    def probe(self, path: Path, kind: StreamKind) -> list[StreamDescriptor]:
        """List streams of one kind in a media file.

        Args:
            path: Path to the media file.
            kind: Stream kind to query (audio or subtitle).

        Returns:
            StreamDescriptors sorted by stream index.
        """
        ...
