"""Stream discovery for vconvert.

- StreamProber: Protocol defining the discovery interface
- FFprobeStreamProber: Production implementation using ffprobe
- StubStreamProber: Stub implementation for testing
- StreamProbeError: Exception for prober failures
- parse_stream_records: Parse ffprobe key/value output
- format_stream_line / format_stream_list: Display helpers
"""

from vconvert.introspector.ffprobe import FFprobeStreamProber
from vconvert.introspector.formatters import format_stream_line, format_stream_list
from vconvert.introspector.interface import StreamProbeError, StreamProber
from vconvert.introspector.parsers import parse_stream_records
from vconvert.introspector.stub import StubStreamProber

__all__ = [
    "StreamProber",
    "StreamProbeError",
    "FFprobeStreamProber",
    "StubStreamProber",
    "parse_stream_records",
    # Formatters
    "format_stream_line",
    "format_stream_list",
]
