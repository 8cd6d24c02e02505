"""Formatters for displaying probed streams before selection."""

from vconvert.core.formatting import format_megabytes
from vconvert.domain import StreamDescriptor, StreamKind


def _flags(stream: StreamDescriptor) -> str:
    flags = ""
    if stream.is_forced:
        flags += " (forced)"
    if stream.is_default:
        flags += " (default)"
    if stream.is_hearing_impaired:
        flags += " (hearing_impaired)"
    return flags


def format_stream_line(stream: StreamDescriptor) -> str:
    """Format a single stream for the selection listing.

    Args:
        stream: Stream to format.

    Returns:
        One line, e.g. ``[1] lang: ENG - title: Main - 6 ch - codec: dts``.
    """
    language = (stream.language or "").upper()
    title = stream.title or ""
    codec = stream.codec or ""

    if stream.kind == StreamKind.SUBTITLE:
        kind = "text" if stream.is_text_subtitle else "bitmap"
        size = format_megabytes(stream.size_bytes)
        return (
            f"[{stream.index}] lang: {language} - title: {title} - "
            f"size: {size} MB - codec: {codec} ({kind}){_flags(stream)}"
        )

    channels = "" if stream.channels is None else str(stream.channels)
    return (
        f"[{stream.index}] lang: {language} - title: {title} - "
        f"{channels} ch - codec: {codec}"
    )


def format_stream_list(streams: list[StreamDescriptor]) -> str:
    """Format streams as an indented listing, one per line."""
    return "\n".join(f"  {format_stream_line(stream)}" for stream in streams)
