"""Pure parsing functions for ffprobe key/value output.

ffprobe is queried with ``-of default=noprint_wrappers=1`` which prints one
``key=value`` pair per line, each stream starting with its ``index=`` line.
Stream tags are prefixed ``TAG:`` and disposition flags ``DISPOSITION:``.
These functions have no I/O so they can be tested directly.
"""

import logging

from vconvert.domain import StreamDescriptor, StreamKind

logger = logging.getLogger(__name__)

# Entries requested per stream kind
AUDIO_ENTRIES = (
    "stream=index,codec_name,channels,disposition:stream_tags=language,title"
)
SUBTITLE_ENTRIES = (
    "stream=index,codec_name,disposition:stream_tags=language,title,NUMBER_OF_BYTES"
)

DISPOSITION_FLAGS = {
    "default": "is_default",
    "forced": "is_forced",
    "hearing_impaired": "is_hearing_impaired",
}


def sanitize_string(value: str | None) -> str | None:
    """Sanitize a string by replacing invalid UTF-8 characters.

    Args:
        value: String value to sanitize.

    Returns:
        Sanitized string, or None if input was None or empty.
    """
    if not value:
        return None
    return value.encode("utf-8", errors="replace").decode("utf-8")


def parse_non_negative_int(value: str, field_name: str) -> int | None:
    """Parse a non-negative integer field, logging and dropping bad values."""
    try:
        parsed = int(value.strip())
    except ValueError:
        # ffprobe prints "N/A" for absent numeric fields
        if value.strip() not in ("", "N/A"):
            logger.warning("Expected int for %s, got %r", field_name, value)
        return None
    if parsed < 0:
        logger.warning("Invalid negative %s: %d", field_name, parsed)
        return None
    return parsed


def _apply_entry(record: dict, key: str, value: str) -> None:
    """Store one ffprobe entry into a stream record."""
    if key == "codec_name":
        record["codec"] = sanitize_string(value.strip())
    elif key == "channels":
        record["channels"] = parse_non_negative_int(value, "channels")
    elif key.startswith("TAG:"):
        tag = key[4:]
        if tag.casefold() == "language":
            record["language"] = sanitize_string(value.strip())
        elif tag.casefold() == "title":
            record["title"] = sanitize_string(value)
        elif tag.casefold() == "number_of_bytes":
            record["size_bytes"] = parse_non_negative_int(value, "NUMBER_OF_BYTES")
    elif key.startswith("DISPOSITION:"):
        attribute = DISPOSITION_FLAGS.get(key[12:])
        if attribute:
            record[attribute] = value.strip() == "1"


def parse_stream_records(output: str, kind: StreamKind) -> list[StreamDescriptor]:
    """Parse ffprobe key/value output into StreamDescriptors.

    Lines before the first valid ``index=`` and lines that are not
    ``key=value`` pairs are ignored. A stream whose index cannot be parsed
    is dropped along with its entries, and duplicate indexes keep the first
    occurrence.

    Args:
        output: Raw ffprobe stdout.
        kind: Stream kind the query selected.

    Returns:
        StreamDescriptors sorted ascending by index (empty for empty or
        unusable output).
    """
    records: dict[int, dict] = {}
    current: dict | None = None

    for raw_line in output.splitlines():
        line = raw_line.rstrip("\r")
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()

        if key == "index":
            index = parse_non_negative_int(value, "index")
            if index is None or index in records:
                current = None
                continue
            current = {"index": index, "kind": kind}
            records[index] = current
            continue

        if current is not None:
            _apply_entry(current, key, value)

    return [StreamDescriptor(**records[index]) for index in sorted(records)]
