"""Stream and codec selection.

Presents probed streams to a SelectionProvider and normalizes the answers
into ordered index lists. Selection order is preserved, never re-sorted.
"""

from __future__ import annotations

import logging
import re

from vconvert.domain import StreamDescriptor, StreamKind, SubtitleSelection, VideoCodec
from vconvert.exceptions import InvalidStreamSelection
from vconvert.policy.audio import AUDIO_CODEC_CHOICES, DEFAULT_AUDIO_CODEC
from vconvert.selection.interface import SelectionProvider

logger = logging.getLogger(__name__)

VIDEO_CODEC_CHOICES: dict[str, str] = {
    VideoCodec.H264.value: VideoCodec.H264.encoder,
    VideoCodec.H265.value: VideoCodec.H265.encoder,
}
DEFAULT_VIDEO_CODEC = VideoCodec.H265

AUDIO_PROMPT = "Enter audio track indexes to keep (e.g., 1 2)"
SUBTITLE_PROMPT = "Enter subtitle track indexes to keep (optional)"
AUDIO_CODEC_PROMPT = "Audio codec"
VIDEO_CODEC_PROMPT = "Video codec"

_SEPARATORS = re.compile(r"[,\s]+")


def parse_index_selection(text: str | None) -> list[int]:
    """Parse a comma- and/or space-separated list of stream indexes.

    Order is preserved and repeated indexes are kept only once.

    Args:
        text: Raw answer, e.g. "2,3", "2 3" or "2, 3".

    Returns:
        Ordered list of indexes (empty for a blank answer).

    Raises:
        InvalidStreamSelection: If a token is not a non-negative integer.
    """
    if not text:
        return []

    indexes: list[int] = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        if not (token.isascii() and token.isdigit()):
            raise InvalidStreamSelection(f"Invalid stream index: '{token}'")
        index = int(token)
        if index not in indexes:
            indexes.append(index)
    return indexes


def select_streams(
    provider: SelectionProvider,
    streams: list[StreamDescriptor],
    kind: StreamKind,
) -> list[int]:
    """Ask the provider which streams to keep.

    No prompt is shown when there are no streams to choose from.

    Args:
        provider: Source of answers.
        streams: Probed streams of one kind, sorted by index.
        kind: Stream kind being selected.

    Returns:
        Selected indexes in selection order.

    Raises:
        InvalidStreamSelection: If the answer is malformed or names an index
            that is not one of the listed streams.
    """
    if not streams:
        logger.info("No %s streams to select from", kind.value)
        return []

    prompt = AUDIO_PROMPT if kind == StreamKind.AUDIO else SUBTITLE_PROMPT
    indexes = parse_index_selection(provider.choose(prompt, streams))

    available = {stream.index for stream in streams}
    unknown = [index for index in indexes if index not in available]
    if unknown:
        raise InvalidStreamSelection(
            f"No {kind.value} stream with index "
            f"{', '.join(str(i) for i in unknown)} "
            f"(available: {', '.join(str(i) for i in sorted(available))})"
        )

    logger.debug("Selected %s streams: %s", kind.value, indexes)
    return indexes


def select_subtitles(
    provider: SelectionProvider,
    streams: list[StreamDescriptor],
    suppress: bool,
) -> SubtitleSelection:
    """Select subtitle streams; an empty selection suppresses all subtitles.

    Args:
        provider: Source of answers.
        streams: Probed subtitle streams.
        suppress: True if subtitles were disabled up front (no prompt).

    Returns:
        SubtitleSelection in selection order.
    """
    if suppress:
        return SubtitleSelection()
    return SubtitleSelection(
        indexes=tuple(select_streams(provider, streams, StreamKind.SUBTITLE))
    )


def choose_video_codec(
    provider: SelectionProvider,
    requested: str | None = None,
) -> VideoCodec:
    """Resolve the output video codec, prompting when none was requested.

    Raises:
        InvalidStreamSelection: If the answer is not h264 or h265.
    """
    if requested is None:
        requested = provider.choose_one(
            VIDEO_CODEC_PROMPT, VIDEO_CODEC_CHOICES, DEFAULT_VIDEO_CODEC.value
        )
    try:
        return VideoCodec(requested.casefold().strip())
    except ValueError:
        raise InvalidStreamSelection(
            f"Unknown video codec: {requested} (use h264 or h265)"
        ) from None


def choose_audio_codec(
    provider: SelectionProvider,
    audio_indexes: list[int],
    keep_audio: bool,
) -> str:
    """Resolve the global audio encoding choice.

    The question is skipped (answering 'copy') when audio is kept as-is or
    no audio stream was selected. Free text is accepted and later passed to
    ffmpeg verbatim as the encoder name.
    """
    if keep_audio or not audio_indexes:
        return DEFAULT_AUDIO_CODEC
    answer = provider.choose_one(
        AUDIO_CODEC_PROMPT, AUDIO_CODEC_CHOICES, DEFAULT_AUDIO_CODEC
    )
    return answer.strip() or DEFAULT_AUDIO_CODEC
