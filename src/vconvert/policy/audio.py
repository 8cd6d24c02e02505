"""Audio track planning.

Turns the ordered list of selected audio stream indexes and the global
encoding choice into one AudioTrackPlan per selected stream.
"""

from __future__ import annotations

import logging

from vconvert.domain import Advisory, AudioTrackPlan
from vconvert.request.models import ConversionRequest

logger = logging.getLogger(__name__)

COPY_CODEC = "copy"

# Encoding choices offered interactively (free text is accepted as well)
AUDIO_CODEC_CHOICES: dict[str, str] = {
    "copy": "Keep original codec (DTS, TrueHD, etc.) - Best quality",
    "ac3": "Dolby Digital - Universal compatibility",
    "aac": "Advanced Audio Codec - Modern, efficient",
    "mp3": "MPEG Audio Layer 3 - Compact",
}

DEFAULT_AUDIO_CODEC = "copy"


def get_audio_encoder(codec: str) -> str:
    """Get the ffmpeg audio encoder for an encoding choice.

    'mp3' maps to libmp3lame and 'aac' to the native aac encoder; any other
    value is passed through verbatim as the encoder name.
    """
    encoders = {
        "copy": COPY_CODEC,
        "mp3": "libmp3lame",
        "aac": "aac",
    }
    return encoders.get(codec.casefold(), codec)


def build_audio_plans(
    indexes: list[int],
    codec_choice: str,
    request: ConversionRequest,
) -> tuple[list[AudioTrackPlan], list[Advisory]]:
    """Build per-track audio plans in selection order.

    Output positions are assigned contiguously from 0 in the order the
    indexes were selected. In copy mode the source codec is kept and the
    channel, sample-rate, delay and loudness options do not apply.

    Args:
        indexes: Selected audio stream indexes, in selection order.
        codec_choice: Global encoding choice (copy, ac3, aac, mp3, or other).
        request: Conversion request carrying bitrate and per-track overrides.

    Returns:
        Tuple of (plans, advisories).
    """
    copy_mode = request.keep_audio or codec_choice.casefold() == COPY_CODEC
    advisories: list[Advisory] = []

    if copy_mode and indexes and request.has_audio_overrides:
        logger.warning("Audio overrides ignored because audio is stream-copied")
        advisories.append(
            Advisory(
                "Audio channel, sample rate, delay and loudness options are "
                "ignored when audio is copied"
            )
        )

    plans: list[AudioTrackPlan] = []
    for position, stream_index in enumerate(indexes):
        if copy_mode:
            plans.append(
                AudioTrackPlan(
                    stream_index=stream_index,
                    position=position,
                    codec=COPY_CODEC,
                )
            )
            continue

        plans.append(
            AudioTrackPlan(
                stream_index=stream_index,
                position=position,
                codec=get_audio_encoder(codec_choice),
                bitrate=request.audio_bitrate,
                channels=request.audio_channels,
                sample_rate=request.audio_samplerate,
                delay_ms=request.audio_delay,
                normalize=request.normalize_loudness,
            )
        )

    return plans, advisories
