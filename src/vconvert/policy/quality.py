"""Quality and rate-control resolution.

Maps the user's quality tier, explicit CRF and target bitrate onto a single
active rate-control mode for the video encoder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vconvert.domain import (
    Advisory,
    RateControl,
    RateControlMode,
    VideoCodec,
    VideoEncodeSpec,
)
from vconvert.exceptions import UnknownQualityLevel

logger = logging.getLogger(__name__)

# Quality tier -> CRF (lower is better quality)
QUALITY_CRF_VALUES: dict[str, int] = {
    "ultra": 16,
    "high": 18,
    "medium": 22,
    "low": 28,
}

DEFAULT_QUALITY = "high"

# Preset used when neither --speed nor the config file names one
CODEC_DEFAULT_PRESETS: dict[VideoCodec, str] = {
    VideoCodec.H264: "medium",
    VideoCodec.H265: "slow",
}


@dataclass(frozen=True)
class RateControlResolution:
    """Outcome of rate-control resolution.

    ``crf`` is always computed, even when bitrate mode is active, so it can
    be reported to the user.
    """

    rate_control: RateControl
    crf: int
    advisories: tuple[Advisory, ...] = ()


def resolve_crf(quality: str | None, crf: int | None) -> int:
    """Resolve the effective CRF value.

    An explicit CRF always wins, whatever the quality value (even an
    unknown one). Otherwise the quality tier is mapped to its CRF; an unset
    quality means 'high'.

    Args:
        quality: Quality tier (ultra, high, medium, low) or None.
        crf: Explicit CRF value or None.

    Returns:
        CRF value.

    Raises:
        UnknownQualityLevel: If no CRF was given and quality is not a known tier.
    """
    if crf is not None:
        return crf

    tier = DEFAULT_QUALITY if quality is None else quality.casefold().strip()
    try:
        return QUALITY_CRF_VALUES[tier]
    except KeyError:
        raise UnknownQualityLevel(str(quality)) from None


def resolve_rate_control(
    quality: str | None,
    crf: int | None,
    target_bitrate: str | None,
) -> RateControlResolution:
    """Resolve the single active rate-control mode.

    A target bitrate takes precedence over CRF/quality for the encode. When
    quality or CRF were also supplied, the conflict is reported as an
    advisory rather than an error.

    Args:
        quality: Quality tier or None.
        crf: Explicit CRF or None.
        target_bitrate: Target video bitrate (e.g., '5M') or None.

    Returns:
        RateControlResolution with the active mode and the computed CRF.

    Raises:
        UnknownQualityLevel: If no CRF was given and quality is unknown.
    """
    resolved_crf = resolve_crf(quality, crf)

    if not target_bitrate:
        return RateControlResolution(
            rate_control=RateControl(mode=RateControlMode.CRF, crf=resolved_crf),
            crf=resolved_crf,
        )

    advisories: list[Advisory] = []
    if quality is not None or crf is not None:
        logger.warning(
            "Target bitrate %s overrides CRF %d / quality %s",
            target_bitrate,
            resolved_crf,
            quality,
        )
        advisories.append(Advisory("--target-bitrate overrides CRF/quality settings"))

    return RateControlResolution(
        rate_control=RateControl(mode=RateControlMode.BITRATE, bitrate=target_bitrate),
        crf=resolved_crf,
        advisories=tuple(advisories),
    )


def build_video_spec(
    codec: VideoCodec,
    preset: str,
    rate_control: RateControl,
    threads: int | None = None,
) -> VideoEncodeSpec:
    """Build the video encode settings for the chosen codec.

    Args:
        codec: Output video codec.
        preset: Encoder preset (e.g., 'slow').
        rate_control: Active rate control.
        threads: Encoder thread count, or None for encoder default.

    Returns:
        VideoEncodeSpec with the fixed 10-bit output pixel format.
    """
    return VideoEncodeSpec(
        codec=codec,
        preset=preset,
        rate_control=rate_control,
        threads=threads,
    )


def resolve_preset(
    codec: VideoCodec,
    requested: str | None = None,
    configured: str | None = None,
) -> str:
    """Pick the encoder preset: --speed, then config, then the codec default."""
    return requested or configured or CODEC_DEFAULT_PRESETS[codec]
