"""Conversion policy: rate control, audio plans and video filters.

All functions here are pure; they derive new values from the request and
never mutate it.
"""

from vconvert.policy.audio import (
    AUDIO_CODEC_CHOICES,
    COPY_CODEC,
    DEFAULT_AUDIO_CODEC,
    build_audio_plans,
    get_audio_encoder,
)
from vconvert.policy.filters import (
    FEATURE_ORDER,
    HDR_TO_SDR_STAGES,
    build_filter_chain,
    parse_colorspace,
    parse_resize,
)
from vconvert.policy.quality import (
    CODEC_DEFAULT_PRESETS,
    QUALITY_CRF_VALUES,
    RateControlResolution,
    build_video_spec,
    resolve_crf,
    resolve_preset,
    resolve_rate_control,
)

__all__ = [
    # audio
    "AUDIO_CODEC_CHOICES",
    "COPY_CODEC",
    "DEFAULT_AUDIO_CODEC",
    "build_audio_plans",
    "get_audio_encoder",
    # filters
    "FEATURE_ORDER",
    "HDR_TO_SDR_STAGES",
    "build_filter_chain",
    "parse_colorspace",
    "parse_resize",
    # quality
    "CODEC_DEFAULT_PRESETS",
    "QUALITY_CRF_VALUES",
    "RateControlResolution",
    "build_video_spec",
    "resolve_crf",
    "resolve_preset",
    "resolve_rate_control",
]
