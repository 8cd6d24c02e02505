"""Domain models and enums for vconvert.

This package contains the types that flow through the conversion pipeline,
independent of the CLI, the prober and the encoder.
"""

from vconvert.domain.enums import (
    Colorspace,
    RateControlMode,
    StreamKind,
    VideoCodec,
)
from vconvert.domain.models import (
    DEFAULT_PIXEL_FORMAT,
    Advisory,
    AudioTrackPlan,
    FilterChain,
    FilterStage,
    RateControl,
    StreamDescriptor,
    SubtitleSelection,
    VideoEncodeSpec,
)

__all__ = [
    # Enums
    "Colorspace",
    "RateControlMode",
    "StreamKind",
    "VideoCodec",
    # Models
    "DEFAULT_PIXEL_FORMAT",
    "Advisory",
    "AudioTrackPlan",
    "FilterChain",
    "FilterStage",
    "RateControl",
    "StreamDescriptor",
    "SubtitleSelection",
    "VideoEncodeSpec",
]
