"""Domain enums for vconvert.

This module contains enums shared by the resolver, selector and command
assembly modules.
"""

from enum import Enum


class StreamKind(Enum):
    """Kind of elementary stream inside a media container."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"

    @property
    def selector(self) -> str:
        """Single-letter ffmpeg/ffprobe stream specifier (v, a, s)."""
        return self.value[0]


class VideoCodec(Enum):
    """Supported output video codecs."""

    H264 = "h264"
    H265 = "h265"

    @property
    def encoder(self) -> str:
        """ffmpeg encoder implementing this codec."""
        return "libx264" if self is VideoCodec.H264 else "libx265"


class RateControlMode(Enum):
    """Video rate-control strategy."""

    CRF = "crf"  # Constant rate factor (quality-based)
    BITRATE = "bitrate"  # Target bitrate


class Colorspace(Enum):
    """Fixed colorspace conversion targets."""

    BT709 = "bt709"  # Standard HD (Rec.709)
    BT2020 = "bt2020"  # Wide gamut for 4K/HDR (Rec.2020)
