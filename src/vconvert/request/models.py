"""Pydantic model for a validated conversion request.

The request is built once from the parsed command line and never mutated;
resolvers derive new values from it instead of changing it.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vconvert.core.units import parse_bitrate

# Valid encoding presets (fastest to slowest)
VALID_PRESETS = (
    "ultrafast",
    "superfast",
    "veryfast",
    "faster",
    "fast",
    "medium",
    "slow",
    "slower",
    "veryslow",
    "placebo",
)

DEFAULT_AUDIO_BITRATE = "384k"


class ConversionRequest(BaseModel):
    """All resolved conversion options for one run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_path: Path

    # Video quality
    quality: str | None = None
    crf: int | None = Field(default=None, ge=0, le=51)
    target_bitrate: str | None = None
    preset: str | None = None
    video_codec: Literal["h264", "h265"] | None = None

    # Audio
    keep_audio: bool = False
    normalize_loudness: bool = False
    audio_channels: int | None = Field(default=None, ge=1)
    audio_bitrate: str = DEFAULT_AUDIO_BITRATE
    audio_samplerate: int | None = Field(default=None, ge=1)
    audio_delay: int | None = None

    # Subtitles and chapters
    no_subtitles: bool = False
    no_chapters: bool = False

    # Video filters
    deinterlace: bool = False
    crop: bool = False
    resize: str | None = None
    hdr_to_sdr: bool = False
    colorspace: str | None = None

    # Output constraints
    max_size: str | None = None
    preview: bool = False

    # System
    threads: int | None = Field(default=None, ge=1)
    priority: Literal["normal", "low"] = "normal"
    overwrite: bool = False
    dry_run: bool = False

    @field_validator("preset")
    @classmethod
    def validate_preset(cls, v: str | None) -> str | None:
        """Validate encoding preset."""
        if v is not None and v not in VALID_PRESETS:
            raise ValueError(
                f"Invalid preset '{v}'. Must be one of: {', '.join(VALID_PRESETS)}"
            )
        return v

    @field_validator("audio_bitrate")
    @classmethod
    def validate_audio_bitrate(cls, v: str) -> str:
        """Validate audio bitrate format."""
        if parse_bitrate(v) is None:
            raise ValueError(
                f"Invalid bitrate '{v}'. "
                "Must be a number followed by M or k (e.g., '384k')."
            )
        return v

    @property
    def has_audio_overrides(self) -> bool:
        """True if any per-track audio re-encode option was requested."""
        return (
            self.audio_channels is not None
            or self.audio_samplerate is not None
            or self.audio_delay is not None
            or self.normalize_loudness
        )
