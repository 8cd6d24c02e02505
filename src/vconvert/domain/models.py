"""Domain models for vconvert.

These frozen dataclasses are built once per run and flow forward through the
pipeline: probed streams, per-track audio plans, the subtitle selection, the
video filter chain and the resolved video encode settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from vconvert.domain.enums import RateControlMode, StreamKind, VideoCodec

# Subtitle codecs stored as text (everything else is bitmap-based)
TEXT_SUBTITLE_CODECS = frozenset(
    {"subrip", "srt", "ssa", "ass", "text", "mov_text", "webvtt"}
)

# 10-bit planar 4:2:0 output for both libx264 and libx265
DEFAULT_PIXEL_FORMAT = "yuv420p10le"


@dataclass(frozen=True)
class StreamDescriptor:
    """One elementary stream as reported by the prober."""

    index: int
    kind: StreamKind
    codec: str | None = None
    channels: int | None = None  # audio only
    language: str | None = None
    title: str | None = None
    is_default: bool = False
    is_forced: bool = False
    is_hearing_impaired: bool = False
    size_bytes: int | None = None  # subtitle payload size (NUMBER_OF_BYTES tag)

    @property
    def is_text_subtitle(self) -> bool:
        """True if the codec stores subtitles as text rather than bitmaps."""
        if self.codec is None:
            return False
        codec = self.codec.casefold()
        return codec in TEXT_SUBTITLE_CODECS or "text" in codec


@dataclass(frozen=True)
class AudioTrackPlan:
    """Encode plan for one selected audio stream.

    ``position`` is the output audio stream number used in ffmpeg stream
    specifiers (``-c:a:<position>``). ``codec`` is ``"copy"`` for stream copy,
    otherwise the ffmpeg encoder name.
    """

    stream_index: int
    position: int
    codec: str
    bitrate: str | None = None
    channels: int | None = None
    sample_rate: int | None = None
    delay_ms: int | None = None
    normalize: bool = False

    @property
    def is_copy(self) -> bool:
        """True if the source codec is kept untouched."""
        return self.codec == "copy"


@dataclass(frozen=True)
class SubtitleSelection:
    """Ordered subtitle stream indexes; empty means all subtitles suppressed."""

    indexes: tuple[int, ...] = ()

    @property
    def suppressed(self) -> bool:
        """True if no subtitle stream is carried to the output."""
        return not self.indexes


@dataclass(frozen=True)
class FilterStage:
    """A single ffmpeg video filter.

    ``feature`` names the user-facing option that produced the stage
    (deinterlace, crop, resize, hdr-to-sdr, colorspace).
    """

    feature: str
    expression: str


@dataclass(frozen=True)
class FilterChain:
    """Ordered video filter graph."""

    stages: tuple[FilterStage, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.stages)

    @property
    def features(self) -> list[str]:
        """Features present in the chain, in chain order, without repeats."""
        seen: list[str] = []
        for stage in self.stages:
            if stage.feature not in seen:
                seen.append(stage.feature)
        return seen

    @property
    def expression(self) -> str:
        """Filter graph string suitable for ``-vf``."""
        return ",".join(stage.expression for stage in self.stages)

    def to_args(self) -> list[str]:
        """Return the ``-vf`` argument pair, or nothing for an empty chain."""
        if not self.stages:
            return []
        return ["-vf", self.expression]


@dataclass(frozen=True)
class RateControl:
    """Active video rate control: exactly one of CRF or target bitrate."""

    mode: RateControlMode
    crf: int | None = None
    bitrate: str | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one rate-control value is active."""
        if self.mode == RateControlMode.CRF:
            if self.crf is None or self.bitrate is not None:
                raise ValueError("CRF mode requires a crf value and no bitrate")
        elif self.bitrate is None or self.crf is not None:
            raise ValueError("Bitrate mode requires a bitrate and no crf value")

    def to_args(self) -> list[str]:
        """Return the ffmpeg rate-control arguments."""
        if self.mode == RateControlMode.CRF:
            return ["-crf", str(self.crf)]
        return ["-b:v", str(self.bitrate)]


@dataclass(frozen=True)
class VideoEncodeSpec:
    """Resolved video encoder settings."""

    codec: VideoCodec
    preset: str
    rate_control: RateControl
    pixel_format: str = DEFAULT_PIXEL_FORMAT
    threads: int | None = None

    @property
    def encoder(self) -> str:
        """ffmpeg encoder name."""
        return self.codec.encoder

    def to_args(self) -> list[str]:
        """Return the video encoding arguments in encoder order."""
        args = ["-c:v", self.encoder, "-preset", self.preset]
        args.extend(self.rate_control.to_args())
        args.extend(["-pix_fmt", self.pixel_format])
        if self.threads:
            args.extend(["-threads", str(self.threads)])
        return args


@dataclass(frozen=True)
class Advisory:
    """Non-fatal warning surfaced to the user before encoding starts."""

    message: str
    detail: str | None = None
