"""Conversion planning.

plan_conversion() runs every resolution step for one request, strictly in
order, and returns the assembled ConversionPlan. Only the injected prober and
selection provider touch the outside world; nothing here executes the
encoder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vconvert.config.models import EncoderConfig, ToolPathsConfig
from vconvert.core.formatting import format_file_size
from vconvert.core.units import parse_size
from vconvert.domain import (
    Advisory,
    AudioTrackPlan,
    FilterChain,
    StreamKind,
    SubtitleSelection,
    VideoEncodeSpec,
)
from vconvert.executor.transcode import (
    CommandPlan,
    assemble_command,
    build_priority_prefix,
)
from vconvert.introspector.interface import StreamProber
from vconvert.policy import (
    build_audio_plans,
    build_filter_chain,
    build_video_spec,
    parse_colorspace,
    parse_resize,
    resolve_preset,
    resolve_rate_control,
)
from vconvert.request.models import ConversionRequest
from vconvert.selection import (
    SelectionProvider,
    choose_audio_codec,
    choose_video_codec,
    select_streams,
    select_subtitles,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionPlan:
    """Everything resolved for one run, ready for display or execution."""

    request: ConversionRequest
    crf: int
    video: VideoEncodeSpec
    audio_codec: str
    audio_plans: tuple[AudioTrackPlan, ...]
    subtitles: SubtitleSelection
    filters: FilterChain
    max_size_bytes: int | None
    advisories: tuple[Advisory, ...]
    command: CommandPlan

    @property
    def audio_indexes(self) -> list[int]:
        """Selected audio stream indexes in selection order."""
        return [plan.stream_index for plan in self.audio_plans]


def plan_conversion(
    request: ConversionRequest,
    prober: StreamProber,
    provider: SelectionProvider,
    encoder: EncoderConfig | None = None,
    tools: ToolPathsConfig | None = None,
) -> ConversionPlan:
    """Resolve a request into a ConversionPlan.

    Steps run in this order: rate control, size limit, video codec choice,
    audio probing and selection, audio codec choice, subtitle probing and
    selection, audio plans, filter chain, command assembly. Option values
    that can be checked without the input file (size, resize, colorspace)
    are validated before any prober call.

    Args:
        request: Validated request.
        prober: Stream prober for the input file.
        provider: Source of interactive answers.
        encoder: Encoder defaults (analysis window, niceness).
        tools: Configured tool paths.

    Returns:
        ConversionPlan.

    Raises:
        ConversionError: Any resolution failure (unknown quality, invalid
            size, invalid stream selection, unknown colorspace, ...).
    """
    encoder = encoder or EncoderConfig()
    tools = tools or ToolPathsConfig()
    advisories: list[Advisory] = []

    rate = resolve_rate_control(request.quality, request.crf, request.target_bitrate)
    advisories.extend(rate.advisories)

    max_size_bytes = None
    if request.max_size is not None:
        max_size_bytes = parse_size(request.max_size)
        logger.warning("Output size capped at %d bytes", max_size_bytes)
        advisories.append(
            Advisory(
                "Encoding stops when the output reaches "
                f"{format_file_size(max_size_bytes)}; the result may be truncated"
            )
        )

    if request.resize:
        parse_resize(request.resize)
    if request.colorspace:
        parse_colorspace(request.colorspace)

    video_codec = choose_video_codec(provider, request.video_codec)
    preset = resolve_preset(video_codec, request.preset, encoder.preset)
    video = build_video_spec(video_codec, preset, rate.rate_control, request.threads)

    audio_streams = prober.probe(request.input_path, StreamKind.AUDIO)
    audio_indexes = select_streams(provider, audio_streams, StreamKind.AUDIO)
    audio_codec = choose_audio_codec(provider, audio_indexes, request.keep_audio)

    subtitle_streams = []
    if not request.no_subtitles:
        subtitle_streams = prober.probe(request.input_path, StreamKind.SUBTITLE)
    subtitles = select_subtitles(
        provider, subtitle_streams, suppress=request.no_subtitles
    )

    audio_plans, audio_advisories = build_audio_plans(
        audio_indexes, audio_codec, request
    )
    advisories.extend(audio_advisories)

    filters = build_filter_chain(
        deinterlace=request.deinterlace,
        crop=request.crop,
        resize=request.resize,
        hdr_to_sdr=request.hdr_to_sdr,
        colorspace=request.colorspace,
    )

    command = assemble_command(
        program=str(tools.ffmpeg or "ffmpeg"),
        input_path=request.input_path,
        output_path=request.output_path,
        video=video,
        filters=filters,
        audio_plans=audio_plans,
        subtitles=subtitles,
        overwrite=request.overwrite,
        preview=request.preview,
        no_chapters=request.no_chapters,
        max_size_bytes=max_size_bytes,
        analyze_duration=encoder.analyze_duration,
        probe_size=encoder.probe_size,
        prefix=build_priority_prefix(
            request.priority, encoder.nice_level, tools.nice
        ),
    )

    return ConversionPlan(
        request=request,
        crf=rate.crf,
        video=video,
        audio_codec=audio_codec,
        audio_plans=tuple(audio_plans),
        subtitles=subtitles,
        filters=filters,
        max_size_bytes=max_size_bytes,
        advisories=tuple(advisories),
        command=command,
    )
