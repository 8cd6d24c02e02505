"""ffmpeg command building for transcoding.

Every group of arguments is built by its own function; assemble_command()
puts them together in the CommandGroup order and drops empty groups.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vconvert.domain import (
    AudioTrackPlan,
    FilterChain,
    SubtitleSelection,
    VideoEncodeSpec,
)

from .audio import build_audio_args
from .types import ArgumentGroup, CommandGroup, CommandPlan

logger = logging.getLogger(__name__)

# Encode only the first minute in preview mode
PREVIEW_SECONDS = 60


def build_analysis_args(analyze_duration: str, probe_size: str) -> list[str]:
    """Build input analysis arguments (larger windows help with long files)."""
    return ["-analyzeduration", analyze_duration, "-probesize", probe_size]


def build_subtitle_args(selection: SubtitleSelection) -> list[str]:
    """Copy the selected subtitles, or disable subtitles entirely."""
    if selection.suppressed:
        return ["-sn"]
    return ["-c:s", "copy"]


def build_stream_maps(
    audio_plans: list[AudioTrackPlan],
    subtitles: SubtitleSelection,
) -> list[str]:
    """Build explicit stream mapping arguments.

    The first video stream is always mapped, then the selected audio streams
    and subtitle streams in selection order. Streams not mapped are excluded
    from the output.
    """
    args: list[str] = ["-map", "0:v:0"]
    for track in audio_plans:
        args.extend(["-map", f"0:{track.stream_index}"])
    for index in subtitles.indexes:
        args.extend(["-map", f"0:{index}"])
    return args


def build_chapter_args(no_chapters: bool) -> list[str]:
    return ["-map_chapters", "-1" if no_chapters else "0"]


def build_size_limit_args(max_size_bytes: int | None) -> list[str]:
    if max_size_bytes is None:
        return []
    return ["-fs", str(max_size_bytes)]


def build_priority_prefix(
    priority: str,
    nice_level: int = 10,
    nice_path: Path | str | None = None,
) -> tuple[str, ...]:
    """Build the scheduling wrapper for low-priority runs."""
    if priority != "low":
        return ()
    return (str(nice_path or "nice"), "-n", str(nice_level))


def assemble_command(
    *,
    program: str,
    input_path: Path,
    output_path: Path,
    video: VideoEncodeSpec,
    filters: FilterChain,
    audio_plans: list[AudioTrackPlan],
    subtitles: SubtitleSelection,
    overwrite: bool = False,
    preview: bool = False,
    no_chapters: bool = False,
    max_size_bytes: int | None = None,
    analyze_duration: str = "100M",
    probe_size: str = "100M",
    prefix: tuple[str, ...] = (),
) -> CommandPlan:
    """Assemble the full ffmpeg invocation.

    Args:
        program: ffmpeg executable.
        input_path: Source file.
        output_path: Destination file.
        video: Resolved video encoder settings.
        filters: Video filter chain (may be empty).
        audio_plans: Per-track audio plans in selection order.
        subtitles: Selected subtitle streams.
        overwrite: Pass -y so ffmpeg replaces an existing output.
        preview: Encode only the first PREVIEW_SECONDS seconds.
        no_chapters: Drop chapter markers.
        max_size_bytes: Stop writing at this output size.
        analyze_duration: Value for -analyzeduration.
        probe_size: Value for -probesize.
        prefix: Scheduling wrapper placed before the program.

    Returns:
        CommandPlan with its groups in CommandGroup order.
    """
    candidates: dict[CommandGroup, list[str]] = {
        CommandGroup.OVERWRITE: ["-y"] if overwrite else [],
        CommandGroup.ANALYSIS: build_analysis_args(analyze_duration, probe_size),
        CommandGroup.INPUT: ["-i", str(input_path)],
        CommandGroup.PREVIEW: ["-t", str(PREVIEW_SECONDS)] if preview else [],
        CommandGroup.VIDEO: video.to_args(),
        CommandGroup.FILTERS: filters.to_args(),
        CommandGroup.AUDIO: build_audio_args(audio_plans),
        CommandGroup.SUBTITLES: build_subtitle_args(subtitles),
        CommandGroup.MAPS: build_stream_maps(audio_plans, subtitles),
        CommandGroup.CHAPTERS: build_chapter_args(no_chapters),
        CommandGroup.SIZE_LIMIT: build_size_limit_args(max_size_bytes),
        CommandGroup.OUTPUT: [str(output_path)],
    }

    groups = tuple(
        ArgumentGroup(group, tuple(args))
        for group, args in sorted(candidates.items())
        if args
    )
    plan = CommandPlan(program=program, groups=groups, prefix=prefix)
    logger.debug("Assembled command: %s", plan.display())
    return plan
