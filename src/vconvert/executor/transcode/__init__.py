"""Transcode executor package for building and running ffmpeg commands.

Module organization:
- types.py: CommandGroup, ArgumentGroup, CommandPlan
- audio.py: Audio argument building
- command.py: Command assembly
- executor.py: TranscodeExecutor class
"""

from .audio import LOUDNORM_FILTER, build_audio_args, build_audio_filter
from .command import (
    PREVIEW_SECONDS,
    assemble_command,
    build_priority_prefix,
    build_stream_maps,
    build_subtitle_args,
)
from .executor import TranscodeExecutor
from .types import ArgumentGroup, CommandGroup, CommandPlan

__all__ = [
    # Types
    "ArgumentGroup",
    "CommandGroup",
    "CommandPlan",
    # Audio
    "LOUDNORM_FILTER",
    "build_audio_args",
    "build_audio_filter",
    # Command building
    "PREVIEW_SECONDS",
    "assemble_command",
    "build_priority_prefix",
    "build_stream_maps",
    "build_subtitle_args",
    # Executor
    "TranscodeExecutor",
]
