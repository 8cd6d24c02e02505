"""External tool detection."""

from vconvert.tools.detection import (
    REPORTED_ENCODERS,
    detect_dependencies,
    detect_ffmpeg,
    detect_x265,
    format_dependency_report,
    parse_encoder_list,
)
from vconvert.tools.models import DependencyReport, FFmpegInfo, ToolInfo

__all__ = [
    "DependencyReport",
    "FFmpegInfo",
    "REPORTED_ENCODERS",
    "ToolInfo",
    "detect_dependencies",
    "detect_ffmpeg",
    "detect_x265",
    "format_dependency_report",
    "parse_encoder_list",
]
