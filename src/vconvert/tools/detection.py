"""External tool detection for --version.

Detects ffmpeg (version line and libx264/libx265 encoder support) and the
standalone x265 binary. Missing or broken tools are reported, never raised.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess  # nosec B404 - subprocess is required for tool detection
from pathlib import Path

from vconvert.core.subprocess_utils import run_command
from vconvert.tools.models import DependencyReport, FFmpegInfo, ToolInfo

logger = logging.getLogger(__name__)

# Timeout for version/capability detection commands (seconds)
DETECTION_TIMEOUT = 10

REPORTED_ENCODERS = ("libx264", "libx265")


def _find_tool(name: str, configured_path: Path | None = None) -> Path | None:
    """Find a tool executable.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.

    Returns:
        Path to tool executable, or None if not found.
    """
    if configured_path:
        if configured_path.is_file():
            return configured_path
        logger.warning(
            "Configured path for %s is not a file: %s", name, configured_path
        )

    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)
    return None


def _run(args: list[str | Path]) -> tuple[str, str, int]:
    """Run a detection command; failures become a non-zero return code."""
    try:
        return run_command(args, timeout=DETECTION_TIMEOUT)
    except subprocess.TimeoutExpired:
        return "", "timeout", -1
    except OSError as e:
        logger.warning("Could not run %s: %s", args[0], e)
        return "", str(e), -1


def _first_line(output: str) -> str | None:
    for line in output.splitlines():
        if line.strip():
            return line.strip()
    return None


def parse_encoder_list(output: str) -> set[str]:
    """Parse ffmpeg -encoders output."""
    # Format: " V....D libx265    libx265 H.265 / HEVC (codec hevc)"
    pattern = re.compile(r"\s+[VASFXBDI.]{6}\s+(\S+)")
    return {
        match.group(1).casefold()
        for line in output.split("\n")
        if (match := pattern.match(line))
    }


def detect_ffmpeg(configured_path: Path | None = None) -> FFmpegInfo:
    """Detect ffmpeg, its version line and its encoders.

    Args:
        configured_path: Optional configured path to ffmpeg.

    Returns:
        FFmpegInfo (path is None when ffmpeg is not installed).
    """
    info = FFmpegInfo(name="ffmpeg", path=_find_tool("ffmpeg", configured_path))
    if info.path is None:
        return info

    stdout, stderr, rc = _run([info.path, "-version"])
    if rc != 0:
        logger.warning("ffmpeg -version failed: %s", stderr.strip())
        return info
    info.version_line = _first_line(stdout)

    stdout, stderr, rc = _run([info.path, "-hide_banner", "-encoders"])
    if rc == 0:
        info.encoders = parse_encoder_list(stdout)
    else:
        logger.warning("Failed to enumerate ffmpeg encoders: %s", stderr.strip())
    return info


def detect_x265() -> ToolInfo:
    """Detect the standalone x265 encoder binary.

    x265 prints its version banner on stderr.
    """
    info = ToolInfo(name="x265", path=_find_tool("x265"))
    if info.path is None:
        return info

    stdout, stderr, _rc = _run([info.path, "--version"])
    info.version_line = _first_line(stderr) or _first_line(stdout)
    return info


def detect_dependencies(ffmpeg_path: Path | None = None) -> DependencyReport:
    return DependencyReport(ffmpeg=detect_ffmpeg(ffmpeg_path), x265=detect_x265())


def format_dependency_report(report: DependencyReport) -> list[str]:
    """Render the dependency report as display lines."""
    ffmpeg = report.ffmpeg
    lines = ["Dependencies:"]
    if ffmpeg.is_available():
        lines.append(f"  ffmpeg: {ffmpeg.version_line}")
        for encoder in REPORTED_ENCODERS:
            status = "Available" if ffmpeg.has_encoder(encoder) else "Not available"
            lines.append(f"  {encoder}: {status}")
    else:
        lines.append("  ffmpeg: Not found")

    x265 = report.x265
    lines.append(f"  x265: {x265.version_line if x265.is_available() else 'Not found'}")
    return lines
