"""Integration test fixtures: tool availability and generated media."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from vconvert.tools import detect_ffmpeg


def _tool_available(name: str) -> bool:
    """Check if an external tool is available in PATH."""
    return shutil.which(name) is not None


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("vconvert.cli.configure_logging"):
        yield


@pytest.fixture(scope="session")
def ffmpeg_with_x264() -> bool:
    """True if ffmpeg, ffprobe and the libx264 encoder are all available."""
    if not (_tool_available("ffmpeg") and _tool_available("ffprobe")):
        return False
    return detect_ffmpeg().has_encoder("libx264")


@pytest.fixture(scope="module")
def generated_sample(
    ffmpeg_with_x264: bool, tmp_path_factory: pytest.TempPathFactory
) -> Path | None:
    """Generate a 2 second Matroska file with one video and two audio streams.

    Returns None if ffmpeg is not available.
    """
    if not ffmpeg_with_x264:
        return None
    path = tmp_path_factory.mktemp("media") / "sample.mkv"
    subprocess.run(  # nosec B603 B607 - fixed argument vector
        [
            "ffmpeg",
            "-v",
            "error",
            "-f",
            "lavfi",
            "-i",
            "testsrc=duration=2:size=320x240:rate=25",
            "-f",
            "lavfi",
            "-i",
            "sine=frequency=440:duration=2",
            "-f",
            "lavfi",
            "-i",
            "sine=frequency=880:duration=2",
            "-map",
            "0:v",
            "-map",
            "1:a",
            "-map",
            "2:a",
            "-c:v",
            "libx264",
            "-c:a",
            "aac",
            "-metadata:s:a:0",
            "language=eng",
            "-metadata:s:a:1",
            "language=fre",
            str(path),
        ],
        check=True,
        capture_output=True,
    )
    return path
