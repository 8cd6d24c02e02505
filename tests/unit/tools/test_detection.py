"""Tests for external tool detection."""

from pathlib import Path
from unittest.mock import patch

from vconvert.tools import (
    DependencyReport,
    FFmpegInfo,
    ToolInfo,
    detect_ffmpeg,
    detect_x265,
    format_dependency_report,
    parse_encoder_list,
)

ENCODERS_OUTPUT = """\
Encoders:
 V..... = Video
 ------
 V....D libx264              libx264 H.264 / AVC / MPEG-4 AVC (codec h264)
 V....D libx265              libx265 H.265 / HEVC (codec hevc)
 A....D aac                  AAC (Advanced Audio Coding)
"""

FIND_TOOL = "vconvert.tools.detection._find_tool"
RUN_COMMAND = "vconvert.tools.detection.run_command"


class TestParseEncoderList:
    def test_names(self):
        encoders = parse_encoder_list(ENCODERS_OUTPUT)
        assert {"libx264", "libx265", "aac"} <= encoders


class TestDetectFFmpeg:
    def test_not_installed(self):
        with patch(FIND_TOOL, return_value=None):
            info = detect_ffmpeg()
        assert not info.is_available()

    def test_version_and_encoders(self):
        outputs = [
            ("ffmpeg version 6.1.1 Copyright (c) 2000-2023\nbuilt with gcc\n", "", 0),
            (ENCODERS_OUTPUT, "", 0),
        ]
        with patch(FIND_TOOL, return_value=Path("/usr/bin/ffmpeg")), patch(
            RUN_COMMAND, side_effect=outputs
        ):
            info = detect_ffmpeg()
        assert info.version_line == "ffmpeg version 6.1.1 Copyright (c) 2000-2023"
        assert info.has_encoder("libx265")

    def test_broken_binary(self):
        with patch(FIND_TOOL, return_value=Path("/usr/bin/ffmpeg")), patch(
            RUN_COMMAND, side_effect=OSError("exec format error")
        ):
            info = detect_ffmpeg()
        assert not info.is_available()


class TestDetectX265:
    def test_version_on_stderr(self):
        stderr = "x265 [info]: HEVC encoder version 3.5+1\nx265 [info]: build info\n"
        with patch(FIND_TOOL, return_value=Path("/usr/bin/x265")), patch(
            RUN_COMMAND, return_value=("", stderr, 0)
        ):
            info = detect_x265()
        assert info.version_line == "x265 [info]: HEVC encoder version 3.5+1"


class TestFormatDependencyReport:
    def test_all_found(self):
        report = DependencyReport(
            ffmpeg=FFmpegInfo(
                name="ffmpeg",
                path=Path("/usr/bin/ffmpeg"),
                version_line="ffmpeg version 6.1.1",
                encoders={"libx264"},
            ),
            x265=ToolInfo(
                name="x265", path=Path("/usr/bin/x265"), version_line="x265 3.5"
            ),
        )
        assert format_dependency_report(report) == [
            "Dependencies:",
            "  ffmpeg: ffmpeg version 6.1.1",
            "  libx264: Available",
            "  libx265: Not available",
            "  x265: x265 3.5",
        ]

    def test_nothing_found(self):
        report = DependencyReport(
            ffmpeg=FFmpegInfo(name="ffmpeg"), x265=ToolInfo(name="x265")
        )
        lines = format_dependency_report(report)
        assert "  ffmpeg: Not found" in lines
        assert "  x265: Not found" in lines
