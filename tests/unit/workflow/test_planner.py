"""Tests for plan_conversion."""

import pytest

from vconvert.config import EncoderConfig
from vconvert.domain import RateControlMode, StreamKind
from vconvert.exceptions import (
    InvalidSizeUnit,
    InvalidStreamSelection,
    UnknownColorspace,
    UnknownQualityLevel,
)
from vconvert.executor.transcode import CommandGroup
from vconvert.introspector import StubStreamProber
from vconvert.selection import ScriptedSelectionProvider
from vconvert.workflow import plan_conversion


class TestPlanConversion:
    """Tests for plan_conversion."""

    def test_interactive_run(self, make_request, stub_prober):
        # video codec, audio tracks, audio codec, subtitles
        provider = ScriptedSelectionProvider(["h265", "2,1", "ac3", "3"])
        plan = plan_conversion(make_request(), stub_prober, provider)

        assert plan.video.encoder == "libx265"
        assert plan.video.preset == "slow"
        assert plan.audio_indexes == [2, 1]
        assert [p.position for p in plan.audio_plans] == [0, 1]
        assert plan.audio_codec == "ac3"
        assert plan.subtitles.indexes == (3,)
        assert plan.command.group_args(CommandGroup.MAPS) == [
            "-map",
            "0:v:0",
            "-map",
            "0:2",
            "-map",
            "0:1",
            "-map",
            "0:3",
        ]

    def test_probes_audio_before_subtitles(self, make_request, stub_prober):
        plan_conversion(make_request(), stub_prober, ScriptedSelectionProvider())
        assert [kind for _path, kind in stub_prober.calls] == [
            StreamKind.AUDIO,
            StreamKind.SUBTITLE,
        ]

    def test_no_subtitles_skips_probe(self, make_request, stub_prober):
        provider = ScriptedSelectionProvider(["h264", "1", "copy"])
        plan = plan_conversion(make_request(no_subtitles=True), stub_prober, provider)
        assert [kind for _path, kind in stub_prober.calls] == [StreamKind.AUDIO]
        assert plan.command.group_args(CommandGroup.SUBTITLES) == ["-sn"]
        assert len(provider.prompts) == 3

    def test_h264_default_preset(self, make_request, stub_prober):
        provider = ScriptedSelectionProvider(["h264"])
        plan = plan_conversion(make_request(), stub_prober, provider)
        assert plan.video.preset == "medium"

    def test_configured_preset(self, make_request, stub_prober):
        plan = plan_conversion(
            make_request(),
            stub_prober,
            ScriptedSelectionProvider(),
            encoder=EncoderConfig(preset="veryslow"),
        )
        assert plan.video.preset == "veryslow"

    def test_target_bitrate(self, make_request, stub_prober):
        request = make_request(target_bitrate="5M", quality="ultra")
        plan = plan_conversion(request, stub_prober, ScriptedSelectionProvider())
        assert plan.video.rate_control.mode == RateControlMode.BITRATE
        assert "-crf" not in plan.command.argv
        assert "-b:v" in plan.command.argv
        assert any("--target-bitrate" in a.message for a in plan.advisories)

    def test_max_size(self, make_request, stub_prober):
        request = make_request(max_size="2GB")
        plan = plan_conversion(request, stub_prober, ScriptedSelectionProvider())
        assert plan.max_size_bytes == 2_147_483_648
        assert plan.command.group_args(CommandGroup.SIZE_LIMIT) == [
            "-fs",
            "2147483648",
        ]
        assert any("truncated" in a.message for a in plan.advisories)

    def test_low_priority(self, make_request, stub_prober):
        request = make_request(priority="low")
        plan = plan_conversion(request, stub_prober, ScriptedSelectionProvider())
        assert plan.command.argv[:4] == ["nice", "-n", "10", "ffmpeg"]

    def test_keep_audio(self, make_request, stub_prober):
        provider = ScriptedSelectionProvider(["h265", "1 2", ""])
        plan = plan_conversion(make_request(keep_audio=True), stub_prober, provider)
        assert plan.audio_codec == "copy"
        assert all(p.is_copy for p in plan.audio_plans)

    def test_no_audio_streams(self, make_request, subtitle_streams):
        prober = StubStreamProber(subtitle_streams)
        provider = ScriptedSelectionProvider(["h265", "4"])
        plan = plan_conversion(make_request(), prober, provider)
        assert plan.audio_plans == ()
        assert plan.subtitles.indexes == (4,)
        assert plan.command.group_args(CommandGroup.AUDIO) == []

    def test_unknown_quality_fails_before_probing(self, make_request, stub_prober):
        with pytest.raises(UnknownQualityLevel):
            plan_conversion(
                make_request(quality="extreme"),
                stub_prober,
                ScriptedSelectionProvider(),
            )
        assert stub_prober.calls == []

    def test_invalid_size_fails_before_probing(self, make_request, stub_prober):
        with pytest.raises(InvalidSizeUnit):
            plan_conversion(
                make_request(max_size="2TB"), stub_prober, ScriptedSelectionProvider()
            )
        assert stub_prober.calls == []

    def test_unknown_colorspace_fails_before_probing(self, make_request, stub_prober):
        with pytest.raises(UnknownColorspace):
            plan_conversion(
                make_request(colorspace="p3"), stub_prober, ScriptedSelectionProvider()
            )
        assert stub_prober.calls == []

    def test_invalid_audio_selection(self, make_request, stub_prober):
        provider = ScriptedSelectionProvider(["h265", "9"])
        with pytest.raises(InvalidStreamSelection):
            plan_conversion(make_request(), stub_prober, provider)
