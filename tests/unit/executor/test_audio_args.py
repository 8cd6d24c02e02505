"""Tests for per-track audio argument building."""

from vconvert.domain import AudioTrackPlan
from vconvert.executor.transcode.audio import (
    LOUDNORM_FILTER,
    build_audio_args,
    build_delay_filter,
)


class TestBuildDelayFilter:
    def test_positive_delay(self):
        assert build_delay_filter(150) == "adelay=150:all=1"

    def test_negative_delay_trims(self):
        assert build_delay_filter(-200) == "atrim=start=0.2,asetpts=PTS-STARTPTS"

    def test_zero(self):
        assert build_delay_filter(0) is None


class TestBuildAudioArgs:
    """Tests for build_audio_args."""

    def test_copy_tracks(self):
        plans = [
            AudioTrackPlan(stream_index=2, position=0, codec="copy"),
            AudioTrackPlan(stream_index=3, position=1, codec="copy"),
        ]
        assert build_audio_args(plans) == ["-c:a:0", "copy", "-c:a:1", "copy"]

    def test_reencode_per_position(self):
        plans = [
            AudioTrackPlan(
                stream_index=2,
                position=0,
                codec="ac3",
                bitrate="384k",
                channels=6,
                sample_rate=48000,
            ),
            AudioTrackPlan(stream_index=3, position=1, codec="ac3", bitrate="384k"),
        ]
        assert build_audio_args(plans) == [
            "-c:a:0",
            "ac3",
            "-b:a:0",
            "384k",
            "-ac:a:0",
            "6",
            "-ar:a:0",
            "48000",
            "-c:a:1",
            "ac3",
            "-b:a:1",
            "384k",
        ]

    def test_delay_and_loudness_share_one_filter(self):
        plans = [
            AudioTrackPlan(
                stream_index=1,
                position=0,
                codec="aac",
                bitrate="256k",
                delay_ms=150,
                normalize=True,
            )
        ]
        args = build_audio_args(plans)
        assert args.count("-filter:a:0") == 1
        assert args[args.index("-filter:a:0") + 1] == (
            f"adelay=150:all=1,{LOUDNORM_FILTER}"
        )

    def test_loudnorm_targets(self):
        assert LOUDNORM_FILTER == "loudnorm=I=-14:TP=-1.5:LRA=11"

    def test_no_tracks(self):
        assert build_audio_args([]) == []
