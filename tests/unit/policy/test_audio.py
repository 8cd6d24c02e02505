"""Tests for audio track planning."""

from vconvert.policy.audio import build_audio_plans, get_audio_encoder


class TestGetAudioEncoder:
    def test_mapped_codecs(self):
        assert get_audio_encoder("mp3") == "libmp3lame"
        assert get_audio_encoder("aac") == "aac"
        assert get_audio_encoder("copy") == "copy"

    def test_other_values_pass_through(self):
        assert get_audio_encoder("ac3") == "ac3"
        assert get_audio_encoder("libopus") == "libopus"


class TestBuildAudioPlans:
    """Tests for build_audio_plans."""

    def test_positions_follow_selection_order(self, make_request):
        """Indexes '2,3' map to positions 0 and 1 in that order."""
        plans, _ = build_audio_plans([2, 3], "ac3", make_request())
        assert [(p.position, p.stream_index) for p in plans] == [(0, 2), (1, 3)]

    def test_selection_order_not_resorted(self, make_request):
        plans, _ = build_audio_plans([3, 1], "aac", make_request())
        assert [p.stream_index for p in plans] == [3, 1]
        assert [p.position for p in plans] == [0, 1]

    def test_plan_count_matches_selection(self, make_request):
        plans, _ = build_audio_plans([1, 2, 5], "copy", make_request())
        assert len(plans) == 3

    def test_no_selection(self, make_request):
        plans, advisories = build_audio_plans([], "aac", make_request())
        assert plans == []
        assert advisories == []

    def test_reencode_carries_overrides(self, make_request):
        request = make_request(
            audio_bitrate="256k",
            audio_channels=2,
            audio_samplerate=48000,
            audio_delay=150,
            normalize_loudness=True,
        )
        plans, advisories = build_audio_plans([1], "mp3", request)
        plan = plans[0]
        assert plan.codec == "libmp3lame"
        assert plan.bitrate == "256k"
        assert plan.channels == 2
        assert plan.sample_rate == 48000
        assert plan.delay_ms == 150
        assert plan.normalize is True
        assert advisories == []

    def test_copy_mode_ignores_overrides(self, make_request):
        request = make_request(audio_channels=2, normalize_loudness=True)
        plans, advisories = build_audio_plans([1, 2], "copy", request)
        assert all(p.is_copy for p in plans)
        assert all(p.channels is None and not p.normalize for p in plans)
        assert len(advisories) == 1

    def test_keep_audio_forces_copy(self, make_request):
        plans, _ = build_audio_plans([1], "aac", make_request(keep_audio=True))
        assert plans[0].codec == "copy"
        assert plans[0].bitrate is None
