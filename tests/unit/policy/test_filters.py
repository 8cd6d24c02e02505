"""Tests for video filter chain construction."""

import pytest

from vconvert.exceptions import InvalidResize, UnknownColorspace
from vconvert.policy.filters import (
    HDR_TO_SDR_STAGES,
    build_filter_chain,
    parse_resize,
)


class TestBuildFilterChain:
    """Tests for build_filter_chain."""

    def test_empty_chain(self):
        chain = build_filter_chain()
        assert not chain
        assert chain.to_args() == []

    def test_fixed_order_regardless_of_flags(self):
        """resize, crop and deinterlace always come out deinterlace-first."""
        chain = build_filter_chain(resize="1280x720", crop=True, deinterlace=True)
        assert chain.features == ["deinterlace", "crop", "resize"]
        assert chain.expression == "yadif,cropdetect,crop,scale=1280:720"

    def test_full_chain_order(self):
        chain = build_filter_chain(
            deinterlace=True,
            crop=True,
            resize="1920x1080",
            hdr_to_sdr=True,
            colorspace="bt709",
        )
        assert chain.features == [
            "deinterlace",
            "crop",
            "resize",
            "hdr-to-sdr",
            "colorspace",
        ]
        assert chain.to_args()[0] == "-vf"

    def test_hdr_to_sdr_has_five_stages(self):
        chain = build_filter_chain(hdr_to_sdr=True)
        assert len(chain.stages) == 5
        assert chain.expression == ",".join(HDR_TO_SDR_STAGES)
        assert "desat=0" in chain.expression

    @pytest.mark.parametrize("colorspace", ["bt709", "bt2020", "BT709"])
    def test_colorspace_single_stage(self, colorspace):
        chain = build_filter_chain(colorspace=colorspace)
        assert len(chain.stages) == 1
        assert chain.stages[0].expression.startswith("colorspace=all=")

    def test_unknown_colorspace(self):
        with pytest.raises(UnknownColorspace, match="bt601"):
            build_filter_chain(colorspace="bt601")


class TestParseResize:
    def test_width_x_height(self):
        assert parse_resize("1920x1080") == (1920, 1080)

    def test_colon_separator(self):
        assert parse_resize("1280:720") == (1280, 720)

    def test_keep_aspect(self):
        assert parse_resize("1280x-2") == (1280, -2)

    @pytest.mark.parametrize("value", ["big", "1920", "0x720", "-1x-1", "1280x-3"])
    def test_invalid(self, value):
        with pytest.raises(InvalidResize):
            parse_resize(value)
