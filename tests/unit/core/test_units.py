"""Tests for size and bitrate parsing."""

import pytest

from vconvert.core.units import parse_bitrate, parse_size
from vconvert.exceptions import InvalidSizeUnit


class TestParseSize:
    """Tests for parse_size."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2GB", 2 * 1024**3),
            ("500MB", 500 * 1024**2),
            ("100KB", 102_400),
            ("512B", 512),
            ("12345", 12_345),
        ],
    )
    def test_suffixes(self, value, expected):
        """Each suffix multiplies by its binary factor."""
        assert parse_size(value) == expected

    def test_suffix_is_case_insensitive(self):
        """Lowercase and mixed-case suffixes are accepted."""
        assert parse_size("2gb") == parse_size("2GB")
        assert parse_size("500Mb") == parse_size("500MB")

    def test_fractional_magnitude(self):
        """Fractions are fine when they come out to whole bytes."""
        assert parse_size("1.5GB") == 1_610_612_736

    def test_surrounding_whitespace_ignored(self):
        assert parse_size("  700MB ") == 700 * 1024**2

    @pytest.mark.parametrize("value", ["2TB", "GB", "abc", "", "-5MB", "1.5B"])
    def test_invalid_values(self, value):
        """Unknown suffixes, missing numbers and partial bytes are rejected."""
        with pytest.raises(InvalidSizeUnit):
            parse_size(value)

    def test_error_message_names_value(self):
        with pytest.raises(InvalidSizeUnit, match="2TB"):
            parse_size("2TB")


class TestParseBitrate:
    """Tests for parse_bitrate."""

    def test_megabits(self):
        assert parse_bitrate("5M") == 5_000_000

    def test_kilobits(self):
        assert parse_bitrate("2500k") == 2_500_000

    def test_fractional(self):
        assert parse_bitrate("1.5M") == 1_500_000

    def test_bare_number_is_bits_per_second(self):
        assert parse_bitrate("128000") == 128_000

    @pytest.mark.parametrize(
        "value", ["", "fast", "0k", "-5M", "M", "infk", "infM", "1e400M", "nank"]
    )
    def test_invalid_returns_none(self, value):
        assert parse_bitrate(value) is None
