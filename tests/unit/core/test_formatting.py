"""Tests for display formatting helpers."""

from vconvert.core.formatting import format_file_size, format_megabytes


class TestFormatMegabytes:
    def test_two_decimals(self):
        assert format_megabytes(1_048_576) == "1.00"
        assert format_megabytes(52_428) == "0.05"

    def test_unknown_size(self):
        assert format_megabytes(None) == ""


class TestFormatFileSize:
    def test_units(self):
        assert format_file_size(2 * 1024**3) == "2.0 GB"
        assert format_file_size(500 * 1024**2) == "500.0 MB"
        assert format_file_size(1536) == "1.5 KB"
        assert format_file_size(12) == "12 B"
