"""Tests for the terminal selection provider."""

import click
from click.testing import CliRunner

from vconvert.cli.prompts import TerminalSelectionProvider
from vconvert.selection import VIDEO_CODEC_CHOICES


def _run_with_input(func, text):
    """Run func inside a click command, feeding text to stdin."""
    captured = {}

    @click.command()
    def cmd():
        captured["answer"] = func()

    result = CliRunner().invoke(cmd, input=text)
    return result, captured.get("answer")


class TestTerminalSelectionProvider:
    def test_choose_lists_streams(self, audio_streams):
        provider = TerminalSelectionProvider()
        result, answer = _run_with_input(
            lambda: provider.choose("Tracks", audio_streams), "2,1\n"
        )
        assert answer == "2,1"
        assert "Available audio tracks:" in result.output

    def test_choose_accepts_empty_answer(self, subtitle_streams):
        provider = TerminalSelectionProvider()
        result, answer = _run_with_input(
            lambda: provider.choose("Tracks", subtitle_streams), "\n"
        )
        assert answer == ""
        assert "Available subtitle tracks:" in result.output

    def test_choose_one_default(self):
        provider = TerminalSelectionProvider()
        result, answer = _run_with_input(
            lambda: provider.choose_one("Video codec", VIDEO_CODEC_CHOICES, "h265"),
            "\n",
        )
        assert answer == "h265"
        assert "libx264" in result.output
