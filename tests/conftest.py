"""Shared test fixtures for vconvert."""

import shutil
import tempfile
from pathlib import Path

import pytest

from vconvert.domain import StreamDescriptor, StreamKind
from vconvert.introspector import StubStreamProber
from vconvert.request import build_request


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def input_file(temp_dir: Path) -> Path:
    """Create an (empty) input media file."""
    path = temp_dir / "movie.mkv"
    path.touch()
    return path


@pytest.fixture
def output_file(temp_dir: Path) -> Path:
    """Return a not-yet-existing output path."""
    return temp_dir / "movie.h265.mkv"


@pytest.fixture
def audio_streams() -> list[StreamDescriptor]:
    """Two audio streams: 5.1 DTS and stereo AAC commentary."""
    return [
        StreamDescriptor(
            index=1,
            kind=StreamKind.AUDIO,
            codec="dts",
            channels=6,
            language="eng",
            title="Main",
        ),
        StreamDescriptor(
            index=2,
            kind=StreamKind.AUDIO,
            codec="aac",
            channels=2,
            language="eng",
            title="Commentary",
        ),
    ]


@pytest.fixture
def subtitle_streams() -> list[StreamDescriptor]:
    """A text subtitle and a forced bitmap subtitle."""
    return [
        StreamDescriptor(
            index=3,
            kind=StreamKind.SUBTITLE,
            codec="subrip",
            language="eng",
            title="Full",
            size_bytes=52_428,
        ),
        StreamDescriptor(
            index=4,
            kind=StreamKind.SUBTITLE,
            codec="hdmv_pgs_subtitle",
            language="fre",
            title="Forced",
            is_forced=True,
            size_bytes=1_048_576,
        ),
    ]


@pytest.fixture
def stub_prober(audio_streams, subtitle_streams) -> StubStreamProber:
    """Prober returning the audio and subtitle fixtures."""
    return StubStreamProber(audio_streams + subtitle_streams)


@pytest.fixture
def make_request(input_file: Path, output_file: Path):
    """Factory building a validated request for the fixture paths."""

    def _make(**options):
        return build_request(input_file, output_file, **options)

    return _make
