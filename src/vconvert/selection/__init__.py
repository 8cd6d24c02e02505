"""Interactive stream and codec selection.

- SelectionProvider: Protocol answering the run's questions
- ScriptedSelectionProvider: canned answers for tests
- select_streams / select_subtitles: stream index selection
- choose_video_codec / choose_audio_codec: single-value choices
"""

from vconvert.selection.interface import SelectionProvider
from vconvert.selection.scripted import ScriptedSelectionProvider
from vconvert.selection.selector import (
    DEFAULT_VIDEO_CODEC,
    VIDEO_CODEC_CHOICES,
    choose_audio_codec,
    choose_video_codec,
    parse_index_selection,
    select_streams,
    select_subtitles,
)

__all__ = [
    "SelectionProvider",
    "ScriptedSelectionProvider",
    "DEFAULT_VIDEO_CODEC",
    "VIDEO_CODEC_CHOICES",
    "choose_audio_codec",
    "choose_video_codec",
    "parse_index_selection",
    "select_streams",
    "select_subtitles",
]
