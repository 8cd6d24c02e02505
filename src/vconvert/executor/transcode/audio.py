"""Audio argument building for ffmpeg.

Each selected audio track is addressed by its output position, so
``-c:a:1`` always refers to the second selected track, whatever its
stream index in the input.
"""

from __future__ import annotations

from vconvert.domain import AudioTrackPlan

# EBU R128 streaming target
LOUDNORM_FILTER = "loudnorm=I=-14:TP=-1.5:LRA=11"


def build_delay_filter(delay_ms: int) -> str | None:
    """Build the filter shifting a track by delay_ms.

    Positive values delay the audio (silence is inserted on every channel);
    negative values advance it by trimming the start.
    """
    if delay_ms > 0:
        return f"adelay={delay_ms}:all=1"
    if delay_ms < 0:
        seconds = abs(delay_ms) / 1000
        return f"atrim=start={seconds:g},asetpts=PTS-STARTPTS"
    return None


def build_audio_filter(track: AudioTrackPlan) -> str | None:
    """Build the filter chain for one re-encoded track (delay, then loudness)."""
    filters: list[str] = []
    if track.delay_ms:
        delay = build_delay_filter(track.delay_ms)
        if delay:
            filters.append(delay)
    if track.normalize:
        filters.append(LOUDNORM_FILTER)
    return ",".join(filters) if filters else None


def build_audio_args(plans: list[AudioTrackPlan]) -> list[str]:
    """Build ffmpeg arguments for audio track handling.

    Args:
        plans: Per-track plans in output position order.

    Returns:
        List of ffmpeg arguments for audio.
    """
    args: list[str] = []

    for track in plans:
        position = track.position
        args.extend([f"-c:a:{position}", track.codec])
        if track.is_copy:
            continue

        if track.bitrate:
            args.extend([f"-b:a:{position}", track.bitrate])
        if track.channels is not None:
            args.extend([f"-ac:a:{position}", str(track.channels)])
        if track.sample_rate is not None:
            args.extend([f"-ar:a:{position}", str(track.sample_rate)])

        audio_filter = build_audio_filter(track)
        if audio_filter:
            args.extend([f"-filter:a:{position}", audio_filter])

    return args
