"""Human-readable rendering of a ConversionPlan."""

from __future__ import annotations

from vconvert.domain import RateControlMode
from vconvert.workflow import ConversionPlan

FEATURE_LABELS = {
    "deinterlace": "deinterlace",
    "crop": "auto-crop",
    "resize": "resize",
    "hdr-to-sdr": "HDR to SDR tonemapping",
    "colorspace": "colorspace",
}


def _summary_line(label: str, value: object) -> str:
    return f"  {label:<11}: {value}"


def format_audio_summary(plan: ConversionPlan) -> str:
    """Describe the selected audio tracks and how they are encoded."""
    if not plan.audio_plans:
        return "none"
    indexes = " ".join(str(i) for i in plan.audio_indexes)
    codec = plan.audio_codec
    if plan.audio_plans[0].is_copy:
        return f"{indexes} (copy)"
    return f"{indexes} ({codec} @ {plan.request.audio_bitrate})"


def format_conversion_summary(plan: ConversionPlan) -> list[str]:
    """Build the summary printed before encoding starts.

    Args:
        plan: Resolved conversion plan.

    Returns:
        Display lines, starting with a header.
    """
    request = plan.request
    video = plan.video
    lines = [
        "Starting conversion:",
        _summary_line("Input", request.input_path),
        _summary_line("Output", request.output_path),
        _summary_line("Video", f"{video.codec.value} ({video.encoder})"),
    ]

    if video.rate_control.mode == RateControlMode.BITRATE:
        lines.append(_summary_line("Bitrate", f"{video.rate_control.bitrate} (target)"))
    else:
        lines.append(_summary_line("CRF", plan.crf))
    lines.append(_summary_line("Preset", video.preset))
    lines.append(_summary_line("Audio", format_audio_summary(plan)))

    if plan.subtitles.suppressed:
        lines.append(_summary_line("Subtitles", "none"))
    else:
        lines.append(
            _summary_line("Subtitles", " ".join(str(i) for i in plan.subtitles.indexes))
        )

    if request.max_size:
        lines.append(_summary_line("Max size", request.max_size))
    if request.resize:
        lines.append(_summary_line("Resize", request.resize))
    if request.audio_channels is not None:
        lines.append(_summary_line("Audio ch", request.audio_channels))
    if request.audio_samplerate is not None:
        lines.append(_summary_line("Audio rate", request.audio_samplerate))
    if plan.filters:
        labels = [FEATURE_LABELS.get(f, f) for f in plan.filters.features]
        lines.append(_summary_line("Filters", ", ".join(labels)))
    if request.colorspace:
        lines.append(_summary_line("Colorspace", request.colorspace.casefold()))
    if request.audio_delay:
        lines.append(_summary_line("Audio sync", f"{request.audio_delay}ms delay"))
    if request.no_chapters:
        lines.append(_summary_line("Chapters", "disabled"))
    if request.threads:
        lines.append(_summary_line("Threads", request.threads))
    if request.priority == "low":
        lines.append(_summary_line("Priority", "low CPU"))
    if request.overwrite:
        lines.append(_summary_line("Overwrite", "enabled"))
    if request.preview:
        lines.append(_summary_line("Mode", "Preview (60s)"))
    return lines
