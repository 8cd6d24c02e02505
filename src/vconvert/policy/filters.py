"""Video filter chain construction.

Each feature flag produces its stages independently; the chain is then
assembled in one fixed order regardless of the order flags were given:
deinterlace, crop, resize, hdr-to-sdr, colorspace.
"""

from __future__ import annotations

import re

from vconvert.domain import Colorspace, FilterChain, FilterStage
from vconvert.exceptions import InvalidResize, UnknownColorspace

FEATURE_ORDER = ("deinterlace", "crop", "resize", "hdr-to-sdr", "colorspace")

# Linearize, convert primaries, tonemap (hable, no desaturation), then back
# to the BT.709 transfer function in limited range. The final pixel format
# is set by the encoder's -pix_fmt.
HDR_TO_SDR_STAGES = (
    "zscale=t=linear:npl=100",
    "format=gbrpf32le",
    "zscale=p=bt709",
    "tonemap=tonemap=hable:desat=0",
    "zscale=t=bt709:m=bt709:r=tv",
)

COLORSPACE_FILTERS: dict[Colorspace, str] = {
    Colorspace.BT709: "colorspace=all=bt709",
    Colorspace.BT2020: "colorspace=all=bt2020:trc=bt2020-10",
}

_RESIZE_PATTERN = re.compile(r"^\s*(-?\d+)\s*[xX:]\s*(-?\d+)\s*$")


def parse_resize(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT (or WIDTH:HEIGHT) resize spec.

    -1 or -2 may be used for one dimension to keep the aspect ratio.

    Raises:
        InvalidResize: If the value is malformed or a dimension is zero.
    """
    match = _RESIZE_PATTERN.match(value)
    if not match:
        raise InvalidResize(value)
    width, height = int(match.group(1)), int(match.group(2))
    for dimension in (width, height):
        if dimension == 0 or dimension < -2:
            raise InvalidResize(value)
    if width < 0 and height < 0:
        raise InvalidResize(value)
    return width, height


def parse_colorspace(value: str) -> Colorspace:
    """Map a --colorspace value to its preset.

    Raises:
        UnknownColorspace: For anything other than bt709 or bt2020.
    """
    try:
        return Colorspace(value.casefold().strip())
    except ValueError:
        raise UnknownColorspace(value) from None


def deinterlace_stages() -> list[FilterStage]:
    return [FilterStage("deinterlace", "yadif")]


def crop_stages() -> list[FilterStage]:
    # Black-bar detection followed by the crop itself
    return [FilterStage("crop", "cropdetect"), FilterStage("crop", "crop")]


def resize_stages(value: str) -> list[FilterStage]:
    width, height = parse_resize(value)
    return [FilterStage("resize", f"scale={width}:{height}")]


def hdr_to_sdr_stages() -> list[FilterStage]:
    return [FilterStage("hdr-to-sdr", stage) for stage in HDR_TO_SDR_STAGES]


def colorspace_stages(value: str) -> list[FilterStage]:
    return [FilterStage("colorspace", COLORSPACE_FILTERS[parse_colorspace(value)])]


def build_filter_chain(
    deinterlace: bool = False,
    crop: bool = False,
    resize: str | None = None,
    hdr_to_sdr: bool = False,
    colorspace: str | None = None,
) -> FilterChain:
    """Build the video filter chain from feature flags.

    Args:
        deinterlace: Apply yadif deinterlacing.
        crop: Detect and crop black bars.
        resize: Target size as WIDTHxHEIGHT, or None.
        hdr_to_sdr: Tonemap HDR to SDR.
        colorspace: bt709 or bt2020, or None.

    Returns:
        FilterChain in the fixed feature order (empty if nothing requested).

    Raises:
        InvalidResize: If resize is malformed.
        UnknownColorspace: If colorspace is not bt709 or bt2020.
    """
    by_feature: dict[str, list[FilterStage]] = {}
    if colorspace:
        by_feature["colorspace"] = colorspace_stages(colorspace)
    if resize:
        by_feature["resize"] = resize_stages(resize)
    if deinterlace:
        by_feature["deinterlace"] = deinterlace_stages()
    if crop:
        by_feature["crop"] = crop_stages()
    if hdr_to_sdr:
        by_feature["hdr-to-sdr"] = hdr_to_sdr_stages()

    stages: list[FilterStage] = []
    for feature in FEATURE_ORDER:
        stages.extend(by_feature.get(feature, []))
    return FilterChain(stages=tuple(stages))
