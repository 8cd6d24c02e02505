"""Conversion request parsing and validation.

- ConversionRequest: immutable, validated option set for one run
- build_request: validate raw option values into a ConversionRequest
- ConversionError and subclasses: fatal validation/resolution errors
"""

from vconvert.exceptions import (
    ConversionError,
    InputNotFound,
    InvalidBitrate,
    InvalidOptionValue,
    InvalidPriority,
    InvalidResize,
    InvalidSizeUnit,
    InvalidStreamSelection,
    MissingRequiredArgument,
    OutputExists,
    ToolNotFound,
    UnknownColorspace,
    UnknownQualityLevel,
)
from vconvert.request.loader import build_request
from vconvert.request.models import ConversionRequest

__all__ = [
    "ConversionRequest",
    "build_request",
    # Errors
    "ConversionError",
    "InputNotFound",
    "InvalidBitrate",
    "InvalidOptionValue",
    "InvalidPriority",
    "InvalidResize",
    "InvalidSizeUnit",
    "InvalidStreamSelection",
    "MissingRequiredArgument",
    "OutputExists",
    "ToolNotFound",
    "UnknownColorspace",
    "UnknownQualityLevel",
]
