"""Build and validate a ConversionRequest from raw option values.

Checks run in a fixed order so the first problem a user hits is the most
fundamental one: missing paths, then the filesystem, then option values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vconvert.core.units import parse_bitrate
from vconvert.exceptions import (
    InputNotFound,
    InvalidBitrate,
    InvalidOptionValue,
    InvalidPriority,
    MissingRequiredArgument,
    OutputExists,
)
from vconvert.request.models import ConversionRequest

logger = logging.getLogger(__name__)

VALID_PRIORITIES = ("normal", "low")


def _validation_error_to_option_error(error: ValidationError) -> InvalidOptionValue:
    """Convert the first pydantic error into an InvalidOptionValue."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "value"
    reason = first.get("msg", "invalid value")
    # pydantic prefixes messages from custom validators
    reason = reason.removeprefix("Value error, ")
    return InvalidOptionValue(field, reason)


def build_request(
    input_path: str | Path | None,
    output_path: str | Path | None,
    **options: Any,
) -> ConversionRequest:
    """Validate raw option values and build an immutable ConversionRequest.

    Args:
        input_path: Value of --input (None if missing).
        output_path: Value of --output (None if missing).
        **options: Remaining option values keyed by ConversionRequest field.
            None values fall back to the model defaults.

    Returns:
        Validated ConversionRequest.

    Raises:
        MissingRequiredArgument: If input or output is missing.
        InputNotFound: If the input file does not exist.
        OutputExists: If the output exists and overwrite is not set.
        InvalidPriority: If priority is not 'normal' or 'low'.
        InvalidBitrate: If the target bitrate cannot be parsed.
        InvalidOptionValue: If any other option fails validation.
    """
    missing = [
        name
        for name, value in (("input", input_path), ("output", output_path))
        if value is None or str(value) == ""
    ]
    if missing:
        raise MissingRequiredArgument(missing)

    source = Path(str(input_path))
    target = Path(str(output_path))

    if not source.is_file():
        raise InputNotFound(source)

    overwrite = bool(options.get("overwrite"))
    if target.exists() and not overwrite:
        raise OutputExists(target)

    priority = options.get("priority")
    if priority is not None and priority not in VALID_PRIORITIES:
        raise InvalidPriority(str(priority))

    target_bitrate = options.get("target_bitrate")
    if target_bitrate is not None and parse_bitrate(target_bitrate) is None:
        raise InvalidBitrate("--target-bitrate", target_bitrate)

    values = {key: value for key, value in options.items() if value is not None}
    try:
        request = ConversionRequest(input_path=source, output_path=target, **values)
    except ValidationError as e:
        raise _validation_error_to_option_error(e) from e

    logger.debug("Validated conversion request: %s", request.model_dump_json())
    return request
