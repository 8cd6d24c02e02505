"""Errors raised while validating and resolving a conversion request.

Every error here is fatal: the CLI reports the message and exits with a
non-zero status before any external process is started.
"""


class ConversionError(Exception):
    """Base class for all conversion request errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingRequiredArgument(ConversionError):
    """Raised when --input or --output is not provided."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        flags = " and ".join(f"--{name}" for name in missing)
        super().__init__(f"{flags} {'is' if len(missing) == 1 else 'are'} required")


class InputNotFound(ConversionError):
    """Raised when the input file does not exist."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class OutputExists(ConversionError):
    """Raised when the output file exists and overwrite was not requested."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(
            f"Output file already exists: {path}\n"
            "Use --overwrite to replace it, or choose a different output file"
        )


class UnknownQualityLevel(ConversionError):
    """Raised when --quality names no known quality tier."""

    def __init__(self, quality: str) -> None:
        self.quality = quality
        super().__init__(
            f"Unknown quality level: {quality} (use ultra, high, medium or low)"
        )


class UnknownColorspace(ConversionError):
    """Raised when --colorspace is neither bt709 nor bt2020."""

    def __init__(self, colorspace: str) -> None:
        self.colorspace = colorspace
        super().__init__(f"Unknown colorspace: {colorspace} (use bt709 or bt2020)")


class InvalidPriority(ConversionError):
    """Raised when --priority is neither normal nor low."""

    def __init__(self, priority: str) -> None:
        self.priority = priority
        super().__init__(f"--priority must be 'normal' or 'low', got '{priority}'")


class InvalidSizeUnit(ConversionError):
    """Raised when a size string cannot be converted to bytes."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid size: '{value}'. "
            "Use a number with an optional GB, MB, KB or B suffix (e.g. 2GB, 500MB)."
        )


class InvalidBitrate(ConversionError):
    """Raised when a bitrate string is not a number with a k or M suffix."""

    def __init__(self, option: str, value: str) -> None:
        self.option = option
        self.value = value
        super().__init__(
            f"Invalid {option} '{value}'. "
            "Must be a number followed by M or k (e.g. '5M', '2500k')."
        )


class InvalidResize(ConversionError):
    """Raised when --resize is not WIDTHxHEIGHT."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid resize '{value}'. Use WIDTHxHEIGHT (e.g. 1920x1080, 1280x720)."
        )


class InvalidStreamSelection(ConversionError):
    """Raised when a stream selection names an unknown or malformed index."""


class InvalidOptionValue(ConversionError):
    """Raised when an option value fails model validation."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for --{field.replace('_', '-')}: {reason}")


class ToolNotFound(ConversionError):
    """Raised when a required external tool cannot be located."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(
            f"{tool} is not installed or not in PATH. "
            f"Install ffmpeg or set VCONVERT_{tool.upper()}_PATH."
        )
