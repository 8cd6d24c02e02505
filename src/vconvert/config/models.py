"""Configuration sections for vconvert.

Each dataclass is one table of config.toml (``[tools]``, ``[encoder]``,
``[logging]``) and validates itself on construction.
"""

from dataclasses import dataclass, field
from pathlib import Path

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("text", "json")


@dataclass
class ToolPathsConfig:
    """Explicit locations of external programs; None means look in PATH."""

    ffmpeg: Path | None = None
    ffprobe: Path | None = None
    nice: Path | None = None


@dataclass
class EncoderConfig:
    """Defaults applied to every encoder invocation."""

    # Input analysis window (-analyzeduration / -probesize); large values help
    # with long files whose streams start late
    analyze_duration: str = "100M"
    probe_size: str = "100M"

    # Used when --speed is not given; None picks the per-codec default
    preset: str | None = None

    audio_bitrate: str = "384k"

    # Niceness applied by --priority low
    nice_level: int = 10

    def __post_init__(self) -> None:
        # TOML strings and booleans must not reach the range check
        if isinstance(self.nice_level, bool) or not isinstance(self.nice_level, int):
            raise ValueError(
                f"nice_level must be an integer, got {self.nice_level!r}"
            )
        if not -20 <= self.nice_level <= 19:
            raise ValueError(
                f"nice_level must be between -20 and 19, got {self.nice_level}"
            )


@dataclass
class LoggingConfig:
    """Where log records go and how they look."""

    level: str = "warning"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = False

    # Rotation of the log file
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        if self.level.casefold() not in LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level}"
            )
        if self.format.casefold() not in LOG_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(LOG_FORMATS)}, got {self.format}"
            )
        if self.max_bytes < 0 or self.backup_count < 0:
            raise ValueError("max_bytes and backup_count must not be negative")


@dataclass
class VConvertConfig:
    """All configuration sections."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
