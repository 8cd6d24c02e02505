"""Configuration builder with explicit layering.

Builds VConvertConfig by composing configuration sources with explicit
precedence: defaults < file < environment < CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from vconvert.config.env import EnvReader
from vconvert.config.models import (
    EncoderConfig,
    LoggingConfig,
    ToolPathsConfig,
    VConvertConfig,
)

logger = logging.getLogger(__name__)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values mean "not specified in this source" and never override
    values from lower-precedence sources.
    """

    # Tool paths
    ffmpeg_path: Path | None = None
    ffprobe_path: Path | None = None
    nice_path: Path | None = None

    # Encoder defaults
    analyze_duration: str | None = None
    probe_size: str | None = None
    preset: str | None = None
    audio_bitrate: str | None = None
    nice_level: int | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds VConvertConfig by layering ConfigSources.

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource, source_name: str = "") -> None:
        """Apply a source; its non-None values override existing ones."""
        for f in fields(source):
            value = getattr(source, f.name)
            if value is not None:
                if source_name:
                    logger.debug("Config %s set from %s", f.name, source_name)
                self._values[f.name] = value

    def _get(self, name: str, default: Any) -> Any:
        return self._values.get(name, default)

    def build(self) -> VConvertConfig:
        """Build the final configuration, filling gaps with defaults.

        Raises:
            ValueError: If a layered value fails section validation.
        """
        tools_default = ToolPathsConfig()
        encoder_default = EncoderConfig()
        logging_default = LoggingConfig()

        return VConvertConfig(
            tools=ToolPathsConfig(
                ffmpeg=self._get("ffmpeg_path", tools_default.ffmpeg),
                ffprobe=self._get("ffprobe_path", tools_default.ffprobe),
                nice=self._get("nice_path", tools_default.nice),
            ),
            encoder=EncoderConfig(
                analyze_duration=self._get(
                    "analyze_duration", encoder_default.analyze_duration
                ),
                probe_size=self._get("probe_size", encoder_default.probe_size),
                preset=self._get("preset", encoder_default.preset),
                audio_bitrate=self._get("audio_bitrate", encoder_default.audio_bitrate),
                nice_level=self._get("nice_level", encoder_default.nice_level),
            ),
            logging=LoggingConfig(
                level=self._get("logging_level", logging_default.level),
                file=self._get("logging_file", logging_default.file),
                format=self._get("logging_format", logging_default.format),
                include_stderr=self._get(
                    "logging_include_stderr", logging_default.include_stderr
                ),
                max_bytes=self._get("logging_max_bytes", logging_default.max_bytes),
                backup_count=self._get(
                    "logging_backup_count", logging_default.backup_count
                ),
            ),
        )


def _path_or_none(value: Any) -> Path | None:
    return Path(value).expanduser() if value else None


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create a ConfigSource from a parsed config.toml dict."""
    tools = file_config.get("tools", {})
    encoder = file_config.get("encoder", {})
    logging_section = file_config.get("logging", {})

    return ConfigSource(
        ffmpeg_path=_path_or_none(tools.get("ffmpeg")),
        ffprobe_path=_path_or_none(tools.get("ffprobe")),
        nice_path=_path_or_none(tools.get("nice")),
        analyze_duration=encoder.get("analyze_duration"),
        probe_size=encoder.get("probe_size"),
        preset=encoder.get("preset"),
        audio_bitrate=encoder.get("audio_bitrate"),
        nice_level=encoder.get("nice_level"),
        logging_level=logging_section.get("level"),
        logging_file=_path_or_none(logging_section.get("file")),
        logging_format=logging_section.get("format"),
        logging_include_stderr=logging_section.get("include_stderr"),
        logging_max_bytes=logging_section.get("max_bytes"),
        logging_backup_count=logging_section.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create a ConfigSource from VCONVERT_* environment variables."""
    return ConfigSource(
        ffmpeg_path=reader.get_path("VCONVERT_FFMPEG_PATH"),
        ffprobe_path=reader.get_path("VCONVERT_FFPROBE_PATH"),
        analyze_duration=reader.get_str("VCONVERT_ANALYZE_DURATION"),
        probe_size=reader.get_str("VCONVERT_PROBE_SIZE"),
        nice_level=reader.get_int("VCONVERT_NICE_LEVEL"),
        logging_level=reader.get_str("VCONVERT_LOG_LEVEL"),
        logging_file=reader.get_path("VCONVERT_LOG_FILE", must_exist=False),
        logging_include_stderr=reader.get_bool("VCONVERT_LOG_STDERR"),
    )
