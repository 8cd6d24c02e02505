"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (VCONVERT_*)
3. Config file (~/.vconvert/config.toml)
4. Default values

Environment variables:
- VCONVERT_FFMPEG_PATH: Path to ffmpeg executable
- VCONVERT_FFPROBE_PATH: Path to ffprobe executable
- VCONVERT_LOG_LEVEL: Log level (debug, info, warning, error)
- VCONVERT_LOG_FILE: Path to log file
- VCONVERT_ANALYZE_DURATION: Value for -analyzeduration
- VCONVERT_PROBE_SIZE: Value for -probesize
- VCONVERT_NICE_LEVEL: Niceness used for --priority low
- VCONVERT_LOG_STDERR: Also log to stderr when a log file is set
- VCONVERT_CONFIG_PATH: Path to config file (overrides default location)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from vconvert.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from vconvert.config.env import EnvReader
from vconvert.config.models import VConvertConfig

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".vconvert"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the config file path, honoring VCONVERT_CONFIG_PATH."""
    reader = env_reader or EnvReader()
    env_path = reader.get_str("VCONVERT_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed (a warning is logged in the latter case).
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read config file %s: %s", path, e)
        return {}


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    log_level: str | None = None,
    log_file: Path | None = None,
    log_format: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
) -> VConvertConfig:
    """Get vconvert configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides VCONVERT_CONFIG_PATH).
        log_level: CLI override for the log level.
        log_file: CLI override for the log file.
        log_format: CLI override for the log format (text or json).
        env_reader: Optional EnvReader for testing (uses os.environ if None).

    Returns:
        VConvertConfig with merged configuration.

    Raises:
        ValueError: If a merged value fails validation (e.g. unknown level).
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)
    file_config = load_config_file(path)

    cli_source = ConfigSource(
        logging_level=log_level,
        logging_file=log_file,
        logging_format=log_format,
    )

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")
    return builder.build()
