"""Configuration module for vconvert.

Provides configuration loading with precedence:
CLI arguments > environment variables > config file > defaults.
"""

from vconvert.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from vconvert.config.env import EnvReader
from vconvert.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)
from vconvert.config.models import (
    EncoderConfig,
    LoggingConfig,
    ToolPathsConfig,
    VConvertConfig,
)

__all__ = [
    "ConfigBuilder",
    "ConfigSource",
    "DEFAULT_CONFIG_FILE",
    "EncoderConfig",
    "EnvReader",
    "LoggingConfig",
    "ToolPathsConfig",
    "VConvertConfig",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "source_from_env",
    "source_from_file",
]
