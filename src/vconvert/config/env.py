"""Typed access to VCONVERT_* environment variables.

EnvReader takes an optional mapping so tests can pass a plain dict instead
of touching os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class EnvReader:
    """Read and convert environment variables.

    Example:
        reader = EnvReader(env={"VCONVERT_LOG_LEVEL": "debug"})
        reader.get_str("VCONVERT_LOG_LEVEL")  # "debug"
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env

    def _raw(self, var: str) -> str | None:
        # An exported but empty variable counts as unset
        return self._env.get(var) or None

    def get_str(self, var: str, default: str | None = None) -> str | None:
        value = self._raw(var)
        return default if value is None else value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer; unparseable values log a warning and give default."""
        value = self._raw(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a flag; 1/true/yes/on (any case) are true, anything else false."""
        value = self._raw(var)
        if value is None:
            return default
        return value.strip().casefold() in TRUE_VALUES

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Get a path with ``~`` expanded.

        Args:
            var: Environment variable name.
            must_exist: Ignore, with a warning, paths that do not exist.
                Tool paths must exist; log files are created on demand.
            default: Value used when unset or ignored.

        Returns:
            Path, or default.
        """
        value = self._raw(var)
        if value is None:
            return default
        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning("%s points to a missing path, ignoring: %s", var, value)
            return default
        return path
