"""Executor protocol and tool path resolution.

Tools are resolved from a configured path first, then from PATH.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from vconvert.exceptions import ToolNotFound

if TYPE_CHECKING:
    from vconvert.executor.transcode.types import CommandPlan


@dataclass(frozen=True)
class ExecutorResult:
    """Result of an executor operation."""

    success: bool
    """True if the operation succeeded."""

    message: str = ""
    """Human-readable message describing the result."""

    returncode: int | None = None
    """Exit status of the external process, if one was started."""


class Executor(Protocol):
    """Protocol for running an assembled command."""

    def run(self, plan: CommandPlan) -> ExecutorResult:
        """Run the command described by the plan.

        Args:
            plan: Assembled command.

        Returns:
            ExecutorResult with success status.
        """
        ...


def get_tool_path(tool_name: str, configured: Path | str | None = None) -> Path | None:
    """Get path to a tool, or None if not available.

    Args:
        tool_name: Executable name looked up in PATH (e.g. 'ffmpeg').
        configured: Configured path or name that takes precedence.

    Returns:
        Path to the tool or None if not found.
    """
    candidate = str(configured) if configured else tool_name
    found = shutil.which(candidate)
    return Path(found) if found else None


def require_tool(tool_name: str, configured: Path | str | None = None) -> Path:
    """Get path to a required tool, raising an error if not available.

    Raises:
        ToolNotFound: If the tool cannot be located.
    """
    path = get_tool_path(tool_name, configured)
    if path is None:
        raise ToolNotFound(tool_name)
    return path
