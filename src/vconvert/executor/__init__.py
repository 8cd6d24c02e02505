"""Execution of assembled encoder commands."""

from vconvert.executor.interface import (
    Executor,
    ExecutorResult,
    get_tool_path,
    require_tool,
)

__all__ = [
    "Executor",
    "ExecutorResult",
    "get_tool_path",
    "require_tool",
]
