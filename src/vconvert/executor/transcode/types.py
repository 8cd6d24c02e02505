"""Command plan data types.

An encoder invocation is a sequence of argument groups in a fixed order.
Groups are tagged so tests and dry-run output can address them by role
instead of by position.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import IntEnum


class CommandGroup(IntEnum):
    """Argument groups in the order they appear on the command line."""

    OVERWRITE = 1
    ANALYSIS = 2
    INPUT = 3
    PREVIEW = 4
    VIDEO = 5
    FILTERS = 6
    AUDIO = 7
    SUBTITLES = 8
    MAPS = 9
    CHAPTERS = 10
    SIZE_LIMIT = 11
    OUTPUT = 12


@dataclass(frozen=True)
class ArgumentGroup:
    """Arguments contributed by one CommandGroup."""

    group: CommandGroup
    args: tuple[str, ...]


@dataclass(frozen=True)
class CommandPlan:
    """Fully assembled encoder invocation.

    ``prefix`` holds an optional scheduling wrapper (e.g. ``nice -n 10``)
    placed before the program.
    """

    program: str
    groups: tuple[ArgumentGroup, ...]
    prefix: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Complete argument vector, prefix included."""
        argv = [*self.prefix, self.program]
        for group in self.groups:
            argv.extend(group.args)
        return argv

    def group_args(self, group: CommandGroup) -> list[str]:
        """Arguments of one group, or an empty list if it was omitted."""
        for item in self.groups:
            if item.group == group:
                return list(item.args)
        return []

    def has_group(self, group: CommandGroup) -> bool:
        return any(item.group == group for item in self.groups)

    def display(self) -> str:
        """Render the command as a shell-quoted string for display."""
        return shlex.join(self.argv)
