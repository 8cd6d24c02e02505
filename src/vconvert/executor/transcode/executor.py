"""TranscodeExecutor: runs an assembled ffmpeg command."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for ffmpeg invocation
import time

from vconvert.executor.interface import ExecutorResult, require_tool

from .types import CommandPlan

logger = logging.getLogger(__name__)


class TranscodeExecutor:
    """Runs the encoder in the foreground.

    The child process inherits the terminal so ffmpeg's own progress output
    reaches the user unchanged. The argument vector is passed directly to
    the operating system, never through a shell.
    """

    def run(self, plan: CommandPlan) -> ExecutorResult:
        """Run the command.

        Args:
            plan: Assembled command.

        Returns:
            ExecutorResult; success is True only when the encoder exits 0.

        Raises:
            ToolNotFound: If the encoder (or the nice wrapper) is missing.
        """
        for tool in (*plan.prefix[:1], plan.program):
            require_tool(tool)

        argv = plan.argv
        logger.info("Starting encode", extra={"argv": argv})
        start_time = time.monotonic()

        try:
            completed = subprocess.run(argv, check=False)  # nosec B603
        except OSError as e:
            logger.error("Could not start %s: %s", plan.program, e)
            return ExecutorResult(
                success=False, message=f"Could not start encoder: {e}"
            )

        elapsed = time.monotonic() - start_time
        if completed.returncode != 0:
            logger.error(
                "Encoder exited with code %d after %.1fs",
                completed.returncode,
                elapsed,
            )
            return ExecutorResult(
                success=False,
                message=f"ffmpeg exited with code {completed.returncode}",
                returncode=completed.returncode,
            )

        logger.info("Encode finished in %.1fs", elapsed)
        return ExecutorResult(
            success=True, message="Conversion completed", returncode=0
        )
