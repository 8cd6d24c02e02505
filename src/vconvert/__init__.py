"""vconvert - interactive ffmpeg conversion planner.

Turns quality targets, stream selections, filters and system constraints
into a single ordered ffmpeg invocation.
"""

__version__ = "1.0.0"
