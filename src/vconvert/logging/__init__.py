"""Logging setup for vconvert.

Provides configurable logging with JSON format support and file rotation.
"""

from vconvert.logging.config import configure_logging
from vconvert.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
