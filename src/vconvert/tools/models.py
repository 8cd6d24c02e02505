"""Data models for detected external tools."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ToolInfo:
    """What was found out about one external tool."""

    name: str
    path: Path | None = None
    version_line: str | None = None

    def is_available(self) -> bool:
        return self.path is not None and self.version_line is not None


@dataclass
class FFmpegInfo(ToolInfo):
    """ffmpeg plus the encoders it was built with."""

    encoders: set[str] = field(default_factory=set)

    def has_encoder(self, encoder: str) -> bool:
        return encoder.casefold() in self.encoders


@dataclass
class DependencyReport:
    """Tools reported by --version."""

    ffmpeg: FFmpegInfo
    x265: ToolInfo
