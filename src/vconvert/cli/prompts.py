"""Terminal-backed SelectionProvider using click prompts."""

from __future__ import annotations

import click

from vconvert.domain import StreamDescriptor, StreamKind
from vconvert.introspector import format_stream_list


class TerminalSelectionProvider:
    """Ask the user on the terminal.

    Each stream question is preceded by the listing of the streams on offer.
    An empty answer is accepted everywhere.
    """

    def choose(self, prompt: str, streams: list[StreamDescriptor]) -> str:
        audio = bool(streams) and streams[0].kind == StreamKind.AUDIO
        kind = "audio" if audio else "subtitle"
        click.echo("")
        click.echo(f"Available {kind} tracks:")
        click.echo(format_stream_list(streams))
        click.echo("")
        return click.prompt(prompt, default="", show_default=False)

    def choose_one(self, prompt: str, options: dict[str, str], default: str) -> str:
        click.echo("")
        width = max(len(name) for name in options)
        for name, description in options.items():
            click.echo(f"  {name:<{width}}  - {description}")
        return click.prompt(prompt, default=default)
