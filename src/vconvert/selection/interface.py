"""SelectionProvider interface for interactive choices."""

from typing import Protocol

from vconvert.domain import StreamDescriptor


class SelectionProvider(Protocol):
    """Protocol for answering the interactive questions of a run.

    Production code backs this with terminal prompts; tests back it with
    scripted answers so runs stay deterministic.
    """

    def choose(self, prompt: str, streams: list[StreamDescriptor]) -> str:
        """Ask which of the listed streams to keep.

        Args:
            prompt: Question to show.
            streams: Streams on offer, sorted by index.

        Returns:
            Raw answer: stream indexes separated by commas and/or spaces,
            or an empty string for none.
        """
        ...

    def choose_one(self, prompt: str, options: dict[str, str], default: str) -> str:
        """Ask for a single value.

        Args:
            prompt: Question to show.
            options: Suggested values mapped to a short description.
            default: Value used when the answer is empty.

        Returns:
            The chosen value (may be outside ``options``).
        """
        ...
