"""SelectionProvider that replays canned answers."""

from collections.abc import Iterable

from vconvert.domain import StreamDescriptor


class ScriptedSelectionProvider:
    """Answer prompts from a fixed script, in order.

    An exhausted script answers with an empty string, which means "none" for
    stream choices and "use the default" for single-value choices. Every
    prompt is recorded in ``prompts``.
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def _next(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._answers.pop(0) if self._answers else ""

    def choose(self, prompt: str, streams: list[StreamDescriptor]) -> str:
        return self._next(prompt)

    def choose_one(self, prompt: str, options: dict[str, str], default: str) -> str:
        return self._next(prompt).strip() or default
