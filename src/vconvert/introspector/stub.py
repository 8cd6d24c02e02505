"""Stub StreamProber returning canned streams, for tests and dry runs."""

from pathlib import Path

from vconvert.domain import StreamDescriptor, StreamKind


class StubStreamProber:
    """StreamProber that returns preconfigured streams.

    Records every query in ``calls`` so tests can assert on probing order.
    """

    def __init__(self, streams: list[StreamDescriptor] | None = None) -> None:
        self._streams = list(streams or [])
        self.calls: list[tuple[Path, StreamKind]] = []

    def probe(self, path: Path, kind: StreamKind) -> list[StreamDescriptor]:
        self.calls.append((path, kind))
        return sorted(
            (s for s in self._streams if s.kind == kind), key=lambda s: s.index
        )
