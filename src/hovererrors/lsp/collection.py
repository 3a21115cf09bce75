"""
Published diagnostics, one set per document.

Mirrors an editor diagnostic collection: ``set`` replaces the whole set for
a document and ``delete`` clears it. Every change is forwarded to a sink,
which in the server sends ``textDocument/publishDiagnostics``.
"""

from collections.abc import Callable

from lsprotocol import types

PublishSink = Callable[[str, list[types.Diagnostic]], None]


class DiagnosticCollection:
    """Last published diagnostics keyed by document URI."""

    def __init__(self, sink: PublishSink) -> None:
        self._sink = sink
        self._entries: dict[str, list[types.Diagnostic]] = {}

    def set(self, uri: str, diagnostics: list[types.Diagnostic]) -> None:
        """Replace the diagnostics of ``uri`` (last write wins)."""
        self._entries[uri] = list(diagnostics)
        self._sink(uri, self._entries[uri])

    def delete(self, uri: str) -> None:
        """Drop the diagnostics of ``uri`` and publish an empty set."""
        self._entries.pop(uri, None)
        self._sink(uri, [])

    def get(self, uri: str) -> list[types.Diagnostic]:
        return list(self._entries.get(uri, []))

    def __contains__(self, uri: str) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)
