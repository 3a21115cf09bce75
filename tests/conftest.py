"""
Pytest configuration and shared fixtures for hover-errors tests.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from lsprotocol import types

from hovererrors.engine.diagnostics import Diagnostic, compute_diagnostics
from hovererrors.engine.dialects import Dialect
from hovererrors.engine.explain import Explanation, find_explanation
from hovererrors.engine.messages import Language
from hovererrors.engine.rules import RuleConfiguration
from hovererrors.engine.text import Position


@pytest.fixture
def diagnose():
    """Fixture to compute diagnostics for a source string."""

    def _diagnose(
        source: str,
        dialect: Dialect = Dialect.JAVASCRIPT,
        language: Language = Language.EN,
        config: RuleConfiguration | None = None,
    ) -> list[Diagnostic]:
        return compute_diagnostics(dialect, source, language, config)

    return _diagnose


@pytest.fixture
def explain():
    """Fixture to run a point query at a 0-indexed line and column."""

    def _explain(
        source: str,
        line: int,
        column: int = 0,
        dialect: Dialect = Dialect.JAVASCRIPT,
    ) -> Explanation | None:
        return find_explanation(dialect, source, Position(line, column))

    return _explain


@pytest.fixture
def write_source(tmp_path: Path):
    """Fixture to write a source file into a temporary directory."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Language Server Fixtures
# =============================================================================


@dataclass
class PublishRecorder:
    """Records every publishDiagnostics notification a server sends."""

    calls: list[types.PublishDiagnosticsParams] = field(default_factory=list)

    def __call__(self, params: types.PublishDiagnosticsParams) -> None:
        self.calls.append(params)

    def last(self, uri: str) -> list[types.Diagnostic] | None:
        for params in reversed(self.calls):
            if params.uri == uri:
                return list(params.diagnostics)
        return None


@pytest.fixture
def published() -> PublishRecorder:
    return PublishRecorder()


@pytest.fixture
def server(published: PublishRecorder):
    """A language server whose published diagnostics are recorded."""
    from hovererrors.lsp.server import create_server

    ls = create_server()
    ls.text_document_publish_diagnostics = published
    return ls
