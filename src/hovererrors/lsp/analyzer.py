"""
Document analysis for the hover-errors LSP.

``DocumentAnalyzer`` wraps one document snapshot: it resolves the dialect
from the editor language id, produces LSP diagnostics and answers hover
queries. Analyzers are cheap and are rebuilt on every event; nothing derived
from the text outlives the request that needed it.
"""

from typing import Optional

from lsprotocol import types

from hovererrors.engine.dialects import Dialect
from hovererrors.engine.explain import find_explanation
from hovererrors.engine.messages import Language
from hovererrors.engine.rules import RuleConfiguration
from hovererrors.engine.text import Position
from hovererrors.lsp.diagnostics import DiagnosticProvider, to_lsp_range


class DocumentAnalyzer:
    """Analyzes one document snapshot for LSP features."""

    def __init__(self, source: str, uri: str, language_id: str) -> None:
        """
        Initialize the analyzer.

        Args:
            source: Full document text
            uri: The document URI
            language_id: Editor language id of the document
        """
        self.source = source
        self.uri = uri
        self.language_id = language_id
        self.dialect = Dialect.from_language_id(language_id)

    @property
    def is_supported(self) -> bool:
        return self.dialect is not None

    def get_diagnostics(
        self,
        language: Language = Language.EN,
        config: Optional[RuleConfiguration] = None,
    ) -> list[types.Diagnostic]:
        """Diagnostics for the snapshot; empty for unsupported documents."""
        provider = DiagnosticProvider(self.source, self.uri, self.dialect, language, config)
        return provider.get_diagnostics()

    def get_hover(
        self,
        line: int,
        character: int,
        config: Optional[RuleConfiguration] = None,
    ) -> types.Hover | None:
        """
        Get hover information at a position.

        Args:
            line: 0-indexed line number
            character: 0-indexed character position
            config: Optional rule configuration

        Returns:
            Bilingual explanation of the most relevant issue on the line, or None
        """
        if self.dialect is None:
            return None

        explanation = find_explanation(
            self.dialect, self.source, Position(line, character), config
        )
        if explanation is None:
            return None

        return types.Hover(
            contents=types.MarkupContent(
                kind=types.MarkupKind.Markdown,
                value=explanation.to_markdown(),
            ),
            range=to_lsp_range(explanation.range),
        )
