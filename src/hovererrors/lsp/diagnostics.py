"""
Diagnostic generation for the hover-errors LSP.

This module converts engine diagnostics into LSP-compatible diagnostic
messages for display in editors.
"""

from typing import Optional

from lsprotocol import types

from hovererrors.engine.diagnostics import Diagnostic, compute_diagnostics
from hovererrors.engine.dialects import Dialect
from hovererrors.engine.messages import Language
from hovererrors.engine.rules import RuleCategory, RuleConfiguration, Severity
from hovererrors.engine.text import Range

SOURCE = "hover-errors"

SEVERITY_TO_LSP: dict[Severity, types.DiagnosticSeverity] = {
    Severity.ERROR: types.DiagnosticSeverity.Error,
    Severity.WARNING: types.DiagnosticSeverity.Warning,
}


def to_lsp_range(range_: Range) -> types.Range:
    """Convert an engine range to an LSP range."""
    return types.Range(
        start=types.Position(line=range_.start.line, character=range_.start.column),
        end=types.Position(line=range_.end.line, character=range_.end.column),
    )


class DiagnosticProvider:
    """
    Generates LSP diagnostics for one document snapshot.

    The dialect decides which checks run; a document without a supported
    dialect gets no diagnostics.
    """

    def __init__(
        self,
        source: str,
        uri: str,
        dialect: Optional[Dialect],
        language: Language = Language.EN,
        config: Optional[RuleConfiguration] = None,
    ) -> None:
        """
        Initialize the diagnostic provider.

        Args:
            source: Full document text
            uri: The document URI
            dialect: Dialect of the document, or None if unsupported
            language: Message language
            config: Optional rule configuration
        """
        self.source = source
        self.uri = uri
        self.dialect = dialect
        self.language = language
        self.config = config

    def get_diagnostics(self) -> list[types.Diagnostic]:
        """
        Get all diagnostics for the document.

        Returns:
            List of LSP diagnostic objects
        """
        if self.dialect is None:
            return []
        return [
            self._to_lsp_diagnostic(diagnostic)
            for diagnostic in compute_diagnostics(
                self.dialect, self.source, self.language, self.config
            )
        ]

    def _to_lsp_diagnostic(self, diagnostic: Diagnostic) -> types.Diagnostic:
        return types.Diagnostic(
            range=to_lsp_range(diagnostic.range),
            message=diagnostic.message,
            severity=SEVERITY_TO_LSP[diagnostic.severity],
            source=SOURCE,
            code=diagnostic.code,
            tags=self._get_diagnostic_tags(diagnostic),
        )

    def _get_diagnostic_tags(self, diagnostic: Diagnostic) -> Optional[list[types.DiagnosticTag]]:
        # Editors fade out code tagged Unnecessary
        if diagnostic.rule.category == RuleCategory.UNUSED:
            return [types.DiagnosticTag.Unnecessary]
        return None


def get_diagnostics_for_document(
    source: str,
    uri: str,
    language_id: str,
    language: Language = Language.EN,
    config: Optional[RuleConfiguration] = None,
) -> list[types.Diagnostic]:
    """
    Convenience function to get diagnostics for a document.

    Args:
        source: Full document text
        uri: The document URI
        language_id: Editor language id (``javascript``, ``typescript``, ``java``)
        language: Message language
        config: Optional rule configuration

    Returns:
        List of LSP diagnostics; empty for unsupported language ids
    """
    provider = DiagnosticProvider(
        source, uri, Dialect.from_language_id(language_id), language, config
    )
    return provider.get_diagnostics()
