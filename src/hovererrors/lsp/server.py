"""
hover-errors Language Server Protocol (LSP) Server.

This module implements an LSP server for the hover-errors checks using
pygls (Python Language Server). It provides:

- Document synchronization (open, change, save, close)
- Diagnostics (unmatched brackets, missing semicolons, undefined variables,
  unused functions) in English or Hindi transliteration
- Hover explanations of the issue on the hovered line, in both languages
- Live settings via ``workspace/didChangeConfiguration``

Usage:
    # Start the server in stdio mode (for IDE integration)
    hovererrors-lsp

    # Start in TCP mode (for debugging)
    hovererrors-lsp --tcp --port 2088
"""

import logging

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from hovererrors import __version__
from hovererrors.lsp.analyzer import DocumentAnalyzer
from hovererrors.lsp.collection import DiagnosticCollection
from hovererrors.lsp.settings import ServerSettings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("hovererrors-lsp")

UNTITLED_SCHEME = "untitled:"


class HoverErrorsLanguageServer(LanguageServer):
    """
    Language Server Protocol implementation for hover-errors.

    Every open, change or save recomputes the full diagnostic set of the
    document and replaces whatever was published for it before. Settings
    are read at the start of each check, never captured.
    """

    def __init__(self) -> None:
        """Initialize the hover-errors language server."""
        super().__init__(
            name="hovererrors-lsp",
            version=f"v{__version__}",
            text_document_sync_kind=types.TextDocumentSyncKind.Full,
        )

        self.settings = ServerSettings()
        self.diagnostics = DiagnosticCollection(self._send_diagnostics)

        # Register all handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """
        Register all LSP request and notification handlers.

        pygls tags every handler with attributes, which bound methods do
        not accept, so each method is wrapped in a plain function.
        """

        # Document synchronization
        @self.feature(types.TEXT_DOCUMENT_DID_OPEN)
        def did_open(params: types.DidOpenTextDocumentParams) -> None:
            self._on_did_open(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CHANGE)
        def did_change(params: types.DidChangeTextDocumentParams) -> None:
            self._on_did_change(params)

        @self.feature(types.TEXT_DOCUMENT_DID_SAVE)
        def did_save(params: types.DidSaveTextDocumentParams) -> None:
            self._on_did_save(params)

        @self.feature(types.TEXT_DOCUMENT_DID_CLOSE)
        def did_close(params: types.DidCloseTextDocumentParams) -> None:
            self._on_did_close(params)

        # Hover
        @self.feature(types.TEXT_DOCUMENT_HOVER)
        def hover(params: types.HoverParams) -> types.Hover | None:
            return self._on_hover(params)

        # Settings
        @self.feature(types.WORKSPACE_DID_CHANGE_CONFIGURATION)
        def did_change_configuration(params: types.DidChangeConfigurationParams) -> None:
            self._on_did_change_configuration(params)

    def _send_diagnostics(self, uri: str, diagnostics: list[types.Diagnostic]) -> None:
        """Publish diagnostics to the client."""
        logger.debug(f"Publishing {len(diagnostics)} diagnostic(s) for {uri}")
        self.text_document_publish_diagnostics(
            types.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
        )

    def update_diagnostics(self, uri: str, source: str, language_id: str) -> None:
        """
        Recompute and publish the diagnostics of one document.

        Unsupported documents have their diagnostics cleared; untitled
        documents are left alone.
        """
        analyzer = DocumentAnalyzer(source, uri, language_id)
        if not analyzer.is_supported:
            self.diagnostics.delete(uri)
            return
        if uri.startswith(UNTITLED_SCHEME):
            return

        self.diagnostics.set(
            uri,
            analyzer.get_diagnostics(
                self.settings.language, self.settings.rule_configuration()
            ),
        )

    def hover(
        self, uri: str, source: str, language_id: str, line: int, character: int
    ) -> types.Hover | None:
        """Answer a hover query against the given snapshot."""
        analyzer = DocumentAnalyzer(source, uri, language_id)
        return analyzer.get_hover(line, character, self.settings.rule_configuration())

    def _refresh(self, uri: str) -> None:
        doc = self.workspace.get_text_document(uri)
        if doc is None:
            return
        self.update_diagnostics(uri, doc.source, doc.language_id or "")

    # =========================================================================
    # Document Synchronization
    # =========================================================================

    def _on_did_open(self, params: types.DidOpenTextDocumentParams) -> None:
        """Handle document open notification."""
        document = params.text_document
        logger.info(f"Document opened: {document.uri} ({document.language_id})")

        self.update_diagnostics(document.uri, document.text, document.language_id)

    def _on_did_change(self, params: types.DidChangeTextDocumentParams) -> None:
        """Handle document change notification."""
        uri = params.text_document.uri
        logger.debug(f"Document changed: {uri}")

        self._refresh(uri)

    def _on_did_save(self, params: types.DidSaveTextDocumentParams) -> None:
        """Handle document save notification."""
        uri = params.text_document.uri
        logger.info(f"Document saved: {uri}")

        self._refresh(uri)

    def _on_did_close(self, params: types.DidCloseTextDocumentParams) -> None:
        """Handle document close notification."""
        uri = params.text_document.uri
        logger.info(f"Document closed: {uri}")

        self.diagnostics.delete(uri)

    # =========================================================================
    # Hover
    # =========================================================================

    def _on_hover(self, params: types.HoverParams) -> types.Hover | None:
        """Handle hover request."""
        uri = params.text_document.uri
        doc = self.workspace.get_text_document(uri)
        if doc is None:
            return None

        position = params.position
        return self.hover(
            uri, doc.source, doc.language_id or "", position.line, position.character
        )

    # =========================================================================
    # Settings
    # =========================================================================

    def _on_did_change_configuration(self, params: types.DidChangeConfigurationParams) -> None:
        """Handle settings change notification."""
        self.settings.update(params.settings)


# =============================================================================
# Server Creation and Main Entry Point
# =============================================================================


def create_server() -> HoverErrorsLanguageServer:
    """Create and configure a hover-errors language server instance."""
    server = HoverErrorsLanguageServer()

    @server.feature(types.INITIALIZE)
    def on_initialize(params: types.InitializeParams) -> None:
        """Pick up settings passed as initialization options."""
        logger.info("Initializing hover-errors Language Server")
        server.settings.update(params.initialization_options)

    @server.feature(types.INITIALIZED)
    def on_initialized(
        params: types.InitializedParams,  # noqa: ARG001
    ) -> None:
        """Handle initialized notification."""
        logger.info("hover-errors Language Server initialized successfully")

    @server.feature(types.SHUTDOWN)
    def on_shutdown(
        params: None,  # noqa: ARG001
    ) -> None:
        """Handle shutdown request."""
        logger.info("Shutting down hover-errors Language Server")

    return server


def main() -> None:
    """
    Main entry point for the hover-errors language server.

    Starts the server in stdio mode for IDE integration.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="hover-errors Language Server",
        prog="hovererrors-lsp",
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2088,
        help="Port to listen on in TCP mode (default: 2088)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )

    args = parser.parse_args()

    # Configure logging level
    log_level = getattr(logging, args.log_level.upper())
    logging.getLogger("hovererrors-lsp").setLevel(log_level)
    logging.getLogger("hovererrors").setLevel(log_level)

    server = create_server()

    if args.tcp:
        logger.info(f"Starting hover-errors LSP in TCP mode on {args.host}:{args.port}")
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting hover-errors LSP in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
