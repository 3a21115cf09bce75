"""
hover-errors Language Server Protocol (LSP) implementation.

This package exposes the hover-errors checks to editors:
- Diagnostics republished in full on every open, change and save
- Hover explanations in English and Hindi transliteration
- Language preference and disabled rules taken from client settings

Usage:
    # Start the LSP server (stdio mode)
    hovererrors-lsp

    # Or run as a module
    python -m hovererrors.lsp
"""

from hovererrors.lsp.server import HoverErrorsLanguageServer, create_server, main

__all__ = [
    "HoverErrorsLanguageServer",
    "create_server",
    "main",
]
