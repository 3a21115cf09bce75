"""
Entry point for running the hover-errors LSP server as a module.

Usage:
    python -m hovererrors.lsp
    python -m hovererrors.lsp --tcp --port 2088
"""

from hovererrors.lsp.server import main

if __name__ == "__main__":
    main()
