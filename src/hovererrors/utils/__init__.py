"""
hover-errors utilities package.

Common error types shared by the engine, the CLI and the language server.
"""

from hovererrors.utils.errors import (
    HoverErrorsError,
    InvalidPositionError,
    UnsupportedDialectError,
)

__all__ = [
    "HoverErrorsError",
    "InvalidPositionError",
    "UnsupportedDialectError",
]
