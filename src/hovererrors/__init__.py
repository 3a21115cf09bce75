"""
hover-errors - heuristic diagnostics with bilingual explanations.

Scans JavaScript, TypeScript and Java-like source text for unmatched
brackets, missing semicolons, references to undeclared variables and
functions that are never called, and explains each finding in English and
Hindi transliteration. Available as a library, a command line tool and a
language server.
"""

__version__ = "0.1.0"

from hovererrors.engine import (  # noqa: E402
    Diagnostic,
    Dialect,
    Language,
    Position,
    compute_diagnostics,
    explain_at,
)

__all__ = [
    "__version__",
    "compute_diagnostics",
    "explain_at",
    "Diagnostic",
    "Dialect",
    "Language",
    "Position",
]
