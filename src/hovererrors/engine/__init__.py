"""
hover-errors analysis engine.

Heuristic, text-only checks for JavaScript, TypeScript and Java-like source:
unmatched brackets, missing semicolons, references to undeclared names and
functions that are never called. Every entry point is a pure function of the
text it is given.

Example:
    from hovererrors.engine import Dialect, Language, compute_diagnostics

    for diagnostic in compute_diagnostics(Dialect.JAVASCRIPT, "console.log(y);", Language.HI):
        print(diagnostic)
"""

from hovererrors.engine.brackets import SymbolError, SymbolErrorReason, SymbolToken, check_symbols
from hovererrors.engine.diagnostics import Diagnostic, compute_diagnostics
from hovererrors.engine.dialects import Dialect, DialectProfile
from hovererrors.engine.explain import Explanation, explain_at, find_explanation
from hovererrors.engine.messages import Language, MessageKind
from hovererrors.engine.rules import ALL_RULES, Rule, RuleConfiguration, Severity
from hovererrors.engine.text import LineIndex, Position, Range

__all__ = [
    # Entry points
    "compute_diagnostics",
    "explain_at",
    "find_explanation",
    "check_symbols",
    # Results
    "Diagnostic",
    "Explanation",
    "SymbolError",
    "SymbolErrorReason",
    "SymbolToken",
    # Configuration
    "Dialect",
    "DialectProfile",
    "Language",
    "MessageKind",
    "Rule",
    "RuleConfiguration",
    "Severity",
    "ALL_RULES",
    # Text positions
    "LineIndex",
    "Position",
    "Range",
]
