"""
Point queries: explain the most relevant issue at a cursor position.

The checks are rerun from scratch and tried in a fixed priority order:
incomplete block, then undefined reference, then unused function. The first
one that applies to the queried line wins. Explanations are bilingual: a
bold heading followed by the English and Hindi-transliteration hints.
"""

from dataclasses import dataclass
from typing import Optional

from hovererrors.engine.brackets import check_symbols
from hovererrors.engine.checks import find_unused_functions
from hovererrors.engine.diagnostics import run_isolated
from hovererrors.engine.dialects import Dialect
from hovererrors.engine.messages import Language, hint
from hovererrors.engine.rules import (
    INCOMPLETE_BLOCK,
    UNDEFINED_VARIABLE,
    UNUSED_FUNCTION,
    Rule,
    RuleConfiguration,
    Severity,
)
from hovererrors.engine.text import LineIndex, Position, Range, split_lines


@dataclass(frozen=True)
class Explanation:
    """
    The issue found at a queried position.

    Attributes:
        rule: The rule that applies
        heading: One-line summary, naming the offending identifier if any
        range: Span the explanation is about
        name: The offending identifier, when the rule names one
    """

    rule: Rule
    heading: str
    range: Range
    name: Optional[str] = None

    def to_markdown(self) -> str:
        marker = "🔴" if self.rule.severity == Severity.ERROR else "⚠️"
        return (
            f"{marker} **{self.heading}**\n\n"
            f"📝 {hint(self.rule.kind, Language.EN)}\n"
            f"🇮🇳 {hint(self.rule.kind, Language.HI)}"
        )


def _incomplete_block(text: str, position: Position, lines: list[str]) -> Optional[Explanation]:
    if any(error.line == position.line for error in check_symbols(text)):
        return Explanation(
            INCOMPLETE_BLOCK,
            "Incomplete block",
            Range.of_line(position.line, lines[position.line]),
        )
    return None


def _undefined_reference(
    dialect: Dialect, text: str, position: Position, index: LineIndex
) -> Optional[Explanation]:
    profile = dialect.profile
    declared = profile.collect_declared(text)
    for reference in profile.find_references(text):
        start = index.position_at(reference.offset)
        if start.line != position.line or reference.name in declared:
            continue
        return Explanation(
            UNDEFINED_VARIABLE,
            f"Variable '{reference.name}' is not defined",
            Range(start, index.position_at(reference.end)),
            reference.name,
        )
    return None


def _unused_function(
    dialect: Dialect, text: str, position: Position, index: LineIndex
) -> Optional[Explanation]:
    if not dialect.profile.checks_unused_functions:
        return None
    for declaration in find_unused_functions(text):
        start = index.position_at(declaration.start)
        if start.line == position.line:
            return Explanation(
                UNUSED_FUNCTION,
                f"Function '{declaration.name}' is declared but never called",
                Range(start, index.position_at(declaration.end)),
                declaration.name,
            )
    return None


def find_explanation(
    dialect: Dialect,
    text: str,
    position: Position,
    config: Optional[RuleConfiguration] = None,
) -> Optional[Explanation]:
    """
    Find the highest-priority issue on the line of ``position``.

    Args:
        dialect: Dialect of the document
        text: Full document text
        position: 0-indexed cursor position; only its line is significant
        config: Optional rule configuration; disabled rules are skipped

    Returns:
        The explanation, or None when nothing applies or the line does not exist
    """
    lines = split_lines(text)
    if position.line < 0 or position.line >= len(lines):
        return None

    config = config or RuleConfiguration()
    index = LineIndex(text)
    queries = (
        (INCOMPLETE_BLOCK, lambda: _incomplete_block(text, position, lines)),
        (UNDEFINED_VARIABLE, lambda: _undefined_reference(dialect, text, position, index)),
        (UNUSED_FUNCTION, lambda: _unused_function(dialect, text, position, index)),
    )
    for rule, query in queries:
        if not config.is_enabled(rule):
            continue
        explanation = run_isolated(rule.name, query, None)
        if explanation is not None:
            return explanation
    return None


def explain_at(
    dialect: Dialect,
    text: str,
    position: Position,
    config: Optional[RuleConfiguration] = None,
) -> Optional[str]:
    """Bilingual Markdown explanation for ``position``, or None."""
    explanation = find_explanation(dialect, text, position, config)
    if explanation is None:
        return None
    return explanation.to_markdown()
