"""
Check families that turn raw text into positioned findings.

Each check is independent and language neutral: it reports which rule fired,
where, and for which name. Wording the finding is left to the assembler, so
a preference switch changes messages without touching ranges.

Checks:
- ``check_brackets``: one finding per unmatched bracket, spanning its line
- ``check_undefined_references``: sink-call arguments missing from the
  declared set
- ``check_unused_functions``: functions whose name appears call-shaped only
  once in the whole text
- ``check_semicolons``: statement lines without a terminator (Java only)
"""

import re
from dataclasses import dataclass
from typing import Optional

from hovererrors.engine.brackets import check_symbols
from hovererrors.engine.dialects import DialectProfile
from hovererrors.engine.identifiers import FunctionDeclaration, find_function_declarations
from hovererrors.engine.rules import (
    INCOMPLETE_BLOCK,
    MISSING_SEMICOLON,
    UNDEFINED_VARIABLE,
    UNUSED_FUNCTION,
    Rule,
)
from hovererrors.engine.text import LineIndex, Range, split_lines


@dataclass(frozen=True)
class Finding:
    """
    A detected issue before it is worded.

    Attributes:
        rule: The rule that fired
        range: Exact span of the offending text
        name: The offending identifier, for rules that name one
    """

    rule: Rule
    range: Range
    name: Optional[str] = None


def check_brackets(text: str) -> list[Finding]:
    """Report every unmatched bracket on the full range of its line."""
    lines = split_lines(text)
    return [
        Finding(INCOMPLETE_BLOCK, Range.of_line(error.line, lines[error.line]))
        for error in check_symbols(text)
    ]


def check_undefined_references(text: str, profile: DialectProfile) -> list[Finding]:
    """Report each sink-call reference whose name is not declared."""
    declared = profile.collect_declared(text)
    index = LineIndex(text)
    findings: list[Finding] = []
    for reference in profile.find_references(text):
        if reference.name in declared:
            continue
        findings.append(
            Finding(
                UNDEFINED_VARIABLE,
                Range(index.position_at(reference.offset), index.position_at(reference.end)),
                reference.name,
            )
        )
    return findings


def count_call_sites(text: str, name: str) -> int:
    """
    Count ``name(`` occurrences bounded by word edges.

    The declaration ``function name(`` matches as well, so a function that is
    never called elsewhere counts one. Property names, object keys and text
    in strings or comments that look like ``name(`` also count.
    """
    pattern = re.compile(rf"(?<![\w$]){re.escape(name)}\s*\(")
    return len(pattern.findall(text))


def find_unused_functions(text: str) -> list[FunctionDeclaration]:
    """Function declarations whose name occurs call-shaped at most once."""
    counts: dict[str, int] = {}
    unused: list[FunctionDeclaration] = []
    for declaration in find_function_declarations(text):
        if declaration.name not in counts:
            counts[declaration.name] = count_call_sites(text, declaration.name)
        if counts[declaration.name] <= 1:
            unused.append(declaration)
    return unused


def check_unused_functions(text: str) -> list[Finding]:
    """Warn on unused functions, spanning the ``function`` keyword and name."""
    index = LineIndex(text)
    return [
        Finding(
            UNUSED_FUNCTION,
            Range(index.position_at(declaration.start), index.position_at(declaration.end)),
            declaration.name,
        )
        for declaration in find_unused_functions(text)
    ]


def is_terminated(line: str) -> bool:
    """Check whether a line needs no semicolon."""
    stripped = line.strip()
    return (
        not stripped
        or stripped.endswith((";", "{", "}"))
        or stripped.startswith("//")
    )


def check_semicolons(text: str) -> list[Finding]:
    """Report every non-empty, non-comment line not ending in ``;``, ``{`` or ``}``."""
    return [
        Finding(MISSING_SEMICOLON, Range.of_line(line_index, line))
        for line_index, line in enumerate(split_lines(text))
        if not is_terminated(line)
    ]
