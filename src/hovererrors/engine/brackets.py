"""
Bracket matching over raw source text.

A single pass pushes every opening bracket onto a stack and pops it when the
matching closer arrives. Closers that do not match the top of the stack are
reported where they stand; openers still on the stack at the end of the scan
are reported afterwards, earliest-opened first.

String literals and comments are not recognised: a bracket inside a string
counts as structural. Accurate lexing is out of scope for this heuristic.
"""

from dataclasses import dataclass
from enum import Enum

OPENERS = "({["
CLOSERS = ")}]"
PAIRS: dict[str, str] = {")": "(", "}": "{", "]": "["}


class SymbolErrorReason(Enum):
    """Why a bracket was reported."""

    UNEXPECTED_CLOSER = "unexpected-closer"
    UNCLOSED_OPENER = "unclosed-opener"


@dataclass(frozen=True, slots=True)
class SymbolToken:
    """One bracket occurrence; line and column are 0-indexed."""

    char: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SymbolError:
    """A bracket that could not be matched."""

    char: str
    line: int
    column: int
    reason: SymbolErrorReason

    @classmethod
    def from_token(cls, token: SymbolToken, reason: SymbolErrorReason) -> "SymbolError":
        return cls(token.char, token.line, token.column, reason)


def check_symbols(text: str) -> list[SymbolError]:
    """
    Find unmatched brackets in ``text``.

    Args:
        text: Full document text

    Returns:
        Errors in discovery order: bad closers in text order, followed by
        unclosed openers in the order they were opened
    """
    stack: list[SymbolToken] = []
    errors: list[SymbolError] = []

    for line_index, line in enumerate(text.split("\n")):
        for column, char in enumerate(line):
            if char in OPENERS:
                stack.append(SymbolToken(char, line_index, column))
            elif char in CLOSERS:
                if not stack or stack[-1].char != PAIRS[char]:
                    # The stack is left alone so the opener is still reported
                    errors.append(
                        SymbolError(char, line_index, column, SymbolErrorReason.UNEXPECTED_CLOSER)
                    )
                else:
                    stack.pop()

    for token in stack:
        errors.append(SymbolError.from_token(token, SymbolErrorReason.UNCLOSED_OPENER))

    return errors
