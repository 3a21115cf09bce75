"""
Text snapshot helpers: zero-based positions and offset conversion.

Lines are separated by ``\\n`` only. A ``\\r`` preceding the newline stays
part of its line, matching how editors count columns in CRLF documents.
"""

from bisect import bisect_right
from dataclasses import dataclass

from hovererrors.utils.errors import InvalidPositionError


@dataclass(frozen=True, slots=True)
class Position:
    """
    A location in a text snapshot.

    Attributes:
        line: 0-indexed line number
        column: 0-indexed character offset within the line
    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open span between two positions."""

    start: Position
    end: Position

    @classmethod
    def of_line(cls, line: int, line_text: str) -> "Range":
        """Range covering the whole (untrimmed) text of line ``line``."""
        return cls(Position(line, 0), Position(line, len(line_text)))


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``; an empty text is a single empty line."""
    return text.split("\n")


class LineIndex:
    """
    Converts between linear offsets and positions for one text snapshot.

    Line start offsets are computed once, so each conversion is a binary
    search. Every offset in ``[0, len(text)]`` survives a round trip through
    ``position_at`` and ``offset_at`` unchanged.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(offset + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """
        Convert a linear offset into a position.

        Raises:
            InvalidPositionError: If the offset lies outside the text
        """
        if offset < 0 or offset > len(self.text):
            raise InvalidPositionError(
                f"offset {offset} is outside the text (length {len(self.text)})"
            )
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """
        Convert a position into a linear offset.

        Raises:
            InvalidPositionError: If the position does not address the text
        """
        if position.line < 0 or position.line >= self.line_count:
            raise InvalidPositionError(f"line {position.line} is outside the text")
        start = self._line_starts[position.line]
        if position.line + 1 < self.line_count:
            line_end = self._line_starts[position.line + 1] - 1
        else:
            line_end = len(self.text)
        if position.column < 0 or start + position.column > line_end:
            raise InvalidPositionError(f"column {position.column} is outside line {position.line}")
        return start + position.column
