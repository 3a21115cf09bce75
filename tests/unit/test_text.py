"""Tests for text positions and offset conversion."""

import pytest

from hovererrors.engine.text import LineIndex, Position, Range, split_lines
from hovererrors.utils.errors import InvalidPositionError


class TestLineIndex:
    """Test suite for LineIndex."""

    def test_offsets_on_first_line(self) -> None:
        """Test that offsets on the first line map to columns directly."""
        index = LineIndex("let x = 1;")

        assert index.position_at(0) == Position(0, 0)
        assert index.position_at(4) == Position(0, 4)

    def test_offsets_after_newlines(self) -> None:
        """Test offsets on later lines."""
        index = LineIndex("ab\ncd\n\nef")

        assert index.position_at(2) == Position(0, 2)  # the newline itself
        assert index.position_at(3) == Position(1, 0)
        assert index.position_at(6) == Position(2, 0)
        assert index.position_at(8) == Position(3, 1)
        assert index.line_count == 4

    def test_round_trip_is_lossless(self) -> None:
        """Test that offset -> position -> offset returns the same offset."""
        text = "function f(a) {\r\n  return a;\n}\n\nconsole.log(f(1));"
        index = LineIndex(text)

        for offset in range(len(text) + 1):
            assert index.offset_at(index.position_at(offset)) == offset

    def test_empty_text(self) -> None:
        """Test that an empty text has one empty line."""
        index = LineIndex("")

        assert index.position_at(0) == Position(0, 0)
        assert index.offset_at(Position(0, 0)) == 0

    def test_offset_out_of_range(self) -> None:
        """Test that offsets outside the text are rejected."""
        index = LineIndex("abc")

        with pytest.raises(InvalidPositionError):
            index.position_at(4)
        with pytest.raises(InvalidPositionError):
            index.position_at(-1)

    def test_position_out_of_range(self) -> None:
        """Test that positions outside the text are rejected."""
        index = LineIndex("abc\nde")

        with pytest.raises(InvalidPositionError):
            index.offset_at(Position(2, 0))
        with pytest.raises(InvalidPositionError):
            index.offset_at(Position(0, 4))


class TestRange:
    """Test suite for Range helpers."""

    def test_of_line_covers_untrimmed_line(self) -> None:
        """Test that a line range includes leading and trailing spaces."""
        range_ = Range.of_line(3, "  int x = 5  ")

        assert range_.start == Position(3, 0)
        assert range_.end == Position(3, 13)


def test_split_lines_keeps_carriage_returns() -> None:
    """Test that only \\n separates lines."""
    assert split_lines("a\r\nb") == ["a\r", "b"]
    assert split_lines("") == [""]
