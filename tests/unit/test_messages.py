"""Tests for the bilingual message catalog."""

import pytest

from hovererrors.engine.messages import (
    HINTS,
    MESSAGES,
    Language,
    MessageKind,
    hint,
    render,
)


class TestLanguage:
    """Test suite for language preference parsing."""

    def test_hindi(self) -> None:
        """Test that 'hi' selects Hindi transliteration."""
        assert Language.from_setting("hi") == Language.HI
        assert Language.from_setting(" HI ") == Language.HI

    def test_everything_else_is_english(self) -> None:
        """Test the English fallback."""
        assert Language.from_setting("en") == Language.EN
        assert Language.from_setting("fr") == Language.EN
        assert Language.from_setting(None) == Language.EN
        assert Language.from_setting(3) == Language.EN

    def test_language_passes_through(self) -> None:
        """Test that a Language value is returned unchanged."""
        assert Language.from_setting(Language.HI) == Language.HI


class TestCatalog:
    """Test suite for catalog completeness and rendering."""

    def test_every_kind_has_both_languages(self) -> None:
        """Test that messages and hints exist for every kind and language."""
        for kind in MessageKind:
            assert set(MESSAGES[kind]) == set(Language)
            assert set(HINTS[kind]) == set(Language)

    def test_undefined_variable_interpolates_name(self) -> None:
        """Test that both variants mention the offending name."""
        assert render(MessageKind.UNDEFINED_VARIABLE, Language.EN, "y") == (
            "Variable 'y' is not defined"
        )
        assert render(MessageKind.UNDEFINED_VARIABLE, Language.HI, "y") == (
            "Variable 'y' define nahi hai"
        )

    def test_plain_messages(self) -> None:
        """Test unparameterized messages."""
        assert render(MessageKind.MISSING_SEMICOLON, Language.EN) == "Missing semicolon"
        assert render(MessageKind.MISSING_SEMICOLON, Language.HI) == "Semicolon missing hai!"
        assert "adhura" in render(MessageKind.INCOMPLETE_BLOCK, Language.HI)

    def test_parameterized_kind_needs_name(self) -> None:
        """Test that rendering a parameterized kind without a name fails."""
        with pytest.raises(ValueError):
            render(MessageKind.UNDEFINED_VARIABLE, Language.EN)

    def test_hints(self) -> None:
        """Test hint lookup."""
        assert hint(MessageKind.MISSING_SEMICOLON, Language.EN) == (
            "Add a semicolon at the end of the statement."
        )
        assert "Function declaration adhura hai" in hint(
            MessageKind.INCOMPLETE_FUNCTION_SIGNATURE, Language.HI
        )
