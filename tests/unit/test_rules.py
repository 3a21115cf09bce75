"""Tests for the rule registry and dialect profiles."""

import pytest

from hovererrors.engine.dialects import JAVA_PROFILE, SCRIPTING_PROFILE, Dialect
from hovererrors.engine.rules import (
    ALL_RULES,
    MISSING_SEMICOLON,
    UNUSED_FUNCTION,
    RuleConfiguration,
    Severity,
    get_rule,
)
from hovererrors.utils.errors import UnsupportedDialectError


class TestRuleRegistry:
    """Test suite for rule lookup and configuration."""

    def test_codes_are_unique(self) -> None:
        """Test the registry contents."""
        assert sorted(ALL_RULES) == ["E0001", "E0002", "E0003", "W0001"]

    def test_lookup_by_code_or_name(self) -> None:
        """Test that both identifiers resolve to the same rule."""
        assert get_rule("E0002") is MISSING_SEMICOLON
        assert get_rule("missing-semicolon") is MISSING_SEMICOLON
        assert get_rule("nope") is None

    def test_unused_function_is_a_warning(self) -> None:
        """Test default severities."""
        assert UNUSED_FUNCTION.severity == Severity.WARNING
        assert MISSING_SEMICOLON.severity == Severity.ERROR

    def test_allow_disables_rule(self) -> None:
        """Test disabling a rule by name."""
        config = RuleConfiguration()
        config.allow("unused-function")

        assert not config.is_enabled(UNUSED_FUNCTION)
        assert config.is_enabled(MISSING_SEMICOLON)

    def test_allow_unknown_rule(self) -> None:
        """Test that unknown rule ids are rejected."""
        with pytest.raises(KeyError):
            RuleConfiguration().allow("W9999")

    def test_from_disabled_skips_unknown_ids(self) -> None:
        """Test building a configuration from client settings."""
        config = RuleConfiguration.from_disabled(["E0002", "bogus"])

        assert config.disabled == {"E0002"}


class TestDialects:
    """Test suite for dialect lookup and profiles."""

    def test_language_ids(self) -> None:
        """Test editor language ids."""
        assert Dialect.from_language_id("javascript") == Dialect.JAVASCRIPT
        assert Dialect.from_language_id("typescript") == Dialect.TYPESCRIPT
        assert Dialect.from_language_id("java") == Dialect.JAVA
        assert Dialect.from_language_id("python") is None

    def test_paths(self) -> None:
        """Test suffix detection."""
        assert Dialect.from_path("src/app.JS") == Dialect.JAVASCRIPT
        assert Dialect.from_path("view.tsx") == Dialect.TYPESCRIPT
        assert Dialect.from_path("Main.java") == Dialect.JAVA
        assert Dialect.from_path("notes.txt") is None

    def test_parse(self) -> None:
        """Test parsing a user-supplied dialect name."""
        assert Dialect.parse(" Java ") == Dialect.JAVA
        with pytest.raises(UnsupportedDialectError) as excinfo:
            Dialect.parse("cobol")
        assert "javascript" in str(excinfo.value)

    def test_profiles(self) -> None:
        """Test which checks each dialect enables."""
        assert Dialect.JAVASCRIPT.profile is SCRIPTING_PROFILE
        assert Dialect.TYPESCRIPT.profile is SCRIPTING_PROFILE
        assert Dialect.JAVA.profile is JAVA_PROFILE
        assert SCRIPTING_PROFILE.checks_unused_functions
        assert not SCRIPTING_PROFILE.checks_semicolons
        assert JAVA_PROFILE.checks_semicolons
        assert not JAVA_PROFILE.checks_unused_functions
        assert Dialect.TYPESCRIPT.is_scripting
        assert not Dialect.JAVA.is_scripting
