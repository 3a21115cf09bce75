"""
Integration tests for the complete hover-errors pipeline.

These tests run realistic documents through the engine, the language
server and the command line, and check that all three agree.
"""

import json

import pytest

from hovererrors.cli import main
from hovererrors.engine import Dialect, Language, Position, compute_diagnostics, explain_at
from hovererrors.engine.rules import MISSING_SEMICOLON, UNDEFINED_VARIABLE, UNUSED_FUNCTION
from hovererrors.lsp.diagnostics import get_diagnostics_for_document

JAVASCRIPT_SOURCE = """let total = 0;
function add(n) {
  total += n;
}
function unused() {
  return 1;
}
add(2);
console.log(total, missing);
"""

TYPESCRIPT_SOURCE = """function greet(name: string, greeting = "hi"): void {
  console.log(greeting, name, salutation);
}
greet("a");
"""

JAVA_SOURCE = """public class Main {
    public static void main(String[] args) {
        int count = 5
        String name = "x";
        System.out.println(count);
        System.out.println(other);
    }
}
"""


class TestEngine:
    """Test whole documents through compute_diagnostics."""

    def test_javascript_document(self) -> None:
        """Test undefined references and unused functions together."""
        diagnostics = compute_diagnostics(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE)

        assert [d.rule for d in diagnostics] == [UNDEFINED_VARIABLE, UNUSED_FUNCTION]
        undefined, unused = diagnostics
        assert undefined.message == "Variable 'missing' is not defined"
        assert undefined.range.start == Position(8, 19)
        assert undefined.range.end == Position(8, 26)
        assert unused.range.start == Position(4, 0)
        assert unused.range.end == Position(4, 15)

    def test_typescript_document(self) -> None:
        """Test that typed and defaulted parameters count as declared."""
        diagnostics = compute_diagnostics(Dialect.TYPESCRIPT, TYPESCRIPT_SOURCE)

        assert [str(d) for d in diagnostics] == [
            "[E0003] 2:31: Variable 'salutation' is not defined"
        ]

    def test_java_document(self) -> None:
        """Test semicolons and println references in Java."""
        diagnostics = compute_diagnostics(Dialect.JAVA, JAVA_SOURCE)

        assert [d.rule for d in diagnostics] == [MISSING_SEMICOLON, UNDEFINED_VARIABLE]
        semicolon, undefined = diagnostics
        assert semicolon.range.start == Position(2, 0)
        assert semicolon.range.end == Position(2, len("        int count = 5"))
        assert undefined.range.start == Position(5, 27)
        assert undefined.range.end == Position(5, 32)

    def test_language_switch_keeps_ranges(self) -> None:
        """Test that only the message text depends on the language."""
        english = compute_diagnostics(Dialect.JAVA, JAVA_SOURCE, Language.EN)
        hindi = compute_diagnostics(Dialect.JAVA, JAVA_SOURCE, Language.HI)

        assert [d.range for d in hindi] == [d.range for d in english]
        assert [d.message for d in hindi] == [
            "Semicolon missing hai!",
            "Variable 'other' define nahi hai",
        ]

    def test_is_deterministic(self) -> None:
        """Test that repeated runs give identical output."""
        first = compute_diagnostics(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE)
        second = compute_diagnostics(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE)

        assert first == second


class TestExplain:
    """Test hover explanations over whole documents."""

    def test_explains_undefined_reference(self) -> None:
        """Test the hover on a line with an undefined reference."""
        markdown = explain_at(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE, Position(8, 0))

        assert markdown is not None
        assert "Variable 'missing' is not defined" in markdown
        assert "📝" in markdown
        assert "🇮🇳" in markdown

    def test_explains_unused_function(self) -> None:
        """Test the hover on an unused declaration."""
        markdown = explain_at(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE, Position(4, 3))

        assert markdown is not None
        assert markdown.startswith("⚠️")

    def test_clean_line_has_nothing(self) -> None:
        """Test that a clean line produces no hover."""
        assert explain_at(Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE, Position(0, 0)) is None


class TestSurfacesAgree:
    """Test that the CLI, the LSP layer and the engine report the same findings."""

    @pytest.mark.parametrize(
        "name,language_id,dialect,source",
        [
            ("app.js", "javascript", Dialect.JAVASCRIPT, JAVASCRIPT_SOURCE),
            ("greet.ts", "typescript", Dialect.TYPESCRIPT, TYPESCRIPT_SOURCE),
            ("Main.java", "java", Dialect.JAVA, JAVA_SOURCE),
        ],
    )
    def test_same_ranges_everywhere(
        self, name, language_id, dialect, source, write_source, capsys
    ) -> None:
        """Test range agreement across all three surfaces."""
        path = write_source(name, source)
        engine = compute_diagnostics(dialect, source)

        main(["check", str(path), "--json"])
        report = json.loads(capsys.readouterr().out)
        cli_ranges = [
            (
                d["range"]["start"]["line"],
                d["range"]["start"]["column"],
                d["range"]["end"]["line"],
                d["range"]["end"]["column"],
            )
            for d in report["files"][0]["diagnostics"]
        ]

        lsp = get_diagnostics_for_document(source, path.as_uri(), language_id)
        lsp_ranges = [
            (d.range.start.line, d.range.start.character, d.range.end.line, d.range.end.character)
            for d in lsp
        ]

        engine_ranges = [
            (d.range.start.line, d.range.start.column, d.range.end.line, d.range.end.column)
            for d in engine
        ]
        assert cli_ranges == engine_ranges
        assert lsp_ranges == engine_ranges
        assert [d.message for d in lsp] == [d.message for d in engine]


class TestLanguageServerSession:
    """Test a short editing session against the server."""

    def test_edit_cycle(self, server, published) -> None:
        """Test open, settings change, re-check and close."""
        uri = "file:///project/Main.java"

        server.update_diagnostics(uri, JAVA_SOURCE, "java")
        assert len(published.last(uri)) == 2

        server.settings.update({"hoverErrors": {"language": "hi"}})
        fixed = JAVA_SOURCE.replace("int count = 5\n", "int count = 5;\n")
        server.update_diagnostics(uri, fixed, "java")
        assert [d.message for d in published.last(uri)] == ["Variable 'other' define nahi hai"]

        server.diagnostics.delete(uri)
        assert published.last(uri) == []
