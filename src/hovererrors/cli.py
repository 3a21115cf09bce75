"""
hover-errors Command-Line Interface.

Runs the checks on files outside an editor.

Usage:
    hovererrors check app.js Main.java       # Report diagnostics
    hovererrors check app.js --lang hi       # Messages in Hindi transliteration
    hovererrors check app.js --json          # Machine-readable output
    hovererrors explain app.js 12 5          # Explain the issue at line 12, column 5
    hovererrors rules                        # List the rules
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

from hovererrors import __version__
from hovererrors.engine.diagnostics import Diagnostic, compute_diagnostics
from hovererrors.engine.dialects import Dialect
from hovererrors.engine.explain import find_explanation
from hovererrors.engine.messages import Language
from hovererrors.engine.rules import ALL_RULES, RuleCategory, RuleConfiguration, Severity
from hovererrors.engine.text import Position
from hovererrors.utils.errors import HoverErrorsError

LANGUAGE_ENV_VAR = "HOVER_ERRORS_LANGUAGE"


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.BLUE = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="hovererrors",
        description="hover-errors - heuristic diagnostics for JavaScript, TypeScript and Java",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    dialect_help = (
        f"Dialect of the input ({', '.join(d.value for d in Dialect)}); "
        "guessed from the file suffix by default"
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        aliases=["c"],
        help="Report diagnostics for one or more files",
    )
    check_parser.add_argument(
        "inputs",
        type=Path,
        nargs="+",
        help="Input source files",
    )
    check_parser.add_argument(
        "--dialect",
        type=str,
        default=None,
        help=dialect_help,
    )
    check_parser.add_argument(
        "--lang",
        choices=[language.value for language in Language],
        default=None,
        help=f"Message language (default: ${LANGUAGE_ENV_VAR} or 'en')",
    )
    check_parser.add_argument(
        "--allow",
        action="append",
        default=[],
        metavar="RULE",
        help="Disable a rule by code or name (e.g., 'missing-semicolon' or 'E0002'); repeatable",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    # Explain command
    explain_parser = subparsers.add_parser(
        "explain",
        aliases=["x"],
        help="Explain the issue at a line and column",
    )
    explain_parser.add_argument("input", type=Path, help="Input source file")
    explain_parser.add_argument("line", type=int, help="Line number (1-based)")
    explain_parser.add_argument("column", type=int, help="Column number (1-based)")
    explain_parser.add_argument(
        "--dialect",
        type=str,
        default=None,
        help=dialect_help,
    )

    # Rules command
    subparsers.add_parser(
        "rules",
        help="List all rules",
    )

    return parser


# =============================================================================
# Shared helpers
# =============================================================================


def _resolve_language(value: Optional[str]) -> Language:
    if value is None:
        value = os.environ.get(LANGUAGE_ENV_VAR, Language.EN.value)
    return Language.from_setting(value)


def _resolve_dialect(path: Path, name: Optional[str]) -> Dialect:
    """
    Pick the dialect for ``path``.

    Raises:
        HoverErrorsError: If no dialect is given and the suffix is unknown
    """
    if name:
        return Dialect.parse(name)
    dialect = Dialect.from_path(path)
    if dialect is None:
        raise HoverErrorsError(
            f"Cannot tell the dialect of {path}",
            "pass --dialect javascript, typescript or java",
        )
    return dialect


def _read_source(path: Path) -> str:
    if not path.exists():
        raise HoverErrorsError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


# =============================================================================
# Commands
# =============================================================================


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    language = _resolve_language(args.lang)

    config = RuleConfiguration()
    for rule_id in args.allow:
        try:
            config.allow(rule_id)
        except KeyError:
            print(f"Error: Unknown rule '{rule_id}'", file=sys.stderr)
            return 1

    results: list[tuple[Path, Dialect, str, list[Diagnostic]]] = []
    for input_path in args.inputs:
        try:
            dialect = _resolve_dialect(input_path, args.dialect)
            source = _read_source(input_path)
        except HoverErrorsError as e:
            print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
            return 1
        diagnostics = compute_diagnostics(dialect, source, language, config)
        results.append((input_path, dialect, source, diagnostics))

    if args.json:
        _print_json(results)
    else:
        for input_path, _dialect, source, diagnostics in results:
            _print_report(input_path, source, diagnostics, language)

    has_errors = any(
        d.severity == Severity.ERROR for _, _, _, diagnostics in results for d in diagnostics
    )
    return 1 if has_errors else 0


def _print_report(
    input_path: Path,
    source: str,
    diagnostics: list[Diagnostic],
    language: Language,
) -> None:
    """
    Print a Rust-style formatted report with source context.

    Example output:
        error[E0003]: Variable 'y' is not defined
          --> app.js:1:13
           |
         1 | console.log(y);
           |             ^
           |
           = help: Make sure this variable is declared with let, const, var, ...
    """
    if not diagnostics:
        print(f"{Colors.GREEN}[ok]{Colors.RESET} {input_path}: No issues found")
        return

    source_lines = source.split("\n")

    for diagnostic in diagnostics:
        is_error = diagnostic.severity == Severity.ERROR
        level_color = Colors.RED if is_error else Colors.YELLOW
        level_str = "error" if is_error else "warning"

        print(
            f"{level_color}{Colors.BOLD}{level_str}[{diagnostic.code}]{Colors.RESET}: "
            f"{Colors.BOLD}{diagnostic.message}{Colors.RESET}"
        )

        start, end = diagnostic.range.start, diagnostic.range.end
        print(f"  {Colors.BLUE}-->{Colors.RESET} {input_path}:{start.line + 1}:{start.column + 1}")

        if 0 <= start.line < len(source_lines):
            print(f"   {Colors.BLUE}|{Colors.RESET}")
            print(f"{Colors.BLUE}{start.line + 1:3} |{Colors.RESET} {source_lines[start.line]}")

            width = end.column - start.column if end.line == start.line else 1
            underline = "^" * max(1, width)
            padding = " " * start.column
            print(
                f"   {Colors.BLUE}|{Colors.RESET} {padding}{level_color}{underline}{Colors.RESET}"
            )
            print(f"   {Colors.BLUE}|{Colors.RESET}")

        print(
            f"   {Colors.BLUE}={Colors.RESET} {Colors.GREEN}help:{Colors.RESET} "
            f"{diagnostic.hint(language)}"
        )
        print()

    errors = sum(1 for d in diagnostics if d.severity == Severity.ERROR)
    warnings = len(diagnostics) - errors
    print(f"{input_path}: {errors} error(s) and {warnings} warning(s)")


def _diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    start, end = diagnostic.range.start, diagnostic.range.end
    return {
        "rule": {
            "code": diagnostic.rule.code,
            "name": diagnostic.rule.name,
            "category": diagnostic.rule.category.value,
        },
        "severity": diagnostic.severity.value,
        "message": diagnostic.message,
        "range": {
            "start": {"line": start.line, "column": start.column},
            "end": {"line": end.line, "column": end.column},
        },
    }


def _print_json(results: list[tuple[Path, Dialect, str, list[Diagnostic]]]) -> None:
    """Print check results as JSON."""
    files = []
    errors = 0
    warnings = 0
    for input_path, dialect, _source, diagnostics in results:
        files.append(
            {
                "file": str(input_path),
                "dialect": dialect.value,
                "diagnostics": [_diagnostic_to_dict(d) for d in diagnostics],
            }
        )
        for diagnostic in diagnostics:
            if diagnostic.severity == Severity.ERROR:
                errors += 1
            else:
                warnings += 1

    print(
        json.dumps(
            {"files": files, "summary": {"errors": errors, "warnings": warnings}},
            indent=2,
            ensure_ascii=False,
        )
    )


def cmd_explain(args: argparse.Namespace) -> int:
    """Handle the explain command."""
    try:
        dialect = _resolve_dialect(args.input, args.dialect)
        source = _read_source(args.input)
    except HoverErrorsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    position = Position(args.line - 1, args.column - 1)
    explanation = find_explanation(dialect, source, position)
    if explanation is None:
        print(f"{Colors.GREEN}[ok]{Colors.RESET} {args.input}:{args.line}:{args.column}: nothing to explain")
        return 0

    print(explanation.to_markdown())
    return 0


def cmd_rules(args: argparse.Namespace) -> int:  # noqa: ARG001
    """Handle the rules command."""
    print(f"\n{Colors.BOLD}Available Rules{Colors.RESET}")
    print("=" * 60)

    for category in RuleCategory:
        rules = [rule for rule in ALL_RULES.values() if rule.category == category]
        if not rules:
            continue

        print(f"\n{Colors.CYAN}{category.value.upper()}{Colors.RESET}")
        for rule in sorted(rules, key=lambda r: r.code):
            level_str = (
                f"{Colors.RED}error{Colors.RESET}"
                if rule.severity == Severity.ERROR
                else f"{Colors.YELLOW}warning{Colors.RESET}"
            )
            print(f"  {rule.code} {rule.name:30s} [{level_str}]")

    print()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "check": cmd_check,
        "c": cmd_check,
        "explain": cmd_explain,
        "x": cmd_explain,
        "rules": cmd_rules,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
