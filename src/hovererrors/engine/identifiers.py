"""
Identifier heuristics over raw text.

This module implements the textual name tracking used by the undefined
reference and unused function checks:

- Declared-identifier collection for the scripting (JavaScript/TypeScript)
  and Java-like dialects
- Reference extraction from logging/print call sites
- Function declaration discovery

Nothing here is scope aware. A name declared anywhere in the document is
treated as declared everywhere in it, and the declared set is one flat set
rebuilt from scratch on every call.
"""

import re
from dataclasses import dataclass

IDENTIFIER = r"[A-Za-z_$][\w$]*"
IDENTIFIER_RE = re.compile(rf"^{IDENTIFIER}$")

SCRIPTING_BUILTINS: frozenset[str] = frozenset(
    {
        "console",
        "undefined",
        "null",
        "window",
        "document",
        "global",
        "process",
        "module",
        "exports",
    }
)

JAVA_BUILTINS: frozenset[str] = frozenset(
    {
        "System",
        "out",
        "println",
        "String",
        "Integer",
        "Double",
        "Float",
        "Boolean",
        "ArrayList",
        "HashMap",
    }
)

JAVA_DECLARATION_KEYWORDS = (
    "int",
    "String",
    "double",
    "float",
    "boolean",
    "long",
    "short",
    "byte",
    "char",
    "var",
)

_SCRIPTING_DECLARATION_RE = re.compile(rf"\b(?:let|const|var)\s+({IDENTIFIER})")
_FUNCTION_DECLARATION_RE = re.compile(rf"\bfunction\s+({IDENTIFIER})\s*\(")
_FUNCTION_PARAMETERS_RE = re.compile(r"\bfunction\b\s*[\w$]*\s*\(([^)]*)\)")
# No leading word boundary: "Point p" declares p through its trailing "int p".
_JAVA_DECLARATION_RE = re.compile(
    rf"(?:{'|'.join(JAVA_DECLARATION_KEYWORDS)})\s+({IDENTIFIER})"
)

_CONSOLE_CALL_RE = re.compile(r"console\.log\s*\(")
_PRINTLN_CALL_RE = re.compile(rf"System\.out\.print(?:ln)?\s*\(\s*({IDENTIFIER})\s*\)")

QUOTES = "\"'`"


@dataclass(frozen=True, slots=True)
class Reference:
    """A bare identifier used as a sink call argument; offset is 0-indexed."""

    name: str
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.name)


@dataclass(frozen=True, slots=True)
class FunctionDeclaration:
    """
    A ``function name(`` declaration.

    Attributes:
        name: The declared function name
        start: Offset of the ``function`` keyword
        end: Offset just past the name
    """

    name: str
    start: int
    end: int


# =============================================================================
# Declared identifiers
# =============================================================================


def _parameter_name(parameter: str) -> str:
    """Reduce ``...rest``, ``a = 1`` or ``a?: number`` to the bound name."""
    name = parameter.strip()
    if name.startswith("..."):
        name = name[3:]
    for separator in ("=", ":"):
        name = name.split(separator, 1)[0]
    return name.strip().rstrip("?")


def find_function_declarations(text: str) -> list[FunctionDeclaration]:
    """Find every ``function name(`` declaration in text order."""
    return [
        FunctionDeclaration(match.group(1), match.start(), match.end(1))
        for match in _FUNCTION_DECLARATION_RE.finditer(text)
    ]


def collect_declared_scripting(text: str) -> set[str]:
    """
    Collect the names bound anywhere in JavaScript/TypeScript text.

    Includes ``let``/``const``/``var`` declarations, function names, the
    names in every function parameter list and the scripting built-ins.
    """
    declared = set(SCRIPTING_BUILTINS)

    for match in _SCRIPTING_DECLARATION_RE.finditer(text):
        declared.add(match.group(1))

    for declaration in find_function_declarations(text):
        declared.add(declaration.name)

    for match in _FUNCTION_PARAMETERS_RE.finditer(text):
        for parameter in match.group(1).split(","):
            name = _parameter_name(parameter)
            if name:
                declared.add(name)

    return declared


def collect_declared_java(text: str) -> set[str]:
    """Collect names following a Java type keyword, plus the Java built-ins."""
    declared = set(JAVA_BUILTINS)
    for match in _JAVA_DECLARATION_RE.finditer(text):
        declared.add(match.group(1))
    return declared


# =============================================================================
# Sink call references
# =============================================================================


def _split_call_arguments(line: str, start: int) -> list[tuple[str, int]] | None:
    """
    Split the argument list that opens just before ``start``.

    Commas and brackets inside quoted strings are ignored, as are commas
    inside nested brackets. Returns ``(raw_argument, column)`` pairs, or None
    when the call is not closed on this line.
    """
    arguments: list[tuple[str, int]] = []
    current = start
    depth = 0
    quote = ""
    escaped = False

    for index in range(start, len(line)):
        char = line[index]

        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = ""
            continue

        if char in QUOTES:
            quote = char
        elif char in "([{":
            depth += 1
        elif char in ")]}":
            if depth > 0:
                depth -= 1
            elif char == ")":
                arguments.append((line[current:index], current))
                return arguments
            else:
                return None
        elif char == "," and depth == 0:
            arguments.append((line[current:index], current))
            current = index + 1

    return None


def extract_console_arguments(line: str) -> list[Reference]:
    """
    Extract bare identifiers passed to ``console.log`` calls on one line.

    String literals, numbers and compound expressions are dropped; only
    arguments that are a single identifier are returned, with their column.

    Example:
        >>> extract_console_arguments('console.log("a, b", x, 1, y)')
        [Reference(name='x', offset=20), Reference(name='y', offset=26)]
    """
    references: list[Reference] = []
    for call in _CONSOLE_CALL_RE.finditer(line):
        arguments = _split_call_arguments(line, call.end())
        if arguments is None:
            continue
        for raw, column in arguments:
            candidate = raw.strip()
            if IDENTIFIER_RE.match(candidate):
                leading = len(raw) - len(raw.lstrip())
                references.append(Reference(candidate, column + leading))
    return references


def find_console_references(text: str) -> list[Reference]:
    """Run ``extract_console_arguments`` on every line; offsets are absolute."""
    references: list[Reference] = []
    line_start = 0
    for line in text.split("\n"):
        for reference in extract_console_arguments(line):
            references.append(Reference(reference.name, line_start + reference.offset))
        line_start += len(line) + 1
    return references


def find_println_references(text: str) -> list[Reference]:
    """Find single-identifier ``System.out.println(name)`` arguments."""
    return [
        Reference(match.group(1), match.start(1))
        for match in _PRINTLN_CALL_RE.finditer(text)
    ]
