"""
Supported source dialects and the check profile each one selects.

The set of dialects is closed. Each dialect maps to one frozen profile that
says how declared names are collected, where references come from and which
of the dialect-gated checks run.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Optional

from hovererrors.engine.identifiers import (
    Reference,
    collect_declared_java,
    collect_declared_scripting,
    find_console_references,
    find_println_references,
)
from hovererrors.utils.errors import UnsupportedDialectError


class Dialect(Enum):
    """Language tag of a document, using the editor's language ids."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA = "java"

    @property
    def is_scripting(self) -> bool:
        return self in (Dialect.JAVASCRIPT, Dialect.TYPESCRIPT)

    @property
    def profile(self) -> "DialectProfile":
        return PROFILES[self]

    @classmethod
    def from_language_id(cls, language_id: str) -> Optional["Dialect"]:
        """Map an editor language id to a dialect, or None if unsupported."""
        try:
            return cls(language_id)
        except ValueError:
            return None

    @classmethod
    def from_path(cls, path: str | PurePath) -> Optional["Dialect"]:
        """Guess the dialect from a file suffix, or None if unsupported."""
        return SUFFIXES.get(PurePath(path).suffix.lower())

    @classmethod
    def parse(cls, name: str) -> "Dialect":
        """
        Resolve a dialect name given by a user.

        Raises:
            UnsupportedDialectError: If ``name`` is not a supported dialect
        """
        dialect = cls.from_language_id(name.strip().lower())
        if dialect is None:
            raise UnsupportedDialectError(name, [d.value for d in cls])
        return dialect


SUFFIXES: dict[str, Dialect] = {
    ".js": Dialect.JAVASCRIPT,
    ".mjs": Dialect.JAVASCRIPT,
    ".cjs": Dialect.JAVASCRIPT,
    ".jsx": Dialect.JAVASCRIPT,
    ".ts": Dialect.TYPESCRIPT,
    ".mts": Dialect.TYPESCRIPT,
    ".cts": Dialect.TYPESCRIPT,
    ".tsx": Dialect.TYPESCRIPT,
    ".java": Dialect.JAVA,
}


@dataclass(frozen=True)
class DialectProfile:
    """
    The checks a dialect runs.

    Attributes:
        name: Human-readable profile name
        collect_declared: Builds the flat declared-name set from full text
        find_references: Finds sink-call references with absolute offsets
        checks_semicolons: Whether the missing-semicolon check runs
        checks_unused_functions: Whether the unused-function check runs
    """

    name: str
    collect_declared: Callable[[str], set[str]]
    find_references: Callable[[str], list[Reference]]
    checks_semicolons: bool = False
    checks_unused_functions: bool = False


SCRIPTING_PROFILE = DialectProfile(
    name="scripting",
    collect_declared=collect_declared_scripting,
    find_references=find_console_references,
    checks_unused_functions=True,
)

JAVA_PROFILE = DialectProfile(
    name="java",
    collect_declared=collect_declared_java,
    find_references=find_println_references,
    checks_semicolons=True,
)

PROFILES: dict[Dialect, DialectProfile] = {
    Dialect.JAVASCRIPT: SCRIPTING_PROFILE,
    Dialect.TYPESCRIPT: SCRIPTING_PROFILE,
    Dialect.JAVA: JAVA_PROFILE,
}
