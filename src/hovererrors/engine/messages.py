"""
Bilingual message catalog.

Two static tables keyed by message kind and language:

- ``MESSAGES``: the short text attached to a diagnostic
- ``HINTS``: the longer guidance shown in hovers and CLI ``help:`` lines

Entries that mention the offending name are callables of that name.
"""

from collections.abc import Callable
from enum import Enum
from typing import Optional, Union


class Language(Enum):
    """Message language preference."""

    EN = "en"
    HI = "hi"

    @classmethod
    def from_setting(cls, value: object) -> "Language":
        """Anything other than ``hi`` falls back to English."""
        if isinstance(value, Language):
            return value
        if isinstance(value, str) and value.strip().lower() == "hi":
            return cls.HI
        return cls.EN


class MessageKind(Enum):
    """Catalog keys, one per kind of finding."""

    MISSING_SEMICOLON = "missing-semicolon"
    UNDEFINED_VARIABLE = "undefined-variable"
    INCOMPLETE_BLOCK = "incomplete-block"
    INCOMPLETE_FUNCTION_SIGNATURE = "incomplete-function-signature"
    UNUSED_FUNCTION = "unused-function"


Entry = Union[str, Callable[[str], str]]


MESSAGES: dict[MessageKind, dict[Language, Entry]] = {
    MessageKind.MISSING_SEMICOLON: {
        Language.EN: "Missing semicolon",
        Language.HI: "Semicolon missing hai!",
    },
    MessageKind.UNDEFINED_VARIABLE: {
        Language.EN: lambda name: f"Variable '{name}' is not defined",
        Language.HI: lambda name: f"Variable '{name}' define nahi hai",
    },
    MessageKind.INCOMPLETE_BLOCK: {
        Language.EN: "Block is incomplete. Missing closing brace, bracket, or parenthesis.",
        Language.HI: "Block adhura hai. Closing brace, bracket, ya parenthesis missing hai.",
    },
    MessageKind.INCOMPLETE_FUNCTION_SIGNATURE: {
        Language.EN: "Function declaration incomplete. Missing parenthesis or opening brace.",
        Language.HI: "Function declaration adhura hai. Parenthesis ya opening brace missing hai.",
    },
    MessageKind.UNUSED_FUNCTION: {
        Language.EN: "Function is declared but never called.",
        Language.HI: "Function declare hua hai par kabhi call nahi hua.",
    },
}

HINTS: dict[MessageKind, dict[Language, str]] = {
    MessageKind.MISSING_SEMICOLON: {
        Language.EN: "Add a semicolon at the end of the statement.",
        Language.HI: "Statement ke end mein semicolon add karo.",
    },
    MessageKind.UNDEFINED_VARIABLE: {
        Language.EN: "Make sure this variable is declared with let, const, var, or function parameter.",
        Language.HI: "Check karo ki variable ko let, const, var ya function parameter se declare kiya hai ya nahi.",
    },
    MessageKind.INCOMPLETE_BLOCK: {
        Language.EN: "Block is incomplete. Missing closing brace, bracket, or parenthesis.",
        Language.HI: "Block adhura hai. Closing brace, bracket, ya parenthesis missing hai.",
    },
    MessageKind.INCOMPLETE_FUNCTION_SIGNATURE: {
        Language.EN: "Function declaration incomplete. Missing parenthesis or opening brace.",
        Language.HI: "Function declaration adhura hai. Parenthesis ya opening brace missing hai.",
    },
    MessageKind.UNUSED_FUNCTION: {
        Language.EN: "Function is declared but never called.",
        Language.HI: "Function declare hua hai par kabhi call nahi hua.",
    },
}


def render(kind: MessageKind, language: Language, name: Optional[str] = None) -> str:
    """
    Render the diagnostic message for ``kind`` in ``language``.

    Args:
        kind: The catalog key
        language: Message language
        name: The offending identifier, required by parameterized kinds

    Raises:
        ValueError: If a parameterized kind is rendered without a name
    """
    entry = MESSAGES[kind][language]
    if callable(entry):
        if name is None:
            raise ValueError(f"message '{kind.value}' needs a name")
        return entry(name)
    return entry


def hint(kind: MessageKind, language: Language) -> str:
    """Get the guidance text for ``kind`` in ``language``."""
    return HINTS[kind][language]
