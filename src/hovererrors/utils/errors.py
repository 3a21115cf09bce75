"""
Error types for the hover-errors analyzer.

The analysis engine itself never raises for malformed source text; these
exceptions cover caller mistakes such as asking for an unknown dialect or
converting a position that lies outside the text.
"""

from typing import Optional


class HoverErrorsError(Exception):
    """Base exception for all hover-errors errors."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.detail:
            return f"{self.message}\n    {self.detail}"
        return self.message


class UnsupportedDialectError(HoverErrorsError):
    """Raised when a dialect name or file suffix is not one of the supported ones."""

    def __init__(self, requested: str, supported: Optional[list[str]] = None) -> None:
        self.requested = requested
        self.supported = supported or []
        detail = None
        if self.supported:
            detail = f"supported: {', '.join(self.supported)}"
        super().__init__(f"Unsupported dialect '{requested}'", detail)


class InvalidPositionError(HoverErrorsError):
    """Raised when an offset or position does not address the current text."""

    pass
