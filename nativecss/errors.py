from __future__ import annotations

__all__ = ["NativeCSSError", "ParseError", "DeclarationConversionError"]

class NativeCSSError(Exception):
    """Base class for every error raised or collected by nativecss."""

class ParseError(NativeCSSError):
    """Recoverable syntax problem found while tokenizing or parsing a stylesheet.

    These are collected on `Lexer.errors`, `Parser.errors` and `Root.errors`. They are
    never raised out of `parse_stylesheet`.
    """
    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            super().__init__(f"{message} ({line}:{column})")
        else:
            super().__init__(message)

class DeclarationConversionError(NativeCSSError):
    """A single declaration that could not be converted to a native style.

    Args:
        property (str): The declaration's property name as written.
        value (str): The declaration's raw value.
        reason (str): Why the declaration was rejected.
    """
    def __init__(self, property: str, value: str, reason: str):
        self.property = property
        self.value = value
        self.reason = reason
        super().__init__(f"{property}: {value} ({reason})")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DeclarationConversionError):
            return (self.property, self.value, self.reason) == (other.property, other.value, other.reason)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.property, self.value, self.reason))

    def __repr__(self) -> str:
        return f"DeclarationConversionError({self.property!r}, {self.value!r}, {self.reason!r})"
