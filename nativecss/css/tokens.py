"""CSS tokens.

https://www.w3.org/TR/css-syntax-3/#tokenization

Every token keeps two strings:
    raw  => the decoded value (`hover:p-4` for the ident `hover\\:p-4`)
    text => the exact slice of source the token was read from

Selectors, media conditions and declaration values are rebuilt from `text` so the
parser never has to re-escape anything.
"""
from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "AtKeyword",
    "Hash",
    "String",
    "BadString",
    "Url",
    "BadUrl",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "LCurlyBracket",
    "LSquareBracket",
    "LParantheses",
    "RCurlyBracket",
    "RSquareBracket",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",

    "Comment",
    "Whitespace",
    "CDC",
    "CDO",
    "EOF",

    "OPENING",
    "CLOSING",
]

class Token:
    raw: str
    text: str
    def __init__(self, raw: str = '', text: str | None = None):
        self.raw = raw
        self.text = raw if text is None else text

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.raw == other.raw  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

class Ident(Token): pass
class Function(Token): pass
class AtKeyword(Token): pass
class Hash(Token):
    def __init__(self, raw: str = '', text: str | None = None, *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw, text)
    def __repr__(self) -> str:
        return f'Hash({"id, " if self.type == "id" else ""}{self.raw!r})'

class String(Token): pass
class BadString(Token): pass
class Url(Token): pass
class BadUrl(Token): pass

class Delim(Token):
    def __init__(self, raw: str, text: str | None = None):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw, text)

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class LCurlyBracket(Delim): pass
class RCurlyBracket(Delim): pass
class LSquareBracket(Delim): pass
class RSquareBracket(Delim): pass
class LParantheses(Delim): pass
class RParantheses(Delim): pass

class Number(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(self, value: int | float, type: Literal['integer', 'number'], raw: str, text: str | None = None):
        self.value = value
        self.type = type
        super().__init__(raw, text)

class Percentage(Number):
    def __repr__(self) -> str:
        return f"Percentage({self.value!r}%)"

class Dimension(Number):
    unit: str
    def __init__(self, value: int | float, type: Literal['integer', 'number'], unit: str, raw: str, text: str | None = None):
        self.unit = unit
        super().__init__(value, type, raw, text)

    def __repr__(self) -> str:
        return f"Dimension({self.value!r}{self.unit})"

class Comment(Token):
    @property
    def content(self) -> str:
        return self.text.removeprefix("/*").removesuffix("*/")

class Whitespace(Token): pass
class CDO(Token): pass
class CDC(Token): pass
class EOF(Token): pass

# Function tokens open a parenthesis block that closes on `)`
OPENING: dict[type, type] = {
    LCurlyBracket: RCurlyBracket,
    LSquareBracket: RSquareBracket,
    LParantheses: RParantheses,
    Function: RParantheses,
}
CLOSING = tuple(set(OPENING.values()))
