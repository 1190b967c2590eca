""" CSS LEXING
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

<comment></comment>
<at-rule/>
<ruleset>
    <selector/> <block>
        <property/>: <value/>;
    </block>
</ruleset>
"""

from __future__ import annotations
import re
from typing import Literal

from nativecss.css.tokens import *
from nativecss.errors import ParseError

__all__ = ["Lexer", "Check", "ParseError"]

REPLACEMENT_CHAR = '�'
MAX_CODE_POINT = 0x10FFFF

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= 0x80

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in "0123456789"

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def quote(current: str | None) -> bool:
        return current is not None and current in '"\''

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in '0123456789abcdefABCDEF'

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def non_printable(current: str | None) -> bool:
        if current is None:
            return False
        o = ord(current)
        return o <= 0x08 or o == 0x0B or 0x0E <= o <= 0x1F or o == 0x7F

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif first == "\\":
            return Check.escape(first, second)
        return Check.ident_start(first)

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first in ("+", "-"):
            return Check.digit(second) or (second == "." and Check.digit(third))
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


SIMPLE: dict[str, type[Delim]] = {
    "(": LParantheses,
    ")": RParantheses,
    "[": LSquareBracket,
    "]": RSquareBracket,
    "{": LCurlyBracket,
    "}": RCurlyBracket,
    ",": Comma,
    ":": Colon,
    ";": Semicolon,
}

RETURNS = re.compile("\r\n|\f|\r")
CHARSET = re.compile(rb'^@charset "([^"]+)";')

class Lexer:
    def __init__(self, source: str) -> None:
        self.source: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[ParseError] = []

    @staticmethod
    def from_path(path: str) -> Lexer:
        return Lexer(Lexer.get_css(path))

    @staticmethod
    def get_css(path: str) -> str:
        """Read a stylesheet from disk, honoring a leading `@charset` rule.

        Returns:
            str: The decoded source without the `@charset` rule.
        """
        with open(path, "rb") as file:
            data = file.read()

        if (charset := CHARSET.match(data)) is not None:
            return data[charset.end():].decode(charset.group(1).decode("ascii").lower()).strip()
        return data.decode("utf-8-sig").strip()

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        token = self.consume()
        if isinstance(token, EOF):
            raise StopIteration
        return token

    def process(self) -> list[Token]:
        """Tokenize the entire source at once."""
        return [token for token in self]

    def position(self) -> tuple[int, int]:
        """Line and column, both 1 based, of the current index."""
        line = self.source.count("\n", 0, self.index) + 1
        column = self.index - (self.source.rfind("\n", 0, self.index) + 1) + 1
        return line, column

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead without consuming it."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            self.index += 1
            return self.source[self.index - 1]
        return None

    def reconsume(self):
        self.index -= 1

    def error(self, message: str):
        self.errors.append(ParseError(message, *self.position()))

    def _consume_comment_(self) -> Comment:
        # The opening `/` is already consumed
        self.next()
        while True:
            next = self.next()
            if next is None:
                self.error("Comment not closed")
                break
            if next == "*" and self.peek() == "/":
                self.next()
                break
        return Comment()

    def _consume_whitespace_(self) -> Whitespace:
        while Check.whitespace(self.peek()):
            self.next()
        return Whitespace(" ")

    def _consume_string_(self, ending: str) -> String | BadString:
        value = ""
        while True:
            next = self.next()
            if next is None:
                self.error("String not closed")
                return String(value)
            elif next == ending:
                return String(value)
            elif next == "\n":
                self.reconsume()
                self.error("Newline in string")
                return BadString(value)
            elif next == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.next()
                else:
                    value += self._consume_escape_()
            else:
                value += next

    def _consume_escape_(self) -> str:
        # The `\` is already consumed
        next = self.next()
        if next is None:
            self.error("Escape at end of input")
            return REPLACEMENT_CHAR

        if Check.hex(next):
            digits = next
            while Check.hex(self.peek()) and len(digits) < 6:
                digits += self.next()  # type: ignore[operator]
            if Check.whitespace(self.peek()):
                self.next()
            code = int(digits, 16)
            if code == 0 or 0xD800 <= code <= 0xDFFF or code > MAX_CODE_POINT:
                return REPLACEMENT_CHAR
            return chr(code)
        return next

    def _consume_ident_(self) -> str:
        result = ''
        while (next := self.next()) is not None:
            if Check.ident(next):
                result += next
            elif Check.escape(next, self.peek()):
                result += self._consume_escape_()
            else:
                self.reconsume()
                break
        return result

    def _consume_number_(self) -> tuple[int | float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number, and the number as written.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if self.peek() in ("+", "-"):
            raw += self.next()  # type: ignore[operator]

        while Check.digit(self.peek()):
            raw += self.next()  # type: ignore[operator]

        if self.peek() == "." and Check.digit(self.peek(2)):
            _type = "number"
            raw += self.next() + self.next()  # type: ignore[operator]
            while Check.digit(self.peek()):
                raw += self.next()  # type: ignore[operator]

        if self.peek() in ("e", "E") and (
            Check.digit(self.peek(2))
            or (self.peek(2) in ("+", "-") and Check.digit(self.peek(3)))
        ):
            _type = "number"
            raw += self.next()  # type: ignore[operator]
            if self.peek() in ("+", "-"):
                raw += self.next()  # type: ignore[operator]
            while Check.digit(self.peek()):
                raw += self.next()  # type: ignore[operator]

        return (int(raw) if _type == "integer" else float(raw)), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points and produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw)
        return Number(value, _type, raw)

    def _consume_remnant_bad_url_(self):
        while (next := self.next()) is not None and next != ")":
            if Check.escape(next, self.peek()):
                self._consume_escape_()

    def _consume_url_(self) -> Url | BadUrl:
        url = ""
        while Check.whitespace(self.peek()):
            self.next()

        while True:
            next = self.next()
            if next is None:
                self.error("Url not closed")
                return Url(url)
            elif next == ")":
                return Url(url)
            elif Check.whitespace(next):
                while Check.whitespace(self.peek()):
                    self.next()
                if self.peek() == ")":
                    self.next()
                    return Url(url)
                elif self.peek() is None:
                    self.error("Url not closed")
                    return Url(url)
                self._consume_remnant_bad_url_()
                return BadUrl(url)
            elif Check.quote(next) or next == "(" or Check.non_printable(next):
                self.error("Invalid character in url")
                self._consume_remnant_bad_url_()
                return BadUrl(url)
            elif next == "\\":
                if Check.escape(next, self.peek()):
                    url += self._consume_escape_()
                else:
                    self.error("Invalid escape in url")
                    self._consume_remnant_bad_url_()
                    return BadUrl(url)
            else:
                url += next

    def _consume_ident_like_(self) -> Ident | Function | Url | BadUrl:
        name = self._consume_ident_()
        if name.lower() == "url" and self.peek() == "(":
            self.next()
            while Check.whitespace(self.peek()) and Check.whitespace(self.peek(2)):
                self.next()
            if Check.quote(self.peek()) or (Check.whitespace(self.peek()) and Check.quote(self.peek(2))):
                return Function(name)
            return self._consume_url_()
        elif self.peek() == "(":
            self.next()
            return Function(name)
        return Ident(name)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        start = self.index
        token = self._consume_token_()
        token.text = self.source[start:self.index]
        return token

    def _consume_token_(self) -> Token:
        next = self.next()
        if next is None:
            return EOF()
        elif next == "/" and self.peek() == "*":
            return self._consume_comment_()
        elif Check.whitespace(next):
            return self._consume_whitespace_()
        elif Check.quote(next):
            return self._consume_string_(next)
        elif next == '#':
            if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
                _type = "id" if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)) else "unrestricted"
                return Hash(self._consume_ident_(), type=_type)
            return Delim(next)
        elif next in "+.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(next)
        elif next == "-":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            elif self.peek() == "-" and self.peek(2) == ">":
                self.next()
                self.next()
                return CDC('-->')
            elif Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_()
            return Delim(next)
        elif next == "<":
            if (self.peek(1) or '') + (self.peek(2) or '') + (self.peek(3) or '') == "!--":
                self.index += 3
                return CDO('<!--')
            return Delim(next)
        elif next == "@":
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                return AtKeyword(self._consume_ident_())
            return Delim(next)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume()
                return self._consume_ident_like_()
            self.error("Invalid escape")
            return Delim(next)
        elif Check.digit(next):
            self.reconsume()
            return self._consume_numeric_()
        elif Check.ident_start(next):
            self.reconsume()
            return self._consume_ident_like_()
        elif next in SIMPLE:
            return SIMPLE[next](next)
        return Delim(next)
