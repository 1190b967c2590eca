""" CSS Parser
https://www.w3.org/TR/css-syntax-3/#parsing

Builds a small rule tree out of the token stream:

Root
 ├─ AtRule(name, params)      @media, @supports, @font-face, @import, ...
 │   └─ ...                   rules for rule-list at-rules, declarations otherwise
 └─ Rule(selectors)
     └─ Declaration(prop, value, important)

Nesting (`a { &:hover { ... } @media ... { ... } }`) is resolved while parsing. Nested
rules are emitted as siblings right after their parent with fully qualified selectors.
"""

from __future__ import annotations
from collections.abc import Iterator

from nativecss.css.lexer import Lexer, ParseError
from nativecss.css.tokens import *

__all__ = [
    "Node",
    "Declaration",
    "Container",
    "Rule",
    "AtRule",
    "Root",
    "KEYFRAMES_AT_RULES",
    "Parse",
    "Parser",
    "parse_stylesheet",
]

# At-rules whose block holds more rules instead of declarations
RULE_LIST_AT_RULES = {"media", "supports", "document", "-moz-document", "layer", "container", "scope"}
# At-rules whose block holds keyframe selectors (`from`, `to`, `50%`) with declarations
KEYFRAMES_AT_RULES = {"keyframes", "-webkit-keyframes", "-moz-keyframes", "-o-keyframes"}

class Node:
    pass

class Declaration(Node):
    prop: str
    value: str
    important: bool
    def __init__(self, prop: str, value: str, important: bool = False):
        self.prop = prop
        self.value = value
        self.important = important

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Declaration):
            return (self.prop, self.value, self.important) == (other.prop, other.value, other.important)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.prop!r}, {self.value!r})"

class Container(Node):
    children: list[Node]
    def __init__(self, children: list[Node] | None = None):
        self.children = children or []

    def walk(self) -> Iterator[Node]:
        """Every descendant in document order, parents before their children."""
        for child in self.children:
            yield child
            if isinstance(child, Container):
                yield from child.walk()

class Rule(Container):
    selectors: list[str]
    def __init__(self, selectors: list[str], children: list[Node] | None = None):
        self.selectors = selectors
        super().__init__(children)

    @property
    def declarations(self) -> list[Declaration]:
        return [child for child in self.children if isinstance(child, Declaration)]

    def __repr__(self) -> str:
        return f"Rule({', '.join(self.selectors)!r}, {self.children})"

class AtRule(Container):
    name: str
    params: str
    def __init__(self, name: str, params: str = "", children: list[Node] | None = None):
        self.name = name
        self.params = params
        super().__init__(children)

    def __repr__(self) -> str:
        return f"AtRule({self.name!r}, {self.params!r}, {{{len(self.children)}}})"

class Root(Container):
    errors: list[ParseError]
    def __init__(self, children: list[Node] | None = None, errors: list[ParseError] | None = None):
        self.errors = errors or []
        super().__init__(children)

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Root(
  {sep.join(repr(child) for child in self.children)}
)"""


def _text_(tokens: list[Token]) -> str:
    """Source text of a token run with whitespace collapsed to single spaces."""
    parts: list[str] = []
    for token in tokens:
        if not isinstance(token, Whitespace):
            parts.append(token.text)
        elif len(parts) > 0 and parts[-1] != " ":
            parts.append(" ")
    return "".join(parts).strip()

def _strip_(tokens: list[Token]) -> list[Token]:
    start, end = 0, len(tokens)
    while start < end and isinstance(tokens[start], Whitespace):
        start += 1
    while end > start and isinstance(tokens[end - 1], Whitespace):
        end -= 1
    return tokens[start:end]

def _split_selectors_(prelude: list[Token]) -> list[str]:
    """Split a rule prelude on top-level commas. `:is(a, b)` stays in one piece."""
    selectors = []
    current: list[Token] = []
    depth = 0
    for token in prelude:
        if type(token) in OPENING:
            depth += 1
        elif isinstance(token, CLOSING) and depth > 0:
            depth -= 1

        if depth == 0 and isinstance(token, Comma):
            selectors.append(_text_(current))
            current = []
        else:
            current.append(token)
    selectors.append(_text_(current))
    return [selector for selector in selectors if selector != ""]

def _resolve_nesting_(parents: list[str], selectors: list[str]) -> list[str]:
    resolved = []
    for parent in parents:
        for selector in selectors:
            if "&" in selector:
                resolved.append(selector.replace("&", parent))
            else:
                resolved.append(f"{parent} {selector}")
    return resolved


Tokens = list[Token] | str

class Parse:
    @staticmethod
    def normalize(_input_: Tokens) -> tuple[list[Token], list[ParseError]]:
        if isinstance(_input_, list):
            return _input_, []
        elif isinstance(_input_, str):
            lexer = Lexer(_input_)
            return lexer.process(), lexer.errors
        raise TypeError(
            "Unexpected input to parse. Expected a string or a list of tokens."
        )

    @staticmethod
    def parse_stylesheet(source: Tokens) -> Root:
        """Parse a stylesheet into a rule tree. Syntax errors are collected on `Root.errors`."""
        return Parser(source).parse()

    @staticmethod
    def parse_decl_list(source: Tokens) -> list[Declaration]:
        """Parse the contents of a `style=""` attribute or a declaration block body."""
        parser = Parser(source)
        return [decl for decl in parser.consume_decl_list(top_level=True) if isinstance(decl, Declaration)]

parse_stylesheet = Parse.parse_stylesheet


class Parser:
    def __init__(self, tokens: Tokens) -> None:
        tokens, errors = Parse.normalize(tokens)
        self.tokens: list[Token] = [token for token in tokens if not isinstance(token, Comment)]
        self.errors: list[ParseError] = list(errors)
        self.index = 0

    def peek(self, amount: int = 1) -> Token:
        index = self.index + amount - 1
        if index < len(self.tokens):
            return self.tokens[index]
        return EOF()

    def next(self) -> Token:
        if self.index < len(self.tokens):
            self.index += 1
            return self.tokens[self.index - 1]
        return EOF()

    def reconsume(self):
        self.index -= 1

    def error(self, message: str):
        self.errors.append(ParseError(message))

    def parse(self) -> Root:
        root = Root(self.consume_rule_list(top_level=True))
        root.errors = self.errors
        return root

    def consume_prelude(self) -> list[Token]:
        """Consume tokens up to, not including, a top-level `{`, `;`, `}` or the end of input."""
        prelude: list[Token] = []
        closers: list[type] = []
        while True:
            peek = self.peek()
            if isinstance(peek, EOF):
                return prelude
            if not closers and isinstance(peek, (LCurlyBracket, Semicolon, RCurlyBracket)):
                return prelude

            token = self.next()
            if type(token) in OPENING:
                closers.append(OPENING[type(token)])
            elif closers and isinstance(token, closers[-1]):
                closers.pop()
            prelude.append(token)

    def starts_block(self) -> bool:
        """Whether the upcoming tokens reach a top-level `{` before a `;` or `}`."""
        start = self.index
        self.consume_prelude()
        found = isinstance(self.peek(), LCurlyBracket)
        self.index = start
        return found

    def consume_rule_list(self, top_level: bool = False) -> list[Node]:
        rules: list[Node] = []
        while True:
            next = self.next()
            if isinstance(next, Whitespace):
                continue
            elif isinstance(next, EOF):
                if not top_level:
                    self.error("Block was not closed")
                return rules
            elif isinstance(next, RCurlyBracket):
                if not top_level:
                    return rules
                self.error("Unexpected '}'")
            elif isinstance(next, (CDO, CDC)):
                if not top_level:
                    self.reconsume()
                    rules.extend(self.consume_qualified_rule())
            elif isinstance(next, AtKeyword):
                rules.append(self.consume_at_rule(next))
            else:
                self.reconsume()
                rules.extend(self.consume_qualified_rule())

    def consume_at_rule(self, keyword: AtKeyword, selectors: list[str] | None = None) -> AtRule:
        """Consume an at-rule. `selectors` is set when the at-rule is nested inside a style rule,
        its declarations then apply to those selectors.
        """
        at_rule = AtRule(keyword.raw, _text_(self.consume_prelude()))

        next = self.next()
        if isinstance(next, Semicolon):
            return at_rule
        elif isinstance(next, EOF):
            self.error(f"At rule @{at_rule.name} missing semi-colon")
            return at_rule
        elif isinstance(next, RCurlyBracket):
            self.reconsume()
            return at_rule

        if selectors is not None:
            declarations, nested = self.consume_style_block(selectors)
            if len(declarations) > 0:
                at_rule.children.append(Rule(list(selectors), list(declarations)))
            at_rule.children.extend(nested)
        elif at_rule.name.lower() in RULE_LIST_AT_RULES | KEYFRAMES_AT_RULES:
            at_rule.children = self.consume_rule_list()
        else:
            at_rule.children = self.consume_decl_list()
        return at_rule

    def consume_qualified_rule(self, parents: list[str] | None = None) -> list[Node]:
        """Consume a style rule. The rule comes first in the result, followed by any rules
        and at-rules that were nested inside of it.
        """
        prelude = self.consume_prelude()
        next = self.next()
        if isinstance(next, EOF):
            self.error("Qualified rule is not closed")
            return []
        elif isinstance(next, Semicolon):
            self.error(f"Expected a block after {_text_(prelude)!r}")
            return []
        elif isinstance(next, RCurlyBracket):
            self.reconsume()
            self.error(f"Expected a block after {_text_(prelude)!r}")
            return []

        selectors = _split_selectors_(prelude)
        if parents is not None:
            selectors = _resolve_nesting_(parents, selectors)

        declarations, nested = self.consume_style_block(selectors)
        return [Rule(selectors, list(declarations)), *nested]

    def consume_declaration(self) -> Declaration | None:
        tokens = self.consume_prelude()
        name = tokens[0]

        rest = _strip_(tokens[1:])
        if len(rest) == 0 or not isinstance(rest[0], Colon):
            self.error(f"Expected a colon after {name.text!r}")
            return None

        value = _strip_(rest[1:])
        important = False
        if (
            len(value) >= 2
            and isinstance(value[-1], Ident)
            and value[-1].raw.lower() == "important"
            and type(value[-2]) is Delim
            and value[-2].raw == "!"
        ):
            value = _strip_(value[:-2])
            important = True

        return Declaration(name.raw, _text_(value), important)

    def consume_style_block(self, selectors: list[str]) -> tuple[list[Declaration], list[Node]]:
        """Consume the contents of a style rule's block, up to and including the closing `}`."""
        decls: list[Declaration] = []
        nested: list[Node] = []
        while True:
            next = self.next()
            if isinstance(next, (Whitespace, Semicolon)):
                continue
            elif isinstance(next, EOF):
                self.error("Block was not closed")
                return decls, nested
            elif isinstance(next, RCurlyBracket):
                return decls, nested
            elif isinstance(next, AtKeyword):
                nested.append(self.consume_at_rule(next, selectors))
            else:
                self.reconsume()
                if isinstance(next, Ident) and not self.starts_block():
                    if (decl := self.consume_declaration()) is not None:
                        decls.append(decl)
                else:
                    nested.extend(self.consume_qualified_rule(selectors))

    def consume_decl_list(self, top_level: bool = False) -> list[Node]:
        decls: list[Node] = []
        while True:
            next = self.next()
            if isinstance(next, (Whitespace, Semicolon)):
                continue
            elif isinstance(next, EOF):
                if not top_level:
                    self.error("Block was not closed")
                return decls
            elif isinstance(next, RCurlyBracket) and not top_level:
                return decls
            elif isinstance(next, AtKeyword):
                decls.append(self.consume_at_rule(next))
            elif isinstance(next, Ident):
                self.reconsume()
                if (decl := self.consume_declaration()) is not None:
                    decls.append(decl)
            else:
                self.error("Invalid declaration list")
                self.consume_prelude()
