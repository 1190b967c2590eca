"""
References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [custom properites](https://developer.mozilla.org/en-US/docs/Web/CSS/Using_CSS_custom_properties)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)

stylesheet => Lexer => tokens => Parser => Root
"""
from nativecss.css.lexer import Lexer, ParseError
from nativecss.css.parser import AtRule, Container, Declaration, Node, Parse, Parser, Root, Rule, parse_stylesheet

__all__ = [
    "Lexer",
    "ParseError",
    "AtRule",
    "Container",
    "Declaration",
    "Node",
    "Parse",
    "Parser",
    "Root",
    "Rule",
    "parse_stylesheet",
]
