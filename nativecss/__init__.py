"""Turn stylesheets into flat style records for native (non browser) renderers.

    >>> result = extract_css(".p-4 { padding: 1rem } @media (min-width: 640px) { .p-4 { padding: 0 } }")
    >>> result["styles"][".p-4"]["paddingTop"], result["styles"][".p-4.0"]["paddingTop"]
    (16, 0)
    >>> result["media"]
    {'.p-4': ['(min-width: 640px)']}
"""
from __future__ import annotations

__version__ = "0.1.0"

from nativecss.convert import to_native
from nativecss.css import AtRule, Declaration, Root, Rule, parse_stylesheet
from nativecss.errors import DeclarationConversionError, NativeCSSError, ParseError
from nativecss.extract import Accumulator, compose_condition, extract, extract_css, walk
from nativecss.output import render_module, write_module
from nativecss.selector import normalise_selector
from nativecss.types import ExtractOptions, ExtractResult, MediaRecord, Style, StyleRecord

__all__ = [
    "__version__",
    "to_native",
    "AtRule",
    "Declaration",
    "Root",
    "Rule",
    "parse_stylesheet",
    "DeclarationConversionError",
    "NativeCSSError",
    "ParseError",
    "Accumulator",
    "compose_condition",
    "extract",
    "extract_css",
    "walk",
    "render_module",
    "write_module",
    "normalise_selector",
    "ExtractOptions",
    "ExtractResult",
    "MediaRecord",
    "Style",
    "StyleRecord",
]
