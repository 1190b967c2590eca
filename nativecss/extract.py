"""Walk a css rule tree and collect native styles.

Two records come out of a walk:

    styles => selector to style, `{".p-4": {"paddingTop": 16, ...}}`
    media  => selector to the conditions of its media variants, `{".sm:p-4": ["(min-width: 640px)"]}`

A rule inside of `@media` doesn't merge into `styles[selector]`. Every occurrence is stored
under `selector.index` and the index points into `media[selector]`:

    styles = {".sm:p-4.0": {...}, ".sm:p-4.1": {...}}
    media  = {".sm:p-4": ["(min-width: 640px)", "(min-width: 640px) and (orientation: portrait)"]}
"""
from __future__ import annotations
from collections.abc import Callable
from pathlib import Path
from typing_extensions import Unpack

from nativecss.convert import OnError, to_native
from nativecss.css.parser import KEYFRAMES_AT_RULES, AtRule, Container, Declaration, Rule, parse_stylesheet
from nativecss.errors import DeclarationConversionError
from nativecss.log import LOGGER, LogLevel
from nativecss.output import write_module
from nativecss.selector import normalise_selector
from nativecss.types import ExtractOptions, ExtractResult, MediaRecord, Style, StyleRecord

__all__ = ["Converter", "Accumulator", "compose_condition", "walk", "extract", "extract_css"]

Converter = Callable[[Declaration, OnError | None], Style]

def compose_condition(parent: str | None, params: str) -> str:
    """Full media condition of an `@media` group given the condition of the nearest `@media`
    around it. Identical nested conditions collapse into one and an empty group adds nothing.
    """
    if not parent:
        return params
    elif not params or parent == params:
        return parent
    return f"{parent} and {params}"

class Accumulator:
    """The records of a single walk."""

    def __init__(self, important: bool | str | None = None, converter: Converter = to_native):
        self.important = important
        self.converter = converter
        self.styles: StyleRecord = {}
        self.media: MediaRecord = {}
        self.errors: list[DeclarationConversionError] = []
        self.rules = 0

    def declarations(self, rule: Rule) -> Style:
        """Merge the converted declarations of a rule, later declarations win."""
        style: Style = {}
        for decl in rule.declarations:
            style.update(self.converter(decl, self.errors.append))
        return style

    def add_rule(self, rule: Rule, condition: str | None = None):
        """Add a rule's style under each of its selectors.

        Args:
            rule (Rule): The style rule.
            condition (str | None): Composed condition of the nearest `@media` around the rule.
        """
        style = self.declarations(rule)
        if len(style) == 0:
            return

        self.rules += 1
        for raw in rule.selectors:
            selector = normalise_selector(raw, self.important)

            if condition:
                conditions = self.media.setdefault(selector, [])
                self.styles[f"{selector}.{len(conditions)}"] = dict(style)
                conditions.append(condition)
            else:
                self.styles[selector] = {**self.styles.get(selector, {}), **style}

    def visit(self, container: Container, condition: str | None = None):
        for node in container.children:
            if isinstance(node, AtRule):
                # Keyframe selectors are animation steps, not element selectors
                if node.name.lower() in KEYFRAMES_AT_RULES:
                    continue
                elif node.name.lower() == "media":
                    self.visit(node, compose_condition(condition, node.params))
                else:
                    self.visit(node, condition)
            elif isinstance(node, Rule):
                self.add_rule(node, condition)

    def result(self) -> ExtractResult:
        return {"styles": self.styles, "media": self.media, "errors": self.errors}

def walk(
    root: Container,
    important: bool | str | None = None,
    converter: Converter = to_native,
) -> ExtractResult:
    """Collect the styles, media variants and conversion errors of a rule tree.

    The tree is not modified and nothing is shared between walks.
    """
    accumulator = Accumulator(important, converter)
    accumulator.visit(root)

    LOGGER.log(
        f"{accumulator.rules} rules, {len(accumulator.styles)} styles,",
        f"{len(accumulator.media)} media selectors, {len(accumulator.errors)} errors",
        level=LogLevel.Info,
    )
    return accumulator.result()

def extract(
    root: Container,
    *,
    important: bool | str | None = None,
    output: str | Path | None = None,
    done: Callable[[ExtractResult], None] | None = None,
    converter: Converter = to_native,
) -> ExtractResult:
    """Walk the tree, then hand the result to `done` and write it to `output`.

    `done` is called once, after the walk has finished. Errors writing `output` are raised.
    """
    result = walk(root, important, converter)

    if done is not None:
        done(result)
    if output is not None:
        write_module(output, result["styles"], result["media"])
    return result

def extract_css(source: str, **options: Unpack[ExtractOptions]) -> ExtractResult:
    """Parse a stylesheet and extract it. Syntax errors are skipped by the parser."""
    return extract(parse_stylesheet(source), **options)
