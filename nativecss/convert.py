"""Convert single css declarations into native style properties.

Native styles are a flat mapping of camel cased property names to numbers or strings:

    padding: 1rem 2px;   => {"paddingTop": 16, "paddingRight": 2, "paddingBottom": 16, "paddingLeft": 2}
    color: #fff;         => {"color": "#fff"}
    display: grid;       => error, native views only know `flex` and `none`
"""
from __future__ import annotations
import math
import re
from collections.abc import Callable
from functools import partial

from nativecss.colors import NAMED_COLORS
from nativecss.css.parser import Declaration
from nativecss.errors import DeclarationConversionError
from nativecss.types import Style, StyleValue

__all__ = ["to_native", "camel_case", "Value", "PROPERTIES", "SHORTHANDS", "REM"]

REM = 16
"""Pixels per `rem` and `em`. Native targets have no root font size."""

NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
LENGTH = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))(px|rem|em|%)$")
HEX = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
COLOR_FUNCTION = re.compile(r"^(?:rgba?|hsla?|hwb)\(.*\)$", re.IGNORECASE)
DASH = re.compile(r"-([a-z])")

CSS_WIDE_KEYWORDS = {"inherit", "initial", "unset", "revert", "revert-layer"}

OnError = Callable[[DeclarationConversionError], None]

def camel_case(name: str) -> str:
    return DASH.sub(lambda match: match.group(1).upper(), name)

def _number_(raw: str) -> int | float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError("number is out of range")
    return int(value) if value.is_integer() else value

def _split_(value: str) -> list[str]:
    """Split a value on whitespace that is not inside of parentheses."""
    parts = []
    current = ""
    depth = 0
    for char in value:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)

        if char.isspace() and depth == 0:
            if current != "":
                parts.append(current)
            current = ""
        else:
            current += char
    if current != "":
        parts.append(current)
    return parts

class Value:
    """Parsers for a single value. Each raises `ValueError` when the value doesn't fit."""

    @staticmethod
    def number(value: str) -> int | float:
        if NUMBER.match(value) is None:
            raise ValueError("expected a number")
        return _number_(value)

    @staticmethod
    def length(value: str, *, auto: bool = False) -> StyleValue:
        if auto and value.lower() == "auto":
            return "auto"
        if NUMBER.match(value) is not None and _number_(value) == 0:
            return 0
        if (match := LENGTH.match(value.lower())) is None:
            raise ValueError("expected a length")

        number, unit = match.groups()
        if unit == "%":
            return f"{_number_(number)}%"
        elif unit in ("rem", "em"):
            return _number_(str(float(number) * REM))
        return _number_(number)

    @staticmethod
    def color(value: str) -> str:
        if HEX.match(value) is not None or COLOR_FUNCTION.match(value) is not None:
            return value
        if value.lower() in NAMED_COLORS:
            return value.lower()
        raise ValueError("expected a color")

    @staticmethod
    def keyword(value: str, *, options: frozenset[str]) -> str:
        if (keyword := value.lower()) not in options:
            raise ValueError(f"expected one of {', '.join(sorted(options))}")
        return keyword

    @staticmethod
    def font_weight(value: str) -> str:
        value = value.lower()
        if value in ("normal", "bold"):
            return value
        if value.isdigit() and int(value) % 100 == 0 and 100 <= int(value) <= 900:
            return value
        raise ValueError("expected normal, bold or 100-900")

    @staticmethod
    def font_family(value: str) -> str:
        family = value.split(",")[0].strip().strip("\"'").strip()
        if family == "":
            raise ValueError("expected a font family")
        return family

    @staticmethod
    def aspect_ratio(value: str) -> int | float:
        parts = [part.strip() for part in value.split("/")]
        if len(parts) == 2:
            width, height = Value.number(parts[0]), Value.number(parts[1])
            if height == 0:
                raise ValueError("aspect ratio height can not be 0")
            return _number_(str(width / height))
        return Value.number(value)

LENGTHS = [
    "width", "height", "min-width", "min-height", "max-width", "max-height",
    "padding-top", "padding-right", "padding-bottom", "padding-left",
    "padding-horizontal", "padding-vertical",
    "border-top-width", "border-right-width", "border-bottom-width", "border-left-width",
    "border-top-left-radius", "border-top-right-radius",
    "border-bottom-right-radius", "border-bottom-left-radius",
    "font-size", "line-height", "letter-spacing", "row-gap", "column-gap",
]
AUTO_LENGTHS = [
    "top", "right", "bottom", "left",
    "margin-top", "margin-right", "margin-bottom", "margin-left",
    "margin-horizontal", "margin-vertical", "flex-basis",
]
NUMBERS = ["opacity", "flex-grow", "flex-shrink", "z-index", "elevation"]
COLORS = [
    "color", "background-color", "border-top-color", "border-right-color",
    "border-bottom-color", "border-left-color", "text-decoration-color",
    "text-shadow-color", "shadow-color", "tint-color",
]
KEYWORDS: dict[str, frozenset[str]] = {
    "display": frozenset({"flex", "none"}),
    "position": frozenset({"absolute", "relative"}),
    "flex-direction": frozenset({"row", "row-reverse", "column", "column-reverse"}),
    "flex-wrap": frozenset({"wrap", "nowrap", "wrap-reverse"}),
    "align-items": frozenset({"flex-start", "flex-end", "center", "stretch", "baseline"}),
    "align-self": frozenset({"auto", "flex-start", "flex-end", "center", "stretch", "baseline"}),
    "align-content": frozenset({"flex-start", "flex-end", "center", "stretch", "space-between", "space-around"}),
    "justify-content": frozenset({"flex-start", "flex-end", "center", "space-between", "space-around", "space-evenly"}),
    "overflow": frozenset({"visible", "hidden", "scroll"}),
    "text-align": frozenset({"auto", "left", "right", "center", "justify"}),
    "text-transform": frozenset({"none", "uppercase", "lowercase", "capitalize"}),
    "text-decoration-line": frozenset({"none", "underline", "line-through", "underline line-through"}),
    "text-decoration-style": frozenset({"solid", "double", "dotted", "dashed"}),
    "font-style": frozenset({"normal", "italic"}),
    "border-style": frozenset({"solid", "dotted", "dashed"}),
    "backface-visibility": frozenset({"visible", "hidden"}),
    "direction": frozenset({"ltr", "rtl"}),
    "pointer-events": frozenset({"auto", "none", "box-none", "box-only"}),
}

PROPERTIES: dict[str, Callable[[str], StyleValue]] = {
    **{name: Value.length for name in LENGTHS},
    **{name: partial(Value.length, auto=True) for name in AUTO_LENGTHS},
    **{name: Value.number for name in NUMBERS},
    **{name: Value.color for name in COLORS},
    **{name: partial(Value.keyword, options=options) for name, options in KEYWORDS.items()},
    "font-weight": Value.font_weight,
    "font-family": Value.font_family,
    "aspect-ratio": Value.aspect_ratio,
}

def _sides_(values: list[str]) -> tuple[str, str, str, str]:
    """Expand 1 to 4 box values into top, right, bottom, left."""
    if len(values) == 1:
        return values[0], values[0], values[0], values[0]
    elif len(values) == 2:
        return values[0], values[1], values[0], values[1]
    elif len(values) == 3:
        return values[0], values[1], values[2], values[1]
    elif len(values) == 4:
        return values[0], values[1], values[2], values[3]
    raise ValueError("expected 1 to 4 values")

def _box_(keys: tuple[str, str, str, str], parse: Callable[[str], StyleValue], value: str) -> Style:
    return {key: parse(part) for key, part in zip(keys, _sides_(_split_(value)))}

def _border_radius_(value: str) -> Style:
    parts = _split_(value)
    if len(parts) == 1:
        return {"borderRadius": Value.length(parts[0])}
    return _box_(
        ("borderTopLeftRadius", "borderTopRightRadius", "borderBottomRightRadius", "borderBottomLeftRadius"),
        Value.length,
        value,
    )

def _gap_(value: str) -> Style:
    parts = _split_(value)
    if len(parts) == 1:
        return {"rowGap": Value.length(parts[0]), "columnGap": Value.length(parts[0])}
    elif len(parts) == 2:
        return {"rowGap": Value.length(parts[0]), "columnGap": Value.length(parts[1])}
    raise ValueError("expected 1 or 2 values")

def _flex_(value: str) -> Style:
    parts = _split_(value.lower())
    if parts == ["none"]:
        return {"flexGrow": 0, "flexShrink": 0}
    elif parts == ["auto"]:
        return {"flexGrow": 1, "flexShrink": 1, "flexBasis": "auto"}
    elif len(parts) == 1:
        return {"flexGrow": Value.number(parts[0]), "flexShrink": 1, "flexBasis": "0%"}
    elif len(parts) == 2:
        if NUMBER.match(parts[1]) is not None:
            return {"flexGrow": Value.number(parts[0]), "flexShrink": Value.number(parts[1])}
        return {"flexGrow": Value.number(parts[0]), "flexBasis": Value.length(parts[1], auto=True)}
    elif len(parts) == 3:
        return {
            "flexGrow": Value.number(parts[0]),
            "flexShrink": Value.number(parts[1]),
            "flexBasis": Value.length(parts[2], auto=True),
        }
    raise ValueError("expected 1 to 3 values")

def _background_(value: str) -> Style:
    if len(_split_(value)) != 1:
        raise ValueError("only a single color is supported")
    return {"backgroundColor": Value.color(value)}

def _text_decoration_(value: str) -> Style:
    return {"textDecorationLine": Value.keyword(value, options=KEYWORDS["text-decoration-line"])}

SHORTHANDS: dict[str, Callable[[str], Style]] = {
    "margin": partial(_box_, ("marginTop", "marginRight", "marginBottom", "marginLeft"), partial(Value.length, auto=True)),
    "padding": partial(_box_, ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft"), Value.length),
    "inset": partial(_box_, ("top", "right", "bottom", "left"), partial(Value.length, auto=True)),
    "border-width": partial(_box_, ("borderTopWidth", "borderRightWidth", "borderBottomWidth", "borderLeftWidth"), Value.length),
    "border-color": partial(_box_, ("borderTopColor", "borderRightColor", "borderBottomColor", "borderLeftColor"), Value.color),
    "border-radius": _border_radius_,
    "gap": _gap_,
    "flex": _flex_,
    "background": _background_,
    "text-decoration": _text_decoration_,
}

def to_native(decl: Declaration, on_error: OnError | None = None) -> Style:
    """Convert one declaration into zero or more native style properties.

    Custom properties (`--name`) produce nothing. Unsupported properties and values that
    can't be represented natively are reported once through `on_error` and produce nothing.
    This function never raises for bad input.
    """
    prop = decl.prop.strip()
    if prop.startswith("--"):
        return {}

    prop = prop.lower()
    value = decl.value.strip()

    if prop not in SHORTHANDS and prop not in PROPERTIES:
        error = DeclarationConversionError(decl.prop, decl.value, "unsupported property")
    else:
        try:
            if "var(" in value.lower():
                raise ValueError("unresolved var()")
            if value.lower() in CSS_WIDE_KEYWORDS:
                raise ValueError(f"{value.lower()} is not supported")

            if prop in SHORTHANDS:
                return SHORTHANDS[prop](value)
            return {camel_case(prop): PROPERTIES[prop](value)}
        except ValueError as err:
            error = DeclarationConversionError(decl.prop, decl.value, f"invalid value, {err}")

    if on_error is not None:
        on_error(error)
    return {}
