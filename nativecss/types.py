from __future__ import annotations
from collections.abc import Callable
from pathlib import Path
from typing import TypedDict
from typing_extensions import TypeAliasType

from nativecss.errors import DeclarationConversionError

__all__ = ["StyleValue", "Style", "StyleRecord", "MediaRecord", "ExtractResult", "ExtractOptions"]

StyleValue = TypeAliasType("StyleValue", int | float | str)
Style = TypeAliasType("Style", dict[str, StyleValue])

StyleRecord = dict[str, Style]
"""Canonical selector, or `selector.index` for media variants, to its native style."""

MediaRecord = dict[str, list[str]]
"""Canonical selector to the media condition of each of its indexed variants."""

class ExtractResult(TypedDict):
    styles: StyleRecord
    media: MediaRecord
    errors: list[DeclarationConversionError]

class ExtractOptions(TypedDict, total=False):
    important: bool | str | None
    output: str | Path | None
    done: Callable[[ExtractResult], None] | None
