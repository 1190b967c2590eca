from __future__ import annotations
import re

__all__ = ["normalise_selector"]

WHITESPACE = re.compile(r"\s+")
ESCAPE = re.compile(r"\\(.)")

def normalise_selector(selector: str, important: bool | str | None = None) -> str:
    """Turn a raw selector into the key it is stored under.

    Whitespace is collapsed and css escapes are removed, so `.hover\\:p-4` becomes
    `.hover:p-4`. When `important` is a selector string, such as `#app`, the scope it adds
    in front of every generated selector is removed.
    """
    selector = WHITESPACE.sub(" ", selector).strip()

    if isinstance(important, str) and important != "":
        scope = f"{important} "
        if selector.startswith(scope):
            selector = selector[len(scope):].lstrip()

    return ESCAPE.sub(r"\1", selector)
