from __future__ import annotations
import json
from pathlib import Path

from nativecss.log import LOGGER, LogLevel
from nativecss.types import MediaRecord, StyleRecord

__all__ = ["PLATFORM", "render_module", "write_module"]

PLATFORM = "native"

def _json_(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

def render_module(styles: StyleRecord, media: MediaRecord) -> str:
    """Render the styles and media records as a loadable commonjs module."""
    return f"""module.exports = {{
  platform: '{PLATFORM}',
  styles: {_json_(styles)},
  media: {_json_(media)}
}}"""

def write_module(path: str | Path, styles: StyleRecord, media: MediaRecord):
    """Write the rendered module to `path`, replacing the file if it exists.

    Raises:
        OSError: When the file can not be written.
    """
    path = Path(path)
    path.write_text(render_module(styles, media), encoding="utf-8")
    LOGGER.log(f"wrote {len(styles)} styles to {path}", level=LogLevel.Info)
