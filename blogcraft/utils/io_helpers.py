#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

All project code should import these instead of calling Path.read_text().
"""

from pathlib import Path

from ftfy import fix_text

from .text_processing import normalize_text

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8(path: Path, repair: bool = False) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    With *repair* the text is passed through ftfy to undo mojibake that
    creeps in when posts are pasted from other editors.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    raw = path.read_bytes()
    if raw.startswith(BOM):
        raw = raw[len(BOM):]
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        # Last resort: keep going with replacement characters
        text = raw.decode("utf-8", errors="replace")
    text = normalize_text(text)
    return fix_text(text, uncurl_quotes=False) if repair else text

def write_utf8(path: Path, text: str) -> None:
    """Write text to file using UTF-8 encoding, creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(normalize_text(text), encoding="utf-8")
