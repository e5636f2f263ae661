"""
config.py - YAML configuration: editor style files and post front matter
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from blogcraft.core.models import StyleSpec
from .io_helpers import read_utf8
from .logging_helper import get_logger

log = get_logger()

# YAML key -> StyleSpec field
STYLE_KEYS = {
    "font_size": "font_size_px",
    "font_family": "font_family",
    "text_color": "text_color",
    "background_color": "background_color",
    "alignment": "alignment",
}

_FRONT_MATTER = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


def _font_size(value: Any) -> int:
    """Accept 18 or "18"; anything else is a config error."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"font_size must be a number, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"font_size must be a number, got {value!r}") from None


def style_from_mapping(data: Optional[Dict[str, Any]], base: Optional[StyleSpec] = None) -> StyleSpec:
    """Build a StyleSpec from a config mapping; missing keys keep *base* values."""
    base = base or StyleSpec()
    if not data:
        return base
    if not isinstance(data, dict):
        raise ValueError(f"Style config must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(STYLE_KEYS)
    if unknown:
        log.warning(f"Ignoring unknown style keys: {', '.join(sorted(unknown))}")

    values = {
        field: data[key] for key, field in STYLE_KEYS.items() if key in data
    }
    if "font_size_px" in values:
        values["font_size_px"] = _font_size(values["font_size_px"])
    current = {field: getattr(base, field) for field in STYLE_KEYS.values()}
    current.update(values)
    return StyleSpec(**current)


def load_style(path: Path) -> StyleSpec:
    """Load a StyleSpec from a YAML file."""
    data = yaml.safe_load(read_utf8(Path(path)))
    style = style_from_mapping(data)
    log.info(f"Loaded style from {Path(path).name}: {style.font_family} {style.font_size_px}px")
    return style


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Extract a ``---`` delimited YAML block if present. Returns (meta, body)."""
    m = _FRONT_MATTER.match(text)
    if not m:
        return {}, text
    meta = yaml.safe_load(m.group(1)) or {}
    if not isinstance(meta, dict):
        raise ValueError("Front matter must be a YAML mapping")
    return meta, text[m.end():]
