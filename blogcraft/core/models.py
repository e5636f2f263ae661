"""
models.py - Shared data types for blogcraft

Documents, styles and selections are frozen values: an edit produces a new
instance (``dataclasses.replace``) instead of mutating the old one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

FONT_FAMILIES = ("Inter", "Georgia", "Courier New", "Arial")
ALIGNMENTS = ("left", "center", "right")
MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 24

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class Selection:
    """Character range ``[start, end)`` within the body buffer."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid selection: start={self.start}, end={self.end}")

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    def clamp(self, length: int) -> "Selection":
        """Pull both offsets back inside a buffer of *length* characters."""
        return Selection(min(self.start, length), min(self.end, length))


@dataclass(frozen=True)
class StyleSpec:
    """Typography and colours applied to the editor and the preview."""

    font_size_px: int = 16
    font_family: str = "Inter"
    text_color: str = "#1f2937"
    background_color: str = "#ffffff"
    alignment: str = "left"

    def __post_init__(self) -> None:
        # YAML loads empty values, and an unquoted #rrggbb (a comment), as None
        if isinstance(self.font_size_px, bool) or not isinstance(self.font_size_px, int):
            raise ValueError(f"Font size must be a whole number of px, got {self.font_size_px!r}")
        for name in ("font_family", "text_color", "background_color", "alignment"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if not MIN_FONT_SIZE <= self.font_size_px <= MAX_FONT_SIZE:
            raise ValueError(
                f"Font size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}px, "
                f"got {self.font_size_px}"
            )
        if self.font_family not in FONT_FAMILIES:
            raise ValueError(
                f"Unsupported font family: '{self.font_family}'. "
                f"Supported: {', '.join(FONT_FAMILIES)}"
            )
        for name in ("text_color", "background_color"):
            value = getattr(self, name)
            if not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a #rrggbb colour, got '{value}'")
        if self.alignment not in ALIGNMENTS:
            raise ValueError(
                f"Unsupported alignment: '{self.alignment}'. "
                f"Supported: {', '.join(ALIGNMENTS)}"
            )

    def to_record(self) -> Dict[str, object]:
        return {
            "fontSize": self.font_size_px,
            "fontFamily": self.font_family,
            "textColor": self.text_color,
            "bgColor": self.background_color,
            "alignment": self.alignment,
        }

    def to_css(self) -> Dict[str, str]:
        return {
            "font-size": f"{self.font_size_px}px",
            "font-family": f"'{self.font_family}'",
            "color": self.text_color,
            "background-color": self.background_color,
            "text-align": self.alignment,
        }


@dataclass(frozen=True)
class MediaAsset:
    kind: str   # only "image" for now
    uri: str    # data URI
    name: str


@dataclass(frozen=True)
class Document:
    """A blog post as edited in one session."""

    title: str = ""
    subtitle: str = ""
    body: str = ""
    meta_title: str = ""
    meta_description: str = ""
    tags_input: str = ""            # raw comma-separated input
    slug: str = ""
    thumbnail: Optional[str] = None
    styling: StyleSpec = field(default_factory=StyleSpec)
