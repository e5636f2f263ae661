"""
file_loaders.py - Load posts from disk into Document values

This module handles:
- Reading a post file (front matter + body)
- Mapping front matter fields onto the Document
- Applying an optional style file on top of the post's own style block
"""

import pathlib
from typing import Optional

from blogcraft.core.models import Document, StyleSpec
from blogcraft.core.slug import derive_slug
from blogcraft.utils.config import split_front_matter, style_from_mapping
from blogcraft.utils.io_helpers import read_utf8
from blogcraft.utils.logging_helper import get_logger

log = get_logger()


def _tags_input(value) -> str:
    """Front matter tags may be a list or the raw comma-separated string."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def _text(meta: dict, key: str) -> str:
    """Empty YAML keys (``subtitle:``) load as None; treat them as blank."""
    value = meta.get(key)
    return "" if value is None else str(value)


def document_from_text(text: str, style: Optional[StyleSpec] = None) -> Document:
    """Build a Document from post text.

    The slug is derived from the title unless the front matter sets one.
    An explicit *style* overrides the post's own ``style`` block.
    """
    meta, body = split_front_matter(text)
    title = _text(meta, "title")
    styling = style or style_from_mapping(meta.get("style"))
    return Document(
        title=title,
        subtitle=_text(meta, "subtitle"),
        body=body,
        meta_title=_text(meta, "meta_title"),
        meta_description=_text(meta, "meta_description"),
        tags_input=_tags_input(meta.get("tags")),
        slug=_text(meta, "slug") or derive_slug(title),
        thumbnail=_text(meta, "thumbnail") or None,
        styling=styling,
    )


def load_post(path: pathlib.Path, style: Optional[StyleSpec] = None,
              repair: bool = False) -> Document:
    """Read a post file into a Document."""
    path = pathlib.Path(path)
    document = document_from_text(read_utf8(path, repair=repair), style)
    if not document.title:
        log.warning(f"No title in front matter of {path.name}")
    return document
