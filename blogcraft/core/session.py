"""
session.py - Editing session holding the current document

This module handles:
- Field edits, each producing a new Document value
- Re-deriving the slug whenever the title changes
- Toolbar formatting and emoji insertion at the current selection
- Image, thumbnail and video intake
- Derived metrics, preview and save / publish records

Derived values are recomputed from the current document on every access;
the session keeps no cached copies that could go stale.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from blogcraft.core import markup
from blogcraft.core.media import MediaUpload, image_asset, image_data_uri
from blogcraft.core.metrics import DocumentMetrics, compute_metrics
from blogcraft.core.models import Document, MediaAsset, Selection
from blogcraft.core.preview import render_preview
from blogcraft.core.records import draft_record, parse_tags, publish_record
from blogcraft.core.slug import derive_slug
from blogcraft.utils.logging_helper import get_logger

log = get_logger()


class EditingSession:
    """Single-owner editing state for one blog post."""

    def __init__(self, document: Optional[Document] = None):
        self._document = document or Document()
        self._media: List[MediaAsset] = []
        self._selection = Selection.caret(len(self._document.body))

    # ── state ────────────────────────────────────────────────────────────
    @property
    def document(self) -> Document:
        return self._document

    @property
    def media(self) -> Tuple[MediaAsset, ...]:
        return tuple(self._media)

    @property
    def selection(self) -> Selection:
        return self._selection.clamp(len(self._document.body))

    def _update(self, **changes: Any) -> Document:
        self._document = replace(self._document, **changes)
        return self._document

    # ── field edits ──────────────────────────────────────────────────────
    def set_title(self, title: str) -> Document:
        """Change the title; the slug is re-derived and overwrites manual edits."""
        return self._update(title=title, slug=derive_slug(title))

    def set_slug(self, slug: str) -> Document:
        return self._update(slug=slug)

    def set_subtitle(self, subtitle: str) -> Document:
        return self._update(subtitle=subtitle)

    def set_body(self, body: str) -> Document:
        return self._update(body=body)

    def set_meta_title(self, meta_title: str) -> Document:
        return self._update(meta_title=meta_title)

    def set_meta_description(self, meta_description: str) -> Document:
        return self._update(meta_description=meta_description)

    def set_tags(self, tags_input: str) -> Document:
        return self._update(tags_input=tags_input)

    def set_style(self, **changes: Any) -> Document:
        """Update styling fields, e.g. ``set_style(font_size_px=18)``."""
        return self._update(styling=replace(self._document.styling, **changes))

    # ── selection-based editing ──────────────────────────────────────────
    def select(self, start: int, end: Optional[int] = None) -> Selection:
        self._selection = Selection(start, start if end is None else end)
        return self.selection

    def apply_format(self, fmt: str) -> Document:
        body = markup.apply_format(self._document.body, self.selection, fmt)
        return self._update(body=body)

    def insert_emoji(self, emoji: str) -> Document:
        body = markup.insert_at_cursor(self._document.body, self.selection.start, emoji)
        return self._update(body=body)

    # ── media ────────────────────────────────────────────────────────────
    def attach_image(self, upload: MediaUpload, caret: Optional[int] = None) -> Optional[MediaAsset]:
        """Add an image to the media list and reference it from the body.

        The reference goes at *caret*, or at the end of the body as it is
        now. Non-image uploads are ignored and ``None`` is returned.
        """
        asset = image_asset(upload)
        if asset is None:
            return None
        body = self._document.body
        offset = len(body) if caret is None else caret
        self._media.append(asset)
        self._update(body=markup.insert_image_reference(body, offset, asset.name, asset.uri))
        log.info(f"Attached image {asset.name} ({len(upload.data)} bytes)")
        return asset

    def set_thumbnail(self, upload: MediaUpload) -> bool:
        uri = image_data_uri(upload)
        if uri is None:
            return False
        self._update(thumbnail=uri)
        return True

    def embed_video(self, url: Optional[str], caret: Optional[int] = None) -> Document:
        """Reference a video URL; an empty or cancelled prompt changes nothing."""
        if not url:
            return self._document
        body = self._document.body
        offset = len(body) if caret is None else caret
        return self._update(body=markup.insert_video_reference(body, offset, url))

    # ── derived values ───────────────────────────────────────────────────
    @property
    def metrics(self) -> DocumentMetrics:
        return compute_metrics(self._document.body)

    @property
    def tags(self) -> List[str]:
        return parse_tags(self._document.tags_input)

    def preview(self, escape: bool = False) -> str:
        return render_preview(self._document.body, escape=escape)

    def save_draft(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        record = draft_record(self._document, now)
        log.info(f"Draft saved: '{record['title']}' ({record['wordCount']} words)")
        return record

    def publish(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        record = publish_record(self._document, now)
        log.info(f"Article published: '{record['title']}' as /{record['slug']}")
        return record
