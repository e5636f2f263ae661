"""
Core module - Text editing and rendering engine for blogcraft

This module provides:
- derive_slug: URL slug from a post title
- compute_metrics: word / character counts and reading time
- markup: selection-based markup operations
- render_preview: ordered-pass preview renderer
- EditingSession: document state with derived values
"""

from blogcraft.core.metrics import DocumentMetrics, compute_metrics
from blogcraft.core.models import Document, MediaAsset, Selection, StyleSpec
from blogcraft.core.preview import render_preview
from blogcraft.core.records import draft_record, parse_tags, publish_record
from blogcraft.core.session import EditingSession
from blogcraft.core.slug import derive_slug

__all__ = [
    'Document', 'DocumentMetrics', 'EditingSession', 'MediaAsset', 'Selection',
    'StyleSpec', 'compute_metrics', 'derive_slug', 'draft_record',
    'parse_tags', 'publish_record', 'render_preview',
]
