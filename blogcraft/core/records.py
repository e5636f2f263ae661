"""
records.py - Plain records handed to the save / publish collaborators

This module handles:
- Splitting the comma-separated tags input
- Building the draft record (document fields, styling, metrics, timestamp)
- Building the publish record (draft record plus publishedAt)

Only the record construction lives here; sending or storing it is up to the
caller.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from blogcraft.core.metrics import compute_metrics
from blogcraft.core.models import Document


def parse_tags(tags_input: str) -> List[str]:
    """Split on commas and trim each entry; empty entries are kept."""
    return [tag.strip() for tag in tags_input.split(",")]


def _iso_now(now: Optional[datetime]) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def draft_record(document: Document, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Record produced on "save draft"."""
    metrics = compute_metrics(document.body)
    return {
        "title": document.title,
        "subtitle": document.subtitle,
        "body": document.body,
        "metaTitle": document.meta_title,
        "metaDescription": document.meta_description,
        "tags": parse_tags(document.tags_input),
        "slug": document.slug,
        "thumbnail": document.thumbnail,
        "styling": document.styling.to_record(),
        "wordCount": metrics.word_count,
        "readingTime": metrics.reading_time_minutes,
        "timestamp": _iso_now(now),
    }


def publish_record(document: Document, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Record produced on "publish"; same fields as a draft plus ``publishedAt``."""
    record = draft_record(document, now)
    record["publishedAt"] = record["timestamp"]
    return record
