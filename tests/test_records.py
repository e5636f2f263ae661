from datetime import datetime, timezone

from blogcraft.core.models import Document, StyleSpec
from blogcraft.core.records import draft_record, parse_tags, publish_record

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_tags_keep_empty_segments():
    assert parse_tags("a, b ,,c") == ["a", "b", "", "c"]


def test_empty_tags_input():
    assert parse_tags("") == [""]


def test_draft_record_fields():
    doc = Document(
        title="Hello", subtitle="Sub", body="a b c", meta_title="MT",
        meta_description="MD", tags_input="x, y", slug="hello",
        styling=StyleSpec(font_size_px=18, font_family="Georgia"),
    )
    record = draft_record(doc, NOW)
    assert record == {
        "title": "Hello",
        "subtitle": "Sub",
        "body": "a b c",
        "metaTitle": "MT",
        "metaDescription": "MD",
        "tags": ["x", "y"],
        "slug": "hello",
        "thumbnail": None,
        "styling": {
            "fontSize": 18,
            "fontFamily": "Georgia",
            "textColor": "#1f2937",
            "bgColor": "#ffffff",
            "alignment": "left",
        },
        "wordCount": 3,
        "readingTime": 1,
        "timestamp": "2024-01-02T03:04:05+00:00",
    }


def test_publish_record_adds_published_at():
    record = publish_record(Document(title="T", body=""), NOW)
    assert record["publishedAt"] == "2024-01-02T03:04:05+00:00"
    assert record["wordCount"] == 0
    assert record["readingTime"] == 0


def test_timestamp_defaults_to_now():
    record = draft_record(Document())
    parsed = datetime.fromisoformat(record["timestamp"])
    assert parsed.tzinfo is not None
