"""
markup.py - Selection-based markup editing over the plain-text body

This module handles:
- Wrapping a selection in bold / italic markers
- Prefixing a selection with heading, list or quote markers
- Turning a selection into a link with a placeholder destination
- Splicing emoji, image and video references at the caret

Every operation is a single splice ``body[:start] + insertion + body[end:]``
and returns a new string. Nothing here validates URIs.
"""

from typing import Dict

from blogcraft.core.models import Selection

WRAP_MARKERS: Dict[str, str] = {
    "bold": "**",
    "italic": "*",
}

PREFIXES: Dict[str, str] = {
    "h1": "# ",
    "h2": "## ",
    "list": "\n- ",
    "quote": "\n> ",
}

LINK_PLACEHOLDER = "url"

FORMATS = tuple(WRAP_MARKERS) + tuple(PREFIXES) + ("link",)

EMOJI_PALETTE = (
    "😊", "😂", "❤️", "👍", "🎉", "🔥", "✨", "💡",
    "📝", "🚀", "💻", "🎨", "📸", "🌟", "⭐",
)


def splice(body: str, selection: Selection, insertion: str) -> str:
    """Replace the selected span of *body* with *insertion*."""
    sel = selection.clamp(len(body))
    return body[:sel.start] + insertion + body[sel.end:]


def selected_text(body: str, selection: Selection) -> str:
    sel = selection.clamp(len(body))
    return body[sel.start:sel.end]


def wrap_selection(body: str, selection: Selection, marker: str) -> str:
    """Wrap the selection in ``**`` (bold) or ``*`` (italic)."""
    if marker not in WRAP_MARKERS:
        raise ValueError(f"Unknown wrap marker: '{marker}'")
    token = WRAP_MARKERS[marker]
    return splice(body, selection, token + selected_text(body, selection) + token)


def prefix_selection(body: str, selection: Selection, kind: str) -> str:
    """Put a heading / list / quote prefix directly before the selection."""
    if kind not in PREFIXES:
        raise ValueError(f"Unknown prefix kind: '{kind}'")
    return splice(body, selection, PREFIXES[kind] + selected_text(body, selection))


def wrap_as_link(body: str, selection: Selection) -> str:
    """Turn the selection into ``[text](url)``; the caller edits ``url`` later."""
    text = selected_text(body, selection)
    return splice(body, selection, f"[{text}]({LINK_PLACEHOLDER})")


def insert_at_cursor(body: str, caret: int, literal: str) -> str:
    return splice(body, Selection.caret(caret), literal)


def insert_image_reference(body: str, caret: int, alt_text: str, uri: str) -> str:
    return insert_at_cursor(body, caret, f"\n![{alt_text}]({uri})\n")


def insert_video_reference(body: str, caret: int, uri: str) -> str:
    return insert_at_cursor(body, caret, f"\n[video]({uri})\n")


def apply_format(body: str, selection: Selection, fmt: str) -> str:
    """Toolbar entry point: dispatch a format name to the matching operation.

    Unknown names leave the selected text in place unchanged.
    """
    if fmt in WRAP_MARKERS:
        return wrap_selection(body, selection, fmt)
    if fmt in PREFIXES:
        return prefix_selection(body, selection, fmt)
    if fmt == "link":
        return wrap_as_link(body, selection)
    return splice(body, selection, selected_text(body, selection))
