"""
html_generation.py - Standalone HTML page for the live preview

This module handles:
- Wrapping the rendered body in a page styled from the document's StyleSpec
- Title, subtitle and thumbnail header as shown above the preview
- SEO meta tags, falling back to an excerpt when no description is set
- The words / characters / reading-time footer
"""

import html
from typing import Dict

from blogcraft.core.metrics import compute_metrics
from blogcraft.core.models import Document
from blogcraft.core.preview import render_preview
from blogcraft.utils.text_processing import strip_html, truncate_to_words

EXCERPT_WORDS = 30


def _style_attr(css: Dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in css.items())


def describe(document: Document, rendered: str) -> str:
    """Meta description, or a short excerpt of the rendered body."""
    if document.meta_description.strip():
        return document.meta_description.strip()
    return truncate_to_words(strip_html(rendered.replace("<br />", " ")), EXCERPT_WORDS)


def generate_preview_page(document: Document, escape: bool = False) -> str:
    """Render *document* into a complete HTML page."""
    rendered = render_preview(document.body, escape=escape)
    metrics = compute_metrics(document.body)
    page_title = html.escape(document.meta_title or document.title or "Untitled post")
    description = html.escape(describe(document, rendered))
    style = _style_attr(document.styling.to_css())

    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{page_title}</title>
    <meta name="description" content="{description}">
    <style>
        body {{
            margin: 0;
            padding: 20px;
            background-color: #f3f4f6;
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
        }}
        .preview {{
            max-width: 800px;
            margin: 0 auto;
            padding: 24px;
            border-radius: 8px;
            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        }}
        .preview img {{ max-width: 100%; border-radius: 8px; margin: 16px 0; }}
        .preview .thumbnail {{ width: 100%; height: 16rem; object-fit: cover; margin: 0 0 24px 0; }}
        .preview blockquote {{ border-left: 4px solid #3b82f6; padding-left: 16px; font-style: italic; margin: 16px 0; }}
        .preview li {{ margin-left: 24px; }}
        .preview a {{ color: #2563eb; text-decoration: underline; }}
        .subtitle {{ color: #4b5563; margin-bottom: 24px; }}
        .stats {{ max-width: 800px; margin: 12px auto; color: #4b5563; font-size: 14px; }}
    </style>
</head>
<body>
    <article class="preview" style="{style}">
"""
    if document.thumbnail:
        page += f'        <img class="thumbnail" src="{html.escape(document.thumbnail)}" alt="Blog thumbnail" />\n'
    if document.title:
        page += f"        <h1>{html.escape(document.title)}</h1>\n"
    if document.subtitle:
        page += f'        <h2 class="subtitle">{html.escape(document.subtitle)}</h2>\n'

    page += f"        <div>{rendered}</div>\n"
    page += "    </article>\n"
    page += f'    <div class="stats">{html.escape(metrics.summary())}</div>\n'
    page += "</body>\n</html>\n"
    return page
