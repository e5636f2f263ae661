"""
preview.py - Render the post body into preview HTML

The renderer is a small ad-hoc grammar: an ordered list of regex
substitution passes, each run over the output of the previous one. The
order is part of the behaviour (bold before italic, line-prefix passes
before link/image, newlines last) and must not be rearranged.

There is no list grouping: each ``- item`` line becomes a bare ``<li>``.
By default no escaping is applied and the result is trusted markup; pass
``escape=True`` to neutralise raw HTML in the body first.
"""

import re
from typing import Pattern, Tuple

RenderPass = Tuple[str, Pattern[str], str]

# "." and "^"/"$" only know "\n"; a marker must not span any line terminator
_CH = r"[^\n\r\u2028\u2029]"
_BOL = r"(?:^|(?<=[\r\u2028\u2029]))"
_EOL = r"(?=[\r\u2028\u2029]|$)"


def _line(prefix: str) -> Pattern[str]:
    return re.compile(rf"{_BOL}{prefix} ({_CH}+){_EOL}", re.MULTILINE)


PASSES: Tuple[RenderPass, ...] = (
    ("bold", re.compile(rf"\*\*({_CH}+?)\*\*"), r"<strong>\1</strong>"),
    ("italic", re.compile(rf"\*({_CH}+?)\*"), r"<em>\1</em>"),
    ("h1", _line("#"), r"<h1>\1</h1>"),
    ("h2", _line("##"), r"<h2>\1</h2>"),
    ("list_item", _line("-"), r"<li>\1</li>"),
    ("quote", _line(">"), r"<blockquote>\1</blockquote>"),
    # a "[" right after "!" belongs to an image reference
    ("link", re.compile(rf"(?<!!)\[({_CH}+?)\]\(({_CH}+?)\)"), r'<a href="\2">\1</a>'),
    ("image", re.compile(rf"!\[({_CH}+?)\]\(({_CH}+?)\)"), r'<img src="\2" alt="\1" />'),
    ("line_break", re.compile(r"\n"), "<br />"),
)

# ">" is left alone so blockquote lines still match after escaping
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
)


def escape_body(body: str) -> str:
    for char, entity in _ESCAPES:
        body = body.replace(char, entity)
    return body


def render_preview(body: str, escape: bool = False) -> str:
    """Transform *body* into preview HTML by running every pass in order."""
    html = escape_body(body) if escape else body
    for _name, pattern, replacement in PASSES:
        html = pattern.sub(replacement, html)
    return html
