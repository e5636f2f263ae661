"""
slug.py - URL slug derivation for post titles
"""

import re

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def derive_slug(title: str) -> str:
    """Turn *title* into a URL slug.

    Lowercases the title, collapses every run of characters outside
    ``[a-z0-9]`` into a single ``-`` and drops a leading or trailing ``-``.
    Applying it to an existing slug returns the slug unchanged.

    >>> derive_slug("Hello, World!")
    'hello-world'
    """
    slug = _NON_SLUG_RUN.sub("-", title.lower())
    if slug.startswith("-"):
        slug = slug[1:]
    if slug.endswith("-"):
        slug = slug[:-1]
    return slug
