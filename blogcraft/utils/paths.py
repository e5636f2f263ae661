#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

_MARKERS = ('.git', 'pyproject.toml', 'README.md')


def find_root(start: Path) -> Path:
    """Return the nearest ancestor of *start* holding a project marker.

    Falls back to *start* itself when no marker is found, so the tool keeps
    working from an arbitrary folder of posts.
    """
    current = start.resolve()
    while current.parent != current:
        if any((current / marker).exists() for marker in _MARKERS):
            return current
        current = current.parent
    return start.resolve()


# Try to get root from environment variable first
ROOT = os.environ.get('BLOGCRAFT_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    ROOT = find_root(Path.cwd())

LOG_DIR     = ROOT / "logs"
CONFIG_DIR  = ROOT / "config"
STYLE_FILE  = CONFIG_DIR / "style.yaml"
