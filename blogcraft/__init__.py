"""blogcraft - compose blog posts: markup editing, live preview and post metrics."""

__version__ = "0.1.0"
