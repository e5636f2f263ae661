"""
text_processing.py - Text processing and normalization utilities

Provides common text processing functions used across the project.
"""

import re
import html
import unicodedata
from typing import List

_WORD_RUN = re.compile(r"\S+")


def strip_html(text: str) -> str:
    """Remove HTML tags from text (light fallback).
    
    Args:
        text: Text potentially containing HTML
        
    Returns:
        Text with HTML tags removed
    """
    return re.sub(r"<[^>]+>", "", html.unescape(text))


def normalize_text(text: str) -> str:
    """Normalize text using Unicode NFC normalization.
    
    Handles line endings and Unicode normalization.
    
    Args:
        text: Text to normalize
        
    Returns:
        Normalized text
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return unicodedata.normalize("NFC", text)


def split_words(text: str) -> List[str]:
    """Return the maximal non-whitespace runs of *text*."""
    return _WORD_RUN.findall(text)


def count_words(text: str) -> int:
    """Count words in text.
    
    A word is any maximal run of non-whitespace characters, so markup
    markers glued to a word (``**bold**``) count as part of it.
    
    Args:
        text: Text to count words in
        
    Returns:
        Number of words (0 for empty or whitespace-only text)
    """
    return len(split_words(text))


def truncate_to_words(text: str, max_words: int) -> str:
    """Truncate text to a maximum number of words.
    
    Args:
        text: Text to truncate
        max_words: Maximum number of words
        
    Returns:
        Truncated text, with an ellipsis when words were dropped
    """
    words = text.split()
    if len(words) <= max_words:
        return " ".join(words)
    return " ".join(words[:max_words]) + "…"
