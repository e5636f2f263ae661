"""
metrics.py - Word count, character count and reading time for a post body
"""

import math
from dataclasses import dataclass

from blogcraft.utils.text_processing import count_words

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class DocumentMetrics:
    word_count: int
    char_count: int
    reading_time_minutes: int

    def summary(self) -> str:
        """Editor footer line, e.g. ``3 words • 5 characters • 1 min read``."""
        return (f"{self.word_count} words • {self.char_count} characters • "
                f"{self.reading_time_minutes} min read")


def reading_time(word_count: int, wpm: int = WORDS_PER_MINUTE) -> int:
    """Minutes needed to read *word_count* words, rounded up (0 for 0 words)."""
    return math.ceil(word_count / wpm)


def compute_metrics(body: str) -> DocumentMetrics:
    """Derive metrics from the raw body, markup characters included."""
    words = count_words(body)
    return DocumentMetrics(
        word_count=words,
        char_count=len(body),
        reading_time_minutes=reading_time(words),
    )
