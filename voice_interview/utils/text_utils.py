"""
Text processing utilities for answer normalization and sentence handling.
"""
import math
import re
from typing import List, TypeVar

T = TypeVar("T")

_SENTENCE_BREAK = re.compile(r'[.!?]+')


def normalize_answer(text: str) -> str:
    """
    Normalize a raw answer for keyword matching.

    Args:
        text: Raw answer text (typed or transcribed)

    Returns:
        Lower-cased, trimmed text
    """
    if not text:
        return ""
    return text.lower().strip()


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of sentence punctuation (. ! ?).

    Pieces are returned untrimmed, including empty ones, so callers decide
    what counts as a sentence.
    """
    return _SENTENCE_BREAK.split(text)


def chunk_list(items: List[T], size: int) -> List[List[T]]:
    """
    Split a list into ordered chunks of `size`; the last chunk may be shorter.

    Example:
        >>> chunk_list(["a", "b", "c"], 2)
        [['a', 'b'], ['c']]
    """
    return [items[i:i + size] for i in range(0, len(items), size)]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def unique(items: List[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(items))
