"""
Topic extraction from a question's opening sentence.
"""
import re

from ..utils.config import TOPIC_MAX_LENGTH

_LEADING_PROMPT = re.compile(r'^(what|how|why|when|explain|describe|tell me about)\s+', re.IGNORECASE)
_TRAILING_QUESTION_MARK = re.compile(r'\?\Z')


def extract_topic(question: str, max_length: int = TOPIC_MAX_LENGTH) -> str:
    """
    Derive a short topic label from a question.

    Args:
        question: Question text, e.g. "What is a load balancer, and why use one?"
        max_length: Maximum label length

    Returns:
        Topic label, e.g. "is a load balancer"
    """
    cleaned = _LEADING_PROMPT.sub('', question)
    cleaned = _TRAILING_QUESTION_MARK.sub('', cleaned).strip()

    end = min(len(cleaned), max_length)
    for separator in (',', '.'):
        # A separator at position 0 does not count
        position = cleaned.find(separator)
        if position > 0:
            end = min(end, position)

    return cleaned[:end].strip()
