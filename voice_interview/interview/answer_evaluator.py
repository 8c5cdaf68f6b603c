"""
Answer Evaluator for voice practice.

Scores a free-text answer to one micro-question:
- Keyword coverage (direct mention or acceptable phrase)
- Bonus per acceptable phrase mentioned
- Penalty for very short answers
- Feedback text by score band

Scoring is rule based and deterministic. Every string is a valid answer.
"""

from typing import List

from .models import MicroAnswer, MicroQuestion
from ..utils.config import (
    CORRECT_THRESHOLD,
    FEEDBACK_EXCERPT_CHARS,
    FEEDBACK_HINT_LIMIT,
    LENGTH_PENALTIES,
    PHRASE_BONUS,
)
from ..utils.logger import setup_logger
from ..utils.text_utils import count_words, normalize_answer, round_half_up, unique

logger = setup_logger("answer_evaluator")


class AnswerEvaluator:
    """
    Evaluates micro-question answers by keyword coverage.
    """

    def evaluate(self, user_answer: str, micro_question: MicroQuestion) -> MicroAnswer:
        """
        Evaluate an answer.

        Args:
            user_answer: Raw answer text
            micro_question: Question being answered

        Returns:
            MicroAnswer with score (0-100), covered/missed keywords and feedback
        """
        normalized = normalize_answer(user_answer or "")
        phrases = [p.lower() for p in micro_question.acceptable_phrases]
        phrase_hit = any(p in normalized for p in phrases)

        covered: List[str] = []
        missed: List[str] = []
        for keyword in micro_question.keywords:
            # A phrase hit credits the keyword itself
            if keyword.lower() in normalized or phrase_hit:
                covered.append(keyword)
            else:
                missed.append(keyword)

        total = len(micro_question.keywords)
        keyword_score = (len(covered) / total) * 100 if total else 0.0

        phrase_bonus = PHRASE_BONUS * sum(1 for p in unique(phrases) if p in normalized)
        length_penalty = self._length_penalty(count_words(normalized))

        raw = keyword_score + phrase_bonus - length_penalty
        score = max(0, min(100, round_half_up(raw)))

        logger.debug(
            f"{micro_question.id}: keywords={keyword_score:.0f} bonus={phrase_bonus} "
            f"penalty={length_penalty} score={score}"
        )

        return MicroAnswer(
            question_id=micro_question.id,
            user_answer=user_answer,
            score=score,
            keywords_covered=covered,
            keywords_missed=missed,
            is_correct=score >= CORRECT_THRESHOLD,
            feedback=build_feedback(score, missed, micro_question.expected_answer),
        )

    @staticmethod
    def _length_penalty(word_count: int) -> int:
        for limit, penalty in LENGTH_PENALTIES:
            if word_count < limit:
                return penalty
        return 0


def build_feedback(score: int, missed: List[str], expected_answer: str) -> str:
    """
    Feedback text for a score band.

    Args:
        score: Final answer score (0-100)
        missed: Keywords the answer did not cover
        expected_answer: Reference answer, excerpted for low scores
    """
    hints = ', '.join(missed[:FEEDBACK_HINT_LIMIT])

    if score >= 80:
        return "Excellent! You covered the key points well."
    if score >= CORRECT_THRESHOLD:
        if missed:
            return f"Good answer! Consider also mentioning: {hints}."
        return "Good answer with the main concepts covered."
    if score >= 40:
        return f"Partial answer. Key points to include: {hints}."
    return f"The expected answer covers: {expected_answer[:FEEDBACK_EXCERPT_CHARS]}..."


# Singleton instance
_answer_evaluator = None


def get_answer_evaluator() -> AnswerEvaluator:
    """
    Get or create answer evaluator instance (singleton).

    Returns:
        AnswerEvaluator instance
    """
    global _answer_evaluator
    if _answer_evaluator is None:
        _answer_evaluator = AnswerEvaluator()
    return _answer_evaluator
