"""
Result Aggregator.

Turns a finished SessionState into a SessionResult:
- Overall score (rounded mean of answer scores)
- Verdict band
- Strengths and areas to improve
- Summary sentence
"""

from datetime import datetime
from typing import List

from .models import MicroAnswer, SessionResult, SessionState, Verdict
from ..utils.config import (
    COVERAGE_STRENGTH_MIN,
    COVERAGE_STRENGTH_SHOWN,
    LOW_SCORE_THRESHOLD,
    REVIEW_CONCEPTS_SHOWN,
    STRONG_PERFORMANCE_RATIO,
    VERDICT_BANDS,
)
from ..utils.logger import setup_logger
from ..utils.text_utils import round_half_up, unique

logger = setup_logger("result_aggregator")


def complete(state: SessionState) -> SessionResult:
    """
    Calculate final session results.

    Args:
        state: Session state (normally completed)

    Returns:
        SessionResult
    """
    answers = list(state.answers)
    total = len(answers)

    overall_score = overall_score_for(answers)
    verdict = verdict_for(overall_score)
    correct = sum(1 for a in answers if a.is_correct)

    unique_missed = unique([kw for a in answers for kw in a.keywords_missed])
    unique_covered = unique([kw for a in answers for kw in a.keywords_covered])

    strengths: List[str] = []
    if correct == total:
        strengths.append("Answered all questions correctly!")
    elif total and correct >= total * STRONG_PERFORMANCE_RATIO:
        strengths.append(f"Strong performance on {correct}/{total} questions")
    if len(unique_covered) >= COVERAGE_STRENGTH_MIN:
        strengths.append(
            f"Good coverage of key concepts: {', '.join(unique_covered[:COVERAGE_STRENGTH_SHOWN])}"
        )

    areas_to_improve: List[str] = []
    if unique_missed:
        areas_to_improve.append(
            f"Review these concepts: {', '.join(unique_missed[:REVIEW_CONCEPTS_SHOWN])}"
        )
    low_scores = sum(1 for a in answers if a.score < LOW_SCORE_THRESHOLD)
    if low_scores:
        areas_to_improve.append(f"Practice more on {low_scores} challenging questions")

    topic = state.session.topic
    result = SessionResult(
        session_id=state.session.id,
        topic=topic,
        answers=answers,
        overall_score=overall_score,
        verdict=verdict,
        summary=build_summary(overall_score, correct, total, topic),
        strengths=strengths,
        areas_to_improve=areas_to_improve,
        completed_at=datetime.now().isoformat(),
    )
    logger.info(f"Session {result.session_id} completed: {overall_score} ({verdict})")
    return result


def overall_score_for(answers: List[MicroAnswer]) -> int:
    """Rounded mean of answer scores; 0 without answers."""
    if not answers:
        return 0
    return round_half_up(sum(a.score for a in answers) / len(answers))


def verdict_for(score: int) -> Verdict:
    for floor, verdict in VERDICT_BANDS:
        if score >= floor:
            return verdict
    return "review-topic"


def build_summary(score: int, correct: int, total: int, topic: str) -> str:
    """Summary sentence for the score band."""
    if score >= 80:
        return (
            f"Excellent understanding of {topic}! You answered {correct}/{total} "
            f"questions correctly with strong technical depth."
        )
    if score >= 60:
        return (
            f"Good grasp of {topic}. You got {correct}/{total} correct. "
            f"A bit more practice will solidify your knowledge."
        )
    if score >= 40:
        return (
            f"You have a basic understanding of {topic} ({correct}/{total} correct). "
            f"Review the missed concepts and try again."
        )
    return (
        f"{topic} needs more study. You scored {correct}/{total}. "
        f"Review the fundamentals and practice with the detailed explanations."
    )
