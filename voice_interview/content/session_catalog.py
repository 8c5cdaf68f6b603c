"""
Catalog of practice sessions built from the question bank.
"""
from typing import List, Optional

from ..interview.models import Question, VoiceSession
from ..interview.session_generator import SessionGenerator, get_session_generator
from ..utils.config import MAX_CATALOG_SESSIONS
from ..utils.logger import setup_logger

logger = setup_logger("session_catalog")


def build_available_sessions(
    questions: List[Question],
    generator: Optional[SessionGenerator] = None,
    limit: int = MAX_CATALOG_SESSIONS
) -> List[VoiceSession]:
    """
    Generate sessions for the first `limit` questions.

    Questions that cannot be practiced are skipped.

    Args:
        questions: Candidate questions (normally QuestionRepository.suitable_questions())
        generator: Optional SessionGenerator. Default: shared instance
        limit: Maximum number of questions considered

    Returns:
        Generated sessions in question order
    """
    generator = generator or get_session_generator()

    sessions = []
    for question in questions[:limit]:
        session = generator.generate(question)
        if session is not None:
            sessions.append(session)

    logger.info(f"Built {len(sessions)} sessions from {min(len(questions), limit)} questions")
    return sessions


def find_session_for_question(sessions: List[VoiceSession], question_id: str) -> Optional[VoiceSession]:
    """Session generated from the given source question, if any."""
    for session in sessions:
        if session.source_question_id == question_id:
            return session
    return None
