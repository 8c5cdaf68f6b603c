"""
Question content: question bank loading and the session catalog.
"""
from .question_repository import QuestionRepository, get_question_repository
from .session_catalog import build_available_sessions, find_session_for_question

__all__ = [
    'QuestionRepository',
    'get_question_repository',
    'build_available_sessions',
    'find_session_for_question'
]
