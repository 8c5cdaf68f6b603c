"""
Voice Interview Practice Engine.

Turns long-form interview questions into short spoken practice sessions,
scores answers by keyword coverage and keeps a history of results.
"""
from .interview import (
    Question,
    VoiceSession,
    SessionState,
    SessionResult,
    SessionGenerator,
    AnswerEvaluator,
    SessionController,
    complete
)
from .practice import PracticeService, get_practice_service

__version__ = "0.1.0"

__all__ = [
    'Question',
    'VoiceSession',
    'SessionState',
    'SessionResult',
    'SessionGenerator',
    'AnswerEvaluator',
    'SessionController',
    'complete',
    'PracticeService',
    'get_practice_service'
]
