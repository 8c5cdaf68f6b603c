"""
Voice Interview Practice System.

This module provides the practice session engine:
- Session generation (micro-questions from one source question)
- Rule-based answer evaluation
- Session state machine
- Result aggregation
"""

from .models import (
    Question,
    MicroQuestion,
    VoiceSession,
    MicroAnswer,
    SessionState,
    SessionResult
)
from .phrase_expander import PhraseExpander
from .topic_extractor import extract_topic
from .session_generator import SessionGenerator, get_session_generator
from .answer_evaluator import AnswerEvaluator, get_answer_evaluator
from .session_controller import SessionController
from .result_aggregator import complete

__all__ = [
    'Question',
    'MicroQuestion',
    'VoiceSession',
    'MicroAnswer',
    'SessionState',
    'SessionResult',
    'PhraseExpander',
    'extract_topic',
    'SessionGenerator',
    'get_session_generator',
    'AnswerEvaluator',
    'get_answer_evaluator',
    'SessionController',
    'complete'
]
