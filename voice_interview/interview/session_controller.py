"""
Session Controller.

State machine over SessionState:

    intro -> in-progress -> completed

Every transition returns a new SessionState; the input state is never
changed. A completed state is terminal, except that the answer to the
last question can still be retried.
"""

from datetime import datetime
from typing import Optional

from .answer_evaluator import AnswerEvaluator, get_answer_evaluator
from .models import MicroQuestion, SessionState, VoiceSession
from ..utils.logger import setup_logger

logger = setup_logger("session_controller")


class SessionController:
    """
    Drives a voice session: start, submit answers, advance.
    """

    def __init__(self, evaluator: Optional[AnswerEvaluator] = None):
        """
        Initialize session controller.

        Args:
            evaluator: Optional AnswerEvaluator. Default: shared instance
        """
        self.evaluator = evaluator or get_answer_evaluator()

    def start(self, session: VoiceSession) -> SessionState:
        """Create the initial state for a session."""
        logger.info(f"Starting session {session.id} ({session.total_questions} questions)")
        return SessionState(
            session=session,
            current_question_index=0,
            answers=[],
            started_at=datetime.now().isoformat(),
            status="intro",
        )

    def begin(self, state: SessionState) -> SessionState:
        """Leave the intro screen and move to the first question."""
        if state.status != "intro":
            return state
        return state.model_copy(update={"status": "in-progress"})

    def submit_answer(self, state: SessionState, user_answer: str) -> SessionState:
        """
        Evaluate an answer to the current question and record it.

        The question index is not advanced; call next_question for that.

        Args:
            state: Current state
            user_answer: Answer text (post-transcription)

        Returns:
            New state with the evaluation appended
        """
        if state.status == "completed":
            logger.warning(f"Ignoring answer for completed session {state.session.id}")
            return state
        if len(state.answers) > state.current_question_index:
            logger.warning(
                f"Question {state.current_question_index + 1} of {state.session.id} already answered"
            )
            return state

        question = self.get_current_question(state)
        if question is None:
            return state

        evaluation = self.evaluator.evaluate(user_answer, question)
        status = "completed" if self._at_last_question(state) else "in-progress"

        return state.model_copy(update={
            "answers": [*state.answers, evaluation],
            "status": status,
        })

    def retry_answer(self, state: SessionState, user_answer: str) -> SessionState:
        """
        Re-answer the current question, replacing its recorded evaluation.

        Also allowed once answering the last question completed the
        session. Falls back to submit_answer when the current question has
        no answer yet.

        Args:
            state: Current state
            user_answer: New answer text

        Returns:
            New state with the last answer replaced
        """
        if len(state.answers) != state.current_question_index + 1:
            return self.submit_answer(state, user_answer)

        questions = state.session.micro_questions
        if not 0 <= state.current_question_index < len(questions):
            return state
        question = questions[state.current_question_index]

        evaluation = self.evaluator.evaluate(user_answer, question)
        status = "completed" if self._at_last_question(state) else "in-progress"
        logger.info(f"Retried {question.id}: {state.answers[-1].score} -> {evaluation.score}")

        return state.model_copy(update={
            "answers": [*state.answers[:-1], evaluation],
            "status": status,
        })

    def next_question(self, state: SessionState) -> SessionState:
        """Advance to the next question, or complete the session at the end."""
        if state.status == "completed":
            return state
        if self._at_last_question(state):
            return state.model_copy(update={"status": "completed"})

        return state.model_copy(update={
            "current_question_index": state.current_question_index + 1,
            "status": "in-progress",
        })

    @staticmethod
    def get_current_question(state: SessionState) -> Optional[MicroQuestion]:
        """Current micro-question, or None once completed or out of range."""
        if state.status == "completed":
            return None
        questions = state.session.micro_questions
        if 0 <= state.current_question_index < len(questions):
            return questions[state.current_question_index]
        return None

    @staticmethod
    def _at_last_question(state: SessionState) -> bool:
        return state.current_question_index >= len(state.session.micro_questions) - 1
