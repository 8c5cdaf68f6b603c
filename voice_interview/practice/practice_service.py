"""
Practice Service.

Runs the full practice flow with persistence:
- Start or resume a session
- Record answers and advance
- Complete, save to history and clear the saved state

The in-memory flow never depends on storage succeeding.
"""

from typing import List, Optional, Union

from ..interview.models import SessionResult, SessionState, VoiceSession
from ..interview.result_aggregator import complete
from ..interview.session_controller import SessionController
from ..storage.session_store import SessionStore, get_session_store
from ..utils.logger import setup_logger

logger = setup_logger("practice_service")


class PracticeService:
    """
    Glue between the session controller and the session store.
    """

    def __init__(
        self,
        controller: Optional[SessionController] = None,
        store: Optional[SessionStore] = None
    ):
        """
        Initialize practice service.

        Args:
            controller: Optional SessionController. If None, creates new one.
            store: Optional SessionStore. Default: shared instance
        """
        self.controller = controller or SessionController()
        self.store = store or get_session_store()

    def resume(self) -> Optional[SessionState]:
        """Saved session that is still in progress, if any."""
        saved = self.store.load_state()
        if saved is None or saved.status == "completed":
            return None
        logger.info(f"Resuming session {saved.session.id} at question {saved.current_question_index + 1}")
        return saved

    def start(self, session: VoiceSession) -> SessionState:
        """Start a new session and save it."""
        state = self.controller.start(session)
        self.store.save_state(state)
        return state

    def begin(self, state: SessionState) -> SessionState:
        """Move past the intro and save."""
        state = self.controller.begin(state)
        self.store.save_state(state)
        return state

    def submit(self, state: SessionState, user_answer: str) -> SessionState:
        """Evaluate and record an answer, then save."""
        state = self.controller.submit_answer(state, user_answer)
        self.store.save_state(state)
        return state

    def retry(self, state: SessionState, user_answer: str) -> SessionState:
        """Replace the answer to the current question, then save."""
        state = self.controller.retry_answer(state, user_answer)
        self.store.save_state(state)
        return state

    def advance(self, state: SessionState) -> Union[SessionState, SessionResult]:
        """
        Move to the next question, or finish the session.

        Args:
            state: Current state

        Returns:
            The next SessionState, or the SessionResult once the last
            question is done
        """
        state = self.controller.next_question(state)
        if state.status != "completed":
            self.store.save_state(state)
            return state
        return self.finish(state)

    def finish(self, state: SessionState) -> SessionResult:
        """Complete the session, add it to history and clear the saved state."""
        result = complete(state)
        self.store.save_to_history(result)
        self.store.clear_state()
        return result

    def exit(self) -> None:
        """Abandon the saved session."""
        self.store.clear_state()

    def history(self) -> List[SessionResult]:
        """Completed results, newest first."""
        return self.store.get_history()


# Singleton instance
_practice_service = None


def get_practice_service() -> PracticeService:
    """
    Get or create practice service instance (singleton).

    Returns:
        PracticeService instance
    """
    global _practice_service
    if _practice_service is None:
        _practice_service = PracticeService()
    return _practice_service
