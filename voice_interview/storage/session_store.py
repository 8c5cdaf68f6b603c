"""
Session Store.

Persists voice practice progress on top of a key-value backend:
- The in-flight session (for resume)
- History of completed results (newest first, bounded)

Storage problems never reach the caller. They are logged, loads return
nothing, and saves are skipped, so practice continues without persistence.
"""

from typing import List, Optional

from pydantic import TypeAdapter

from .kv_store import JsonFileKeyValueStore, KeyValueStore
from ..interview.models import SessionResult, SessionState
from ..utils.config import HISTORY_LIMIT, SESSION_HISTORY_KEY, SESSION_STATE_KEY
from ..utils.logger import setup_logger

logger = setup_logger("session_store")

_history_adapter = TypeAdapter(List[SessionResult])


class SessionStore:
    """
    Saves and restores session state and result history.

    Last write wins; concurrent writers to the same keys are not arbitrated.
    """

    def __init__(
        self,
        backend: Optional[KeyValueStore] = None,
        history_limit: int = HISTORY_LIMIT,
        state_key: str = SESSION_STATE_KEY,
        history_key: str = SESSION_HISTORY_KEY
    ):
        """
        Initialize session store.

        Args:
            backend: Key-value backend. Default: JsonFileKeyValueStore
            history_limit: Maximum number of results kept in history
            state_key: Key holding the current session state
            history_key: Key holding the result history
        """
        self.backend = backend if backend is not None else JsonFileKeyValueStore()
        self.history_limit = history_limit
        self.state_key = state_key
        self.history_key = history_key

    def save_state(self, state: SessionState) -> None:
        """Save current session state."""
        try:
            self.backend.set(self.state_key, state.model_dump_json(by_alias=True))
            logger.debug(f"Saved state for session {state.session.id}")
        except Exception as e:
            logger.error(f"Failed to save session state: {e}")

    def load_state(self) -> Optional[SessionState]:
        """Load saved session state, or None if absent or unreadable."""
        try:
            saved = self.backend.get(self.state_key)
            if not saved:
                return None
            return SessionState.model_validate_json(saved)
        except Exception as e:
            logger.error(f"Failed to load session state: {e}")
            return None

    def clear_state(self) -> None:
        """Clear current session state."""
        try:
            self.backend.remove(self.state_key)
        except Exception as e:
            logger.error(f"Failed to clear session state: {e}")

    def save_to_history(self, result: SessionResult) -> None:
        """Insert a completed result at the front of history, keeping the newest entries."""
        try:
            history = self.get_history()
            history.insert(0, result)
            trimmed = history[:self.history_limit]
            payload = _history_adapter.dump_json(trimmed, by_alias=True).decode('utf-8')
            self.backend.set(self.history_key, payload)
            logger.info(f"Saved session {result.session_id} to history ({len(trimmed)} entries)")
        except Exception as e:
            logger.error(f"Failed to save session to history: {e}")

    def get_history(self) -> List[SessionResult]:
        """Completed results, newest first. Empty if absent or unreadable."""
        try:
            saved = self.backend.get(self.history_key)
            if not saved:
                return []
            return _history_adapter.validate_json(saved)
        except Exception as e:
            logger.error(f"Failed to load session history: {e}")
            return []


# Singleton instance
_session_store = None


def get_session_store(backend: Optional[KeyValueStore] = None) -> SessionStore:
    """
    Get or create session store instance (singleton).

    The backend only applies on the first call; a later call with a
    different backend logs a warning and returns the existing store.

    Args:
        backend: Optional key-value backend

    Returns:
        SessionStore instance
    """
    global _session_store
    if _session_store is None:
        _session_store = SessionStore(backend=backend)
    elif backend is not None and backend is not _session_store.backend:
        logger.warning(
            f"Session store already uses {type(_session_store.backend).__name__}; "
            f"ignoring {type(backend).__name__}"
        )
    return _session_store
