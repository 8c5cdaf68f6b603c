"""
Persistence for voice practice sessions.
"""
from .kv_store import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore
from .session_store import SessionStore, get_session_store

__all__ = [
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'JsonFileKeyValueStore',
    'SessionStore',
    'get_session_store'
]
