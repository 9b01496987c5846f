"""
Session state management.

Usage:
    >>> from artium_lessons.store import SessionStore
    >>> store = SessionStore(lesson_source, simulator)
    >>> await store.initialize()
"""

from .observable import ObservableState
from .session_store import (
    FETCH_FAILED_MESSAGE,
    SessionStore,
    SubmissionInProgressError,
    UploadCancelledError,
)

__all__ = [
    "FETCH_FAILED_MESSAGE",
    "ObservableState",
    "SessionStore",
    "SubmissionInProgressError",
    "UploadCancelledError",
]
