"""
Lesson browsing and practice session core.

Provides the session store that loads lessons from the lesson endpoint,
runs simulated practice uploads and keeps the practice history, together
with the lesson source, simulator and configuration it is wired from.

Usage:
    >>> from artium_lessons import DIContainer, SessionStore, configure_default_services
    >>>
    >>> container = DIContainer()
    >>> configure_default_services(container)
    >>> store = container.resolve(SessionStore)
    >>> await store.initialize()
"""

from .models.lesson import Lesson, PracticeSubmission
from .models.result import Result, ResultStatus
from .models.state import LessonListState, LessonListStatus, UploadState, UploadStatus
from .practice.simulator import SubmissionSimulator, TerminalOutcome, fixed_outcome, random_outcome
from .sources.http_source import HttpLessonSource
from .sources.interfaces import FetchError, LessonSource, MediaPlayer
from .store.session_store import (
    FETCH_FAILED_MESSAGE,
    SessionStore,
    SubmissionInProgressError,
    UploadCancelledError,
)
from .utils.di_container import DIContainer, configure_default_services

__all__ = [
    "DIContainer",
    "FETCH_FAILED_MESSAGE",
    "FetchError",
    "HttpLessonSource",
    "Lesson",
    "LessonListState",
    "LessonListStatus",
    "LessonSource",
    "MediaPlayer",
    "PracticeSubmission",
    "Result",
    "ResultStatus",
    "SessionStore",
    "SubmissionInProgressError",
    "SubmissionSimulator",
    "TerminalOutcome",
    "UploadCancelledError",
    "UploadState",
    "UploadStatus",
    "configure_default_services",
    "fixed_outcome",
    "random_outcome",
]

__version__ = "0.1.0"
