"""
Observable view states published by the session store.

Each state is an immutable tagged variant: a status enum plus the payload
that status carries. Consumers compare ``status`` or use the ``is_*``
properties; they never build states themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .lesson import Lesson


class LessonListStatus(Enum):
    """Lesson list states."""
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class UploadStatus(Enum):
    """Practice upload states."""
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class LessonListState:
    """
    State of the lesson list.

    Transitions: LOADING -> LOADED or LOADING -> FAILED, driven only by a
    fetch attempt.

    Attributes:
        status: Current status
        lessons: Lessons in server order (LOADED only)
        message: User-facing error message (FAILED only)
    """

    status: LessonListStatus
    lessons: Tuple[Lesson, ...] = ()
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> 'LessonListState':
        return cls(status=LessonListStatus.LOADING)

    @classmethod
    def loaded(cls, lessons: Iterable[Lesson]) -> 'LessonListState':
        return cls(status=LessonListStatus.LOADED, lessons=tuple(lessons))

    @classmethod
    def failed(cls, message: str) -> 'LessonListState':
        return cls(status=LessonListStatus.FAILED, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status == LessonListStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status == LessonListStatus.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status == LessonListStatus.FAILED


@dataclass(frozen=True)
class UploadState:
    """
    State of the practice upload.

    Lifecycle: IDLE -> IN_PROGRESS(5) ... IN_PROGRESS(100) -> SUCCEEDED or
    FAILED, and back to IDLE on reset.

    Attributes:
        status: Current status
        percent: Progress percentage (IN_PROGRESS only)
    """

    status: UploadStatus
    percent: Optional[int] = None

    @classmethod
    def idle(cls) -> 'UploadState':
        return cls(status=UploadStatus.IDLE)

    @classmethod
    def in_progress(cls, percent: int) -> 'UploadState':
        """
        Create an in-progress state.

        Raises:
            ValueError: If percent is outside 0..100
        """
        if not 0 <= percent <= 100:
            raise ValueError(f"Upload progress must be between 0 and 100, got {percent}")
        return cls(status=UploadStatus.IN_PROGRESS, percent=percent)

    @classmethod
    def succeeded(cls) -> 'UploadState':
        return cls(status=UploadStatus.SUCCEEDED)

    @classmethod
    def failed(cls) -> 'UploadState':
        return cls(status=UploadStatus.FAILED)

    @property
    def is_idle(self) -> bool:
        return self.status == UploadStatus.IDLE

    @property
    def is_in_progress(self) -> bool:
        return self.status == UploadStatus.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        """True for SUCCEEDED and FAILED."""
        return self.status in (UploadStatus.SUCCEEDED, UploadStatus.FAILED)
