"""
Session store.

Owns the lesson list state, the practice upload state and the practice
history. The presentation layer subscribes to these and calls the command
methods; it never mutates state directly.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..models.lesson import Lesson, PracticeSubmission
from ..models.result import Result
from ..models.state import LessonListState, UploadState
from ..practice.simulator import SubmissionSimulator, TerminalOutcome
from ..sources.interfaces import FetchError, LessonSource, MediaPlayer
from ..utils.logger import mask_notes, mask_url
from .observable import ObservableState, Subscriber


logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to load lessons. Please check your connection."


class SubmissionInProgressError(Exception):
    """Raised into a Result when a practice upload is already running."""
    pass


class UploadCancelledError(Exception):
    """Raised into a Result when reset_upload() stops a running upload."""
    pass


class SessionStore:
    """
    State owner for one lesson browsing session.

    At most one practice upload runs at a time; a second submit_practice()
    while one is in flight is rejected. reset_upload() cancels the running
    upload, so a stale sequence never publishes after the reset.

    Examples:
        >>> store = SessionStore(
        ...     lesson_source=HttpLessonSource(config.lessons_url),
        ...     simulator=SubmissionSimulator()
        ... )
        >>> store.subscribe_lessons(render_lessons)
        >>> await store.initialize()
        >>> lesson = store.find_lesson_by_title("Scales")
        >>> result = await store.submit_practice(lesson, "practiced scales")
        >>> if result.is_success:
        ...     print(result.value.formatted_timestamp)
    """

    def __init__(
        self,
        lesson_source: LessonSource,
        simulator: SubmissionSimulator,
        clock: Callable[[], datetime] = datetime.now,
        media_player: Optional[MediaPlayer] = None
    ):
        """
        Initialize the store.

        Args:
            lesson_source: Source queried once by initialize()
            simulator: Drives practice uploads and picks their outcome
            clock: Timestamp source for practice submissions
            media_player: Optional playback handle used by prepare_player()
        """
        self._lesson_source = lesson_source
        self._simulator = simulator
        self._clock = clock
        self._media_player = media_player

        self._lessons = ObservableState(LessonListState.loading(), name="lesson_state")
        self._upload = ObservableState(UploadState.idle(), name="upload_state")
        self._history: ObservableState[Tuple[PracticeSubmission, ...]] = ObservableState(
            (), name="history"
        )

        self._initialized = False
        self._upload_task: Optional[asyncio.Task] = None

    @property
    def lesson_state(self) -> LessonListState:
        """Get current lesson list state."""
        return self._lessons.value

    @property
    def upload_state(self) -> UploadState:
        """Get current upload state."""
        return self._upload.value

    @property
    def history(self) -> Tuple[PracticeSubmission, ...]:
        """Get practice history in submission order."""
        return self._history.value

    def history_newest_first(self) -> List[PracticeSubmission]:
        """Practice history in display order (newest first)."""
        return list(reversed(self._history.value))

    def subscribe_lessons(self, subscriber: Subscriber) -> Callable[[], None]:
        """Subscribe to lesson list state; returns an unsubscribe function."""
        return self._lessons.subscribe(subscriber)

    def subscribe_upload(self, subscriber: Subscriber) -> Callable[[], None]:
        """Subscribe to upload state; returns an unsubscribe function."""
        return self._upload.subscribe(subscriber)

    def subscribe_history(self, subscriber: Subscriber) -> Callable[[], None]:
        """Subscribe to practice history; returns an unsubscribe function."""
        return self._history.subscribe(subscriber)

    async def initialize(self) -> LessonListState:
        """
        Load lessons once.

        Any failure of the lesson source, including an exception it should
        not have raised, becomes the FAILED state with a fixed message.

        Returns:
            The resulting LOADED or FAILED state

        Raises:
            RuntimeError: If called more than once
        """
        if self._initialized:
            raise RuntimeError("SessionStore is already initialized")
        self._initialized = True

        self._lessons.set(LessonListState.loading())

        try:
            result = await self._lesson_source.fetch()
        except Exception as e:
            logger.error(f"Lesson source raised instead of returning a result: {e!r}")
            result = Result.failure("Lesson source raised", FetchError(str(e)))

        if result.is_success:
            state = LessonListState.loaded(result.value)
            logger.info(f"Loaded {len(state.lessons)} lessons")
        else:
            logger.warning(f"Failed to load lessons: {result.message}")
            state = LessonListState.failed(FETCH_FAILED_MESSAGE)

        self._lessons.set(state)
        return state

    def find_lesson_by_title(self, title: str) -> Optional[Lesson]:
        """
        Find a loaded lesson by exact title.

        Returns:
            The first matching lesson, or None if lessons are not loaded
            or no title matches
        """
        state = self._lessons.value
        if not state.is_loaded:
            return None

        for lesson in state.lessons:
            if lesson.title == title:
                return lesson
        return None

    def prepare_player(self, video_url: str) -> Result[None]:
        """
        Hand a video to the attached media player.

        Returns:
            Result with None on success, failure if there is no player,
            the URL is blank or the player raised
        """
        if self._media_player is None:
            return Result.failure("No media player attached")

        if not video_url or not video_url.strip():
            return Result.failure("Video URL is empty")

        try:
            self._media_player.prepare(video_url)
        except Exception as e:
            logger.error(f"Failed to prepare player for {mask_url(video_url)}: {e}")
            return Result.failure("Failed to prepare player", e)

        logger.debug(f"Player prepared for {mask_url(video_url)}")
        return Result.success(None, "Player prepared")

    async def submit_practice(self, lesson: Lesson, notes: str) -> Result[PracticeSubmission]:
        """
        Run a practice upload and record it on success.

        Publishes each progress step, then SUCCEEDED or FAILED. The history
        grows by one entry only on SUCCEEDED.

        Args:
            lesson: Lesson being practiced
            notes: Free-text notes (may be empty)

        Returns:
            Result with the new PracticeSubmission on success; a failure
            for a FAILED outcome, for a busy store (SubmissionInProgressError)
            or for an upload stopped by reset_upload() (UploadCancelledError)
        """
        if self._upload_task is not None and not self._upload_task.done():
            logger.warning(f"Rejected practice for '{lesson.title}': upload already in progress")
            return Result.failure(
                "A practice upload is already in progress",
                SubmissionInProgressError(lesson.title)
            )

        logger.info(f"Submitting practice for '{lesson.title}' (notes: {mask_notes(notes)})")

        task = asyncio.create_task(self._run_upload(lesson, notes))
        self._upload_task = task
        try:
            return await task
        except asyncio.CancelledError:
            # reset_upload() detaches the task before cancelling it
            if self._upload_task is task:
                logger.info(f"Practice upload for '{lesson.title}' abandoned by caller")
                self._upload_task = None
                self._upload.set(UploadState.idle())
                raise
            return self._cancelled(lesson)
        finally:
            if self._upload_task is task:
                self._upload_task = None

    def reset_upload(self):
        """
        Return the upload state to IDLE.

        Cancels an in-flight upload so it cannot publish afterwards.
        """
        task = self._upload_task
        if task is not None and not task.done():
            logger.info("Cancelling in-flight practice upload")
            self._upload_task = None
            task.cancel()

        self._upload.set(UploadState.idle())

    async def close(self):
        """Cancel any in-flight upload and wait for it to stop."""
        task = self._upload_task
        self.reset_upload()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _run_upload(self, lesson: Lesson, notes: str) -> Result[PracticeSubmission]:
        def publish_progress(percent: int):
            self._upload.set(UploadState.in_progress(percent))

        try:
            outcome = await self._simulator.run(publish_progress)
        except Exception as e:
            if self._is_detached():
                return self._cancelled(lesson)
            logger.error(f"Practice upload for '{lesson.title}' failed unexpectedly: {e}")
            self._upload.set(UploadState.failed())
            return Result.failure("Practice upload failed", e)

        # A reset during the last progress publish has no await left to land on
        if self._is_detached():
            return self._cancelled(lesson)

        if outcome != TerminalOutcome.SUCCEEDED:
            logger.info(f"Practice upload for '{lesson.title}' failed")
            self._upload.set(UploadState.failed())
            return Result.failure("Practice upload failed")

        submission = PracticeSubmission(lesson=lesson, notes=notes, timestamp=self._clock())
        self._history.set(self._history.value + (submission,))
        self._upload.set(UploadState.succeeded())

        logger.info(
            f"Practice for '{lesson.title}' submitted "
            f"({len(self._history.value)} in history)"
        )
        return Result.success(submission, "Practice submitted")

    def _is_detached(self) -> bool:
        """True when reset_upload() has let go of the running upload task."""
        return self._upload_task is not asyncio.current_task()

    def _cancelled(self, lesson: Lesson) -> Result[PracticeSubmission]:
        logger.info(f"Practice upload for '{lesson.title}' cancelled")
        return Result.failure(
            "Practice upload was cancelled",
            UploadCancelledError(lesson.title)
        )
