"""
Abstract interfaces for the session store's collaborators.

This module defines abstract base classes that enable dependency inversion
and make testing easier through mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.lesson import Lesson
from ..models.result import Result


class FetchError(Exception):
    """Any transport or decoding failure while fetching lessons."""
    pass


class LessonSource(ABC):
    """
    Abstract interface for the lesson endpoint.

    Implementing classes perform a single round trip per fetch: no
    pagination, no caching, no retry.
    """

    @abstractmethod
    async def fetch(self) -> Result[List[Lesson]]:
        """
        Fetch all lessons.

        Returns:
            Result containing lessons in server order on success, or a
            failure whose error is a FetchError
        """
        pass


class MediaPlayer(ABC):
    """
    Abstract interface for video playback.

    The presentation layer owns the player and binds pause/resume/release
    to its own lifecycle; the session store only calls prepare().
    """

    @abstractmethod
    def prepare(self, video_url: str):
        """
        Load the video and start playback when ready.

        Args:
            video_url: URL of the video to play
        """
        pass

    @abstractmethod
    def pause(self):
        """Pause playback."""
        pass

    @abstractmethod
    def resume(self):
        """Resume playback."""
        pass

    @abstractmethod
    def release(self):
        """
        Release decoder and network resources.

        This method should not raise exceptions.
        """
        pass
