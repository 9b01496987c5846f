"""
Lesson sources and playback interfaces.

Usage:
    >>> from artium_lessons.sources import HttpLessonSource
    >>> source = HttpLessonSource("https://www.jsonkeeper.com/b/7JF5")
    >>> result = await source.fetch()
"""

from .http_source import HttpLessonSource
from .interfaces import FetchError, LessonSource, MediaPlayer

__all__ = [
    "FetchError",
    "HttpLessonSource",
    "LessonSource",
    "MediaPlayer",
]
