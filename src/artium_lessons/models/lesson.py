"""
Lesson and practice submission records.

Lessons arrive from the lesson endpoint as JSON objects; PracticeSubmission
records are created by the session store when a simulated upload succeeds.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


# JSON key used by the lesson endpoint for each Lesson attribute
PAYLOAD_KEYS = {
    "mentor_name": "mentor_name",
    "title": "lesson_title",
    "thumbnail_url": "video_thumbnail_url",
    "image_url": "lesson_image_url",
    "video_url": "video_url",
}

TIMESTAMP_FORMAT = "%b %d, %Y at %I:%M %p"


@dataclass(frozen=True)
class Lesson:
    """
    A single mentor-led video lesson.

    The title doubles as the lesson's identity for lookup and navigation.
    Uniqueness within a fetch is assumed, not enforced.

    Attributes:
        mentor_name: Name of the mentor presenting the lesson
        title: Lesson title
        thumbnail_url: Video thumbnail image
        image_url: Cover image
        video_url: Playable video

    Examples:
        >>> lesson = Lesson.from_payload({
        ...     "mentor_name": "Jane",
        ...     "lesson_title": "Scales",
        ...     "video_thumbnail_url": "https://cdn.example.com/scales.jpg",
        ...     "lesson_image_url": "https://cdn.example.com/scales-cover.jpg",
        ...     "video_url": "https://cdn.example.com/scales.mp4"
        ... })
        >>> lesson.title
        'Scales'
    """

    mentor_name: str
    title: str
    thumbnail_url: str
    image_url: str
    video_url: str

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> 'Lesson':
        """
        Build a Lesson from one entry of the endpoint's ``lessons`` list.

        Raises:
            KeyError: If a field is missing
        """
        return cls(**{attr: data[key] for attr, key in PAYLOAD_KEYS.items()})

    def to_payload(self) -> Dict[str, str]:
        """Convert back to the endpoint's JSON shape."""
        return {key: getattr(self, attr) for attr, key in PAYLOAD_KEYS.items()}


@dataclass(frozen=True)
class PracticeSubmission:
    """
    A practice attempt recorded after a successful upload.

    The lesson is shared with the loaded lesson list, not copied.

    Attributes:
        lesson: Lesson that was practiced
        notes: Free-text notes (may be empty)
        timestamp: Wall-clock time the upload succeeded
    """

    lesson: Lesson
    notes: str
    timestamp: datetime

    @property
    def has_notes(self) -> bool:
        """True when the notes contain more than whitespace."""
        return bool(self.notes.strip())

    @property
    def formatted_timestamp(self) -> str:
        """Timestamp as shown in the practice history (e.g. "Oct 19, 2026 at 03:04 PM")."""
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary with lesson title, mentor, notes and ISO timestamp
        """
        return {
            "lesson_title": self.lesson.title,
            "mentor_name": self.lesson.mentor_name,
            "notes": self.notes,
            "timestamp": self.timestamp.isoformat(),
        }
