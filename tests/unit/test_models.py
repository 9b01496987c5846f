"""
Unit tests for lesson records and view states.
"""

from datetime import datetime

import pytest

from artium_lessons.models.lesson import Lesson, PracticeSubmission
from artium_lessons.models.state import (
    LessonListState,
    LessonListStatus,
    UploadState,
    UploadStatus,
)


@pytest.fixture
def scales_payload():
    """Lesson entry as returned by the endpoint."""
    return {
        "mentor_name": "Jane",
        "lesson_title": "Scales",
        "video_thumbnail_url": "https://cdn.example.com/scales.jpg",
        "lesson_image_url": "https://cdn.example.com/scales-cover.jpg",
        "video_url": "https://cdn.example.com/scales.mp4",
    }


class TestLesson:
    """Test cases for Lesson."""

    def test_from_payload(self, scales_payload):
        """Test decoding an endpoint entry."""
        lesson = Lesson.from_payload(scales_payload)

        assert lesson.mentor_name == "Jane"
        assert lesson.title == "Scales"
        assert lesson.thumbnail_url == "https://cdn.example.com/scales.jpg"
        assert lesson.image_url == "https://cdn.example.com/scales-cover.jpg"
        assert lesson.video_url == "https://cdn.example.com/scales.mp4"

    def test_to_payload_restores_endpoint_keys(self, scales_payload):
        """Test converting back to the endpoint shape."""
        assert Lesson.from_payload(scales_payload).to_payload() == scales_payload

    def test_from_payload_missing_field(self, scales_payload):
        """Test missing fields are reported."""
        del scales_payload["video_url"]

        with pytest.raises(KeyError):
            Lesson.from_payload(scales_payload)

    def test_lesson_is_immutable(self, scales_payload):
        """Test lessons cannot be modified."""
        lesson = Lesson.from_payload(scales_payload)

        with pytest.raises(AttributeError):
            lesson.title = "Arpeggios"


class TestPracticeSubmission:
    """Test cases for PracticeSubmission."""

    @pytest.fixture
    def lesson(self, scales_payload):
        return Lesson.from_payload(scales_payload)

    def test_has_notes(self, lesson):
        """Test blank notes are treated as absent."""
        stamp = datetime(2026, 10, 19, 15, 4)

        assert PracticeSubmission(lesson, "slow tempo", stamp).has_notes
        assert not PracticeSubmission(lesson, "   ", stamp).has_notes
        assert not PracticeSubmission(lesson, "", stamp).has_notes

    def test_formatted_timestamp(self, lesson):
        """Test display format of the submission time."""
        submission = PracticeSubmission(lesson, "", datetime(2026, 10, 19, 15, 4))

        assert submission.formatted_timestamp == "Oct 19, 2026 at 03:04 PM"

    def test_to_dict(self, lesson):
        """Test dictionary conversion."""
        submission = PracticeSubmission(lesson, "practiced scales", datetime(2026, 10, 19, 9, 30))

        assert submission.to_dict() == {
            "lesson_title": "Scales",
            "mentor_name": "Jane",
            "notes": "practiced scales",
            "timestamp": "2026-10-19T09:30:00",
        }


class TestLessonListState:
    """Test cases for LessonListState."""

    def test_loading(self):
        state = LessonListState.loading()

        assert state.status == LessonListStatus.LOADING
        assert state.is_loading
        assert state.lessons == ()
        assert state.message is None

    def test_loaded_keeps_order(self, scales_payload):
        """Test loaded lessons keep their order and become a tuple."""
        first = Lesson.from_payload(scales_payload)
        second = Lesson("Ravi", "Arpeggios", "t", "i", "v")

        state = LessonListState.loaded([second, first])

        assert state.is_loaded
        assert state.lessons == (second, first)

    def test_failed(self):
        state = LessonListState.failed("offline")

        assert state.is_failed
        assert not state.is_loaded
        assert state.message == "offline"


class TestUploadState:
    """Test cases for UploadState."""

    def test_idle(self):
        state = UploadState.idle()

        assert state.status == UploadStatus.IDLE
        assert state.is_idle
        assert not state.is_terminal

    def test_in_progress(self):
        state = UploadState.in_progress(35)

        assert state.is_in_progress
        assert state.percent == 35

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_in_progress_rejects_out_of_range(self, percent):
        """Test progress outside 0..100 is rejected."""
        with pytest.raises(ValueError, match="between 0 and 100"):
            UploadState.in_progress(percent)

    def test_terminal_states(self):
        assert UploadState.succeeded().is_terminal
        assert UploadState.failed().is_terminal
        assert UploadState.succeeded() != UploadState.failed()

    def test_states_compare_by_value(self):
        """Test equal states compare equal."""
        assert UploadState.in_progress(5) == UploadState.in_progress(5)
        assert UploadState.idle() == UploadState.idle()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
