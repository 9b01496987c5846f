"""
Unit tests for validation layer.
"""

import pytest

from artium_lessons.validation.lesson_validator import LessonPayloadValidator
from artium_lessons.validation.validators import ValidationResult


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_valid_result(self):
        """Test creating a valid result."""
        result = ValidationResult(is_valid=True)

        assert result.is_valid
        assert not result.has_errors
        assert not result.has_warnings

    def test_add_error(self):
        """Test adding errors."""
        result = ValidationResult(is_valid=True)
        result.add_error("First error").add_error("Second error")

        assert not result.is_valid
        assert len(result.errors) == 2

    def test_add_warning(self):
        """Test warnings don't affect validity."""
        result = ValidationResult(is_valid=True)
        result.add_warning("Warning message")

        assert result.is_valid
        assert result.has_warnings

    def test_get_summary_valid(self):
        """Test summary for valid result."""
        assert ValidationResult(is_valid=True).get_summary() == "Validation passed"

    def test_get_summary_with_errors_and_warnings(self):
        """Test summary lists errors and warnings."""
        result = ValidationResult(is_valid=True)
        result.add_error("Error 1")
        result.add_warning("Warning 1")

        summary = result.get_summary()

        assert "Errors (1):" in summary
        assert "Error 1" in summary
        assert "Warnings (1):" in summary


class TestLessonPayloadValidator:
    """Test cases for LessonPayloadValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return LessonPayloadValidator()

    @pytest.fixture
    def valid_lesson(self):
        """Create valid lesson entry."""
        return {
            "mentor_name": "Jane",
            "lesson_title": "Scales",
            "video_thumbnail_url": "https://cdn.example.com/scales.jpg",
            "lesson_image_url": "https://cdn.example.com/scales-cover.jpg",
            "video_url": "https://cdn.example.com/scales.mp4",
        }

    def test_valid_document(self, validator, valid_lesson):
        """Test validation of a valid document."""
        result = validator.validate({"lessons": [valid_lesson]})

        assert result.is_valid
        assert not result.has_warnings

    def test_empty_lesson_list_is_valid(self, validator):
        """Test an empty lesson list is accepted."""
        assert validator.validate({"lessons": []}).is_valid

    def test_non_object_document(self, validator):
        """Test a JSON array at the top level is rejected."""
        result = validator.validate([])

        assert not result.is_valid
        assert "JSON object" in result.errors[0]

    def test_missing_lessons_key(self, validator):
        """Test a document without a lessons list is rejected."""
        result = validator.validate({"items": []})

        assert not result.is_valid
        assert "'lessons' list" in result.errors[0]

    def test_missing_field(self, validator, valid_lesson):
        """Test missing lesson fields are reported with their index."""
        del valid_lesson["mentor_name"]

        result = validator.validate({"lessons": [valid_lesson]})

        assert not result.is_valid
        assert "lessons[0]: Missing required field: mentor_name" in result.errors

    def test_non_string_field(self, validator, valid_lesson):
        """Test non-string values are rejected."""
        valid_lesson["lesson_title"] = 42

        result = validator.validate({"lessons": [valid_lesson]})

        assert not result.is_valid
        assert any("lesson_title must be a string" in e for e in result.errors)

    def test_empty_title(self, validator, valid_lesson):
        """Test empty strings are rejected."""
        valid_lesson["lesson_title"] = ""

        result = validator.validate({"lessons": [valid_lesson]})

        assert not result.is_valid

    def test_long_title_is_accepted(self, validator, valid_lesson):
        """Test titles are not capped in length."""
        valid_lesson["lesson_title"] = "S" * 500

        result = validator.validate({"lessons": [valid_lesson]})

        assert result.is_valid
        assert not result.has_warnings

    def test_non_object_entry(self, validator):
        """Test list entries must be objects."""
        result = validator.validate({"lessons": ["Scales"]})

        assert not result.is_valid
        assert "lessons[0] must be an object" in result.errors[0]

    def test_relative_url_is_warning(self, validator, valid_lesson):
        """Test non-http URLs only produce a warning."""
        valid_lesson["video_url"] = "videos/scales.mp4"

        result = validator.validate({"lessons": [valid_lesson]})

        assert result.is_valid
        assert result.has_warnings
        assert "video_url" in result.warnings[0]

    def test_duplicate_title_is_warning(self, validator, valid_lesson):
        """Test duplicate titles only produce a warning."""
        result = validator.validate({"lessons": [valid_lesson, dict(valid_lesson)]})

        assert result.is_valid
        assert "Duplicate lesson title: Scales" in result.warnings


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
