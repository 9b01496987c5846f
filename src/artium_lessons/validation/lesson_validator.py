"""
Lesson payload validator.

Checks the document returned by the lesson endpoint before it is decoded
into Lesson records.
"""

from typing import Any, Dict, List

from ..models.lesson import PAYLOAD_KEYS
from .validators import Validator, ValidationResult


class LessonPayloadValidator(Validator):
    """
    Validator for the lesson endpoint response.

    Validates:
    - Top-level shape (object with a ``lessons`` list)
    - Required fields of every lesson (non-empty strings)
    - URL fields (warning only, the player decides what it can open)
    - Title uniqueness (warning only, titles are assumed unique)

    Examples:
        >>> validator = LessonPayloadValidator()
        >>> result = validator.validate({"lessons": []})
        >>> result.is_valid
        True
    """

    URL_FIELDS = ["video_thumbnail_url", "lesson_image_url", "video_url"]

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate a lesson endpoint document.

        Args:
            data: Decoded JSON document

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        if not isinstance(data, dict):
            return result.add_error(
                f"Response must be a JSON object, got {type(data).__name__}"
            )

        lessons = data.get("lessons")
        if not isinstance(lessons, list):
            return result.add_error("Response must contain a 'lessons' list")

        seen_titles = set()
        for index, lesson in enumerate(lessons):
            for error in self._validate_lesson(lesson, index):
                result.add_error(error)

            if isinstance(lesson, dict):
                self._check_urls(lesson, index, result)

                title = lesson.get("lesson_title")
                if isinstance(title, str):
                    if title in seen_titles:
                        result.add_warning(f"Duplicate lesson title: {title}")
                    seen_titles.add(title)

        return result

    def _validate_lesson(self, lesson: Any, index: int) -> List[str]:
        """Return errors for one entry of the lessons list."""
        if not isinstance(lesson, dict):
            return [f"lessons[{index}] must be an object, got {type(lesson).__name__}"]

        errors = [
            f"lessons[{index}]: {error}"
            for error in self.validate_required_fields(lesson, list(PAYLOAD_KEYS.values()))
        ]
        if errors:
            return errors

        for key in PAYLOAD_KEYS.values():
            error = self.validate_string_length(lesson[key], key, min_length=1)
            if error:
                errors.append(f"lessons[{index}]: {error}")

        return errors

    def _check_urls(self, lesson: Dict[str, Any], index: int, result: ValidationResult):
        for key in self.URL_FIELDS:
            value = lesson.get(key)
            if isinstance(value, str) and value:
                warning = self.validate_url_format(value, key)
                if warning:
                    result.add_warning(f"lessons[{index}]: {warning}")
