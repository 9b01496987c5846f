"""
Validation framework with Strategy pattern.

This module provides:
- Abstract Validator interface
- ValidationResult collecting errors and non-fatal warnings
- Field-level checks shared by concrete validators
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional
from urllib.parse import urlparse


@dataclass
class ValidationResult:
    """
    Result of data validation.

    Attributes:
        is_valid: Whether validation passed
        errors: List of error messages
        warnings: List of warning messages (non-fatal)
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> 'ValidationResult':
        """
        Add an error message and mark the result invalid.

        Returns:
            Self for method chaining
        """
        self.errors.append(message)
        self.is_valid = False
        return self

    def add_warning(self, message: str) -> 'ValidationResult':
        """
        Add a warning message.

        Returns:
            Self for method chaining
        """
        self.warnings.append(message)
        return self

    @property
    def has_errors(self) -> bool:
        """Check if there are errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are warnings."""
        return len(self.warnings) > 0

    def get_summary(self) -> str:
        """
        Get validation summary.

        Returns:
            Human-readable summary of validation results
        """
        if self.is_valid and not self.has_warnings:
            return "Validation passed"

        parts = []

        if self.has_errors:
            parts.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                parts.append(f"  - {error}")

        if self.has_warnings:
            parts.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                parts.append(f"  - {warning}")

        return "\n".join(parts)


class Validator(ABC):
    """
    Abstract base class for validators.

    Subclasses implement validate(); the helpers return an error message
    or None so callers decide whether a problem is an error or a warning.
    """

    @abstractmethod
    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with errors and warnings
        """
        pass

    def validate_required_fields(
        self,
        data: dict,
        required_fields: List[str]
    ) -> List[str]:
        """
        Validate that required fields exist and are not null.

        Returns:
            List of error messages for missing fields
        """
        errors = []
        for name in required_fields:
            if name not in data or data[name] is None:
                errors.append(f"Missing required field: {name}")
        return errors

    def validate_string_length(
        self,
        value: Any,
        field_name: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None
    ) -> Optional[str]:
        """
        Validate that value is a string within the given length bounds.

        Returns:
            Error message if invalid, None if valid
        """
        if not isinstance(value, str):
            return f"{field_name} must be a string, got {type(value).__name__}"

        length = len(value)

        if min_length is not None and length < min_length:
            return f"{field_name} must be at least {min_length} characters, got {length}"

        if max_length is not None and length > max_length:
            return f"{field_name} must be at most {max_length} characters, got {length}"

        return None

    def validate_url_format(
        self,
        url: str,
        field_name: str = "url"
    ) -> Optional[str]:
        """
        Validate that url is an absolute http(s) URL.

        Returns:
            Error message if invalid, None if valid
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return f"Invalid {field_name}: {url} (expected http or https URL)"
        return None
