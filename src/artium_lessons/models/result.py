"""
Result<T> wrapper for component boundaries.

Lesson fetching, practice submission and player preparation all report
their outcome through a Result instead of raising, so the session store
can turn every failure into publishable state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar('T')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation that may succeed or fail.

    Attributes:
        status: SUCCESS or FAILURE
        value: Payload on success (None on failure)
        error: Exception describing the failure, if one was classified
        message: Human-readable description of the outcome

    Examples:
        >>> result = await source.fetch()
        >>> if result.is_success:
        ...     lessons = result.value
        ... else:
        ...     logger.warning(f"Fetch failed: {result.message}")

        >>> Result.failure("Practice upload failed").unwrap_or(None)
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents failure."""
        return self.status == ResultStatus.FAILURE

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """
        Create a successful result.

        Args:
            value: The payload
            message: Optional description

        Returns:
            Result with SUCCESS status
        """
        return cls(status=ResultStatus.SUCCESS, value=value, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """
        Create a failure result.

        Args:
            message: Description of what went wrong
            error: Optional exception classifying the failure

        Returns:
            Result with FAILURE status
        """
        return cls(status=ResultStatus.FAILURE, message=message, error=error)

    def unwrap(self) -> T:
        """
        Return the payload of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot unwrap failure result: {self.message}")
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the payload, or ``default`` if the result is a failure."""
        return self.value if self.is_success else default
