"""
HTTP lesson source.

Fetches the lesson document with a single GET and decodes it into Lesson
records. Every failure, whatever its cause, is reported as FetchError.
"""

import logging
from typing import Any, List, Optional

import httpx

from ..models.lesson import Lesson
from ..models.result import Result
from ..validation.lesson_validator import LessonPayloadValidator
from .interfaces import FetchError, LessonSource


logger = logging.getLogger(__name__)


class HttpLessonSource(LessonSource):
    """
    Lesson source backed by an HTTP endpoint.

    Examples:
        >>> source = HttpLessonSource("https://www.jsonkeeper.com/b/7JF5")
        >>> result = await source.fetch()
        >>> if result.is_success:
        ...     print(f"{len(result.value)} lessons")

        >>> # Route requests through a custom transport (tests)
        >>> client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        >>> source = HttpLessonSource("https://lessons.test/", client=client)
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        validator: Optional[LessonPayloadValidator] = None
    ):
        """
        Initialize the source.

        Args:
            url: Lesson endpoint URL
            timeout: Transport timeout in seconds (ignored for injected clients)
            client: Optional shared client; a short-lived one is built per fetch otherwise
            validator: Payload validator (default: LessonPayloadValidator)
        """
        self.url = url
        self.timeout = timeout
        self._client = client
        self.validator = validator or LessonPayloadValidator()

    async def fetch(self) -> Result[List[Lesson]]:
        """
        Fetch and decode the lesson list.

        Returns:
            Result with lessons in server order, or a failure carrying FetchError
        """
        try:
            payload = await self._get_json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Lesson endpoint returned {e.response.status_code}")
            return Result.failure(
                f"Lesson endpoint returned {e.response.status_code}",
                FetchError(str(e))
            )
        except httpx.RequestError as e:
            logger.error(f"Lesson request failed: {e!r}")
            return Result.failure("Lesson request failed", FetchError(str(e)))
        except ValueError as e:
            logger.error(f"Lesson response is not valid JSON: {e}")
            return Result.failure("Lesson response is not valid JSON", FetchError(str(e)))

        validation = self.validator.validate(payload)
        if not validation.is_valid:
            summary = validation.get_summary()
            logger.error(f"Lesson response failed validation:\n{summary}")
            return Result.failure("Lesson response failed validation", FetchError(summary))

        for warning in validation.warnings:
            logger.warning(f"Lesson response: {warning}")

        lessons = [Lesson.from_payload(item) for item in payload["lessons"]]
        logger.info(f"Fetched {len(lessons)} lessons")
        return Result.success(lessons, f"Fetched {len(lessons)} lessons")

    async def _get_json(self) -> Any:
        """Perform the GET and decode the body."""
        logger.debug(f"Fetching lessons from {self.url}")

        if self._client is not None:
            response = await self._client.get(self.url)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url)

        response.raise_for_status()
        return response.json()
