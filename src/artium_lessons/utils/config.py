"""
Configuration management with environment variables.

This module provides centralized configuration management
with validation and type safety.
"""

import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


DEFAULT_LESSONS_URL = "https://www.jsonkeeper.com/b/7JF5"


class Config:
    """
    Application configuration manager.

    Loads configuration from environment variables (and a .env file, if
    present) and provides validated access to configuration values.

    Attributes:
        lessons_url: Lesson endpoint URL
        fetch_timeout: Transport timeout for the lesson fetch, in seconds
        upload_step_interval: Delay between simulated upload steps, in seconds
        upload_step_percent: Progress increment of the simulated upload
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Examples:
        >>> config = Config()
        >>> if config.validate():
        ...     source = HttpLessonSource(config.lessons_url, config.fetch_timeout)
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def _validate_url(url: str, name: str) -> str:
        """
        Validate URL format and scheme.

        Args:
            url: URL to validate
            name: Variable name for error message

        Returns:
            Validated URL

        Raises:
            ValueError: If URL is invalid
        """
        parsed = urlparse(url)

        if not parsed.scheme:
            raise ValueError(f"{name} must include URL scheme (http/https)")

        if parsed.scheme not in ['http', 'https']:
            raise ValueError(f"{name} must use http or https scheme, got: {parsed.scheme}")

        if not parsed.netloc:
            raise ValueError(f"{name} must have a valid domain")

        return url

    @staticmethod
    def _read_number(name: str, default: str, cast=int):
        raw = os.getenv(name, default)
        try:
            return cast(raw)
        except ValueError:
            raise ValueError(f"{name} must be a number, got: {raw}")

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

        url = os.getenv("LESSONS_URL", DEFAULT_LESSONS_URL)
        self._lessons_url = self._validate_url(url, "LESSONS_URL")

        self._fetch_timeout = self._read_number("LESSONS_FETCH_TIMEOUT", "30", float)
        self._upload_step_interval_ms = self._read_number("UPLOAD_STEP_INTERVAL_MS", "100")
        self._upload_step_percent = self._read_number("UPLOAD_STEP_PERCENT", "5")

        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self._log_file = os.getenv("LOG_FILE") or None

    @property
    def lessons_url(self) -> str:
        """Get lesson endpoint URL."""
        return self._lessons_url

    @property
    def fetch_timeout(self) -> float:
        """Get lesson fetch timeout in seconds."""
        return self._fetch_timeout

    @property
    def upload_step_interval(self) -> float:
        """Get delay between simulated upload steps in seconds."""
        return self._upload_step_interval_ms / 1000

    @property
    def upload_step_percent(self) -> int:
        """Get progress increment of the simulated upload."""
        return self._upload_step_percent

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, if file logging is enabled."""
        return self._log_file

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all configuration is valid

        Raises:
            ValueError: If validation fails, listing every problem
        """
        errors = []

        if self._fetch_timeout <= 0:
            errors.append("LESSONS_FETCH_TIMEOUT must be positive")

        if self._upload_step_interval_ms < 0:
            errors.append("UPLOAD_STEP_INTERVAL_MS must not be negative")

        if self._upload_step_percent <= 0 or 100 % self._upload_step_percent != 0:
            errors.append("UPLOAD_STEP_PERCENT must be a positive divisor of 100")

        if self._log_level not in self.VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True


# Singleton instance
config = Config()
