"""
Logging utilities.

This module provides logging setup with:
- Configurable log levels and output destinations
- Log rotation for file handlers
- Masking of URL query strings (signed media URLs) and practice notes
- Structured log format
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


URL_QUERY_PATTERN = re.compile(r'(https?://[^\s?#\'"]+)\?[^\s#\'"]*')


def mask_url(url: str) -> str:
    """
    Drop the query string from a URL for safe logging.

    Args:
        url: URL to mask

    Returns:
        URL with its query string replaced by "?***"

    Examples:
        >>> mask_url("https://cdn.example.com/v.mp4?token=abc")
        'https://cdn.example.com/v.mp4?***'
        >>> mask_url("https://cdn.example.com/v.mp4")
        'https://cdn.example.com/v.mp4'
    """
    return URL_QUERY_PATTERN.sub(r'\1?***', url)


def mask_notes(notes: str) -> str:
    """
    Describe practice notes without revealing them.

    Examples:
        >>> mask_notes("practiced scales")
        '16 chars'
        >>> mask_notes("")
        'empty'
    """
    if not notes:
        return "empty"
    return f"{len(notes)} chars"


class UrlQueryFilter(logging.Filter):
    """
    Logging filter that masks URL query strings.

    Media URLs served from a CDN often carry signed tokens in the query
    string; this filter removes them before output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask URL query strings in the log record.

        Returns:
            Always True (allows all records through after masking)
        """
        record.msg = mask_url(str(record.msg))
        return True


def setup_logger(
    name: str = "artium_lessons",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Args:
        name: Logger name (default: "artium_lessons")
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file for file output

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger()
        >>> logger.info("Session started")

        >>> logger = setup_logger(
        ...     level=logging.DEBUG,
        ...     log_file="output/logs/lessons.log"
        ... )
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(UrlQueryFilter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(UrlQueryFilter())
        logger.addHandler(file_handler)

    return logger
