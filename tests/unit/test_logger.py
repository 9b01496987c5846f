"""
Unit tests for logging utilities.
"""

import logging

import pytest

from artium_lessons.utils.logger import UrlQueryFilter, mask_notes, mask_url, setup_logger


class TestMasking:
    """Test cases for masking helpers."""

    def test_mask_url_drops_query(self):
        assert mask_url("https://cdn.example.com/v.mp4?token=abc&exp=1") == \
            "https://cdn.example.com/v.mp4?***"

    def test_mask_url_without_query(self):
        assert mask_url("https://cdn.example.com/v.mp4") == "https://cdn.example.com/v.mp4"

    def test_mask_url_inside_message(self):
        message = "Player prepared for https://cdn.example.com/v.mp4?sig=xyz now"

        assert mask_url(message) == "Player prepared for https://cdn.example.com/v.mp4?*** now"

    def test_mask_notes(self):
        assert mask_notes("practiced scales") == "16 chars"
        assert mask_notes("") == "empty"


class TestUrlQueryFilter:
    """Test cases for UrlQueryFilter."""

    def test_filter_masks_message(self):
        record = logging.LogRecord(
            "artium_lessons", logging.INFO, __file__, 1,
            "Fetching https://lessons.test/b/7JF5?key=secret", None, None
        )

        assert UrlQueryFilter().filter(record) is True
        assert record.msg == "Fetching https://lessons.test/b/7JF5?***"


class TestSetupLogger:
    """Test cases for setup_logger."""

    @pytest.fixture
    def logger_name(self, request):
        name = f"artium_lessons_test.{request.node.name}"
        yield name
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_console_handler(self, logger_name):
        logger = setup_logger(logger_name, level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].filters[0], UrlQueryFilter)

    def test_idempotent(self, logger_name):
        """Test repeated setup does not duplicate handlers."""
        setup_logger(logger_name)
        logger = setup_logger(logger_name)

        assert len(logger.handlers) == 1

    def test_file_handler(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "lessons.log"

        logger = setup_logger(logger_name, log_file=str(log_file))
        logger.info("Loaded 3 lessons from https://lessons.test/b/7JF5?key=secret")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        content = log_file.read_text(encoding="utf-8")
        assert "Loaded 3 lessons" in content
        assert "key=secret" not in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
