"""Unit tests for utility functions."""

import logging

import pytest

from ytscript.utils.logging import get_log_level, get_logger, set_log_level
from ytscript.utils.youtube_utils import extract_video_id, is_video_id, looks_like_url


class TestYouTubeIdUtils:
    """Tests for YouTube video id utility functions."""

    @pytest.mark.parametrize("url,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&feature=youtu.be", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/shorts/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("  dQw4w9WgXcQ  ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=short", None),
        ("https://example.com", None),
        ("invalid-url", None),
        ("", None),
        (None, None),
    ])
    def test_extract_video_id(self, url, expected):
        """Test YouTube video ID extraction with various inputs."""
        # Act
        result = extract_video_id(url)

        # Assert
        assert result == expected

    @pytest.mark.parametrize("value,expected", [
        ("dQw4w9WgXcQ", True),
        ("GJLlxj_dtq8", True),
        ("dQw4w9WgXc", False),
        ("dQw4w9WgXcQQ", False),
        ("dQw4w9WgX!Q", False),
        (None, False),
    ])
    def test_is_video_id(self, value, expected):
        assert is_video_id(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", True),
        ("http://youtu.be/dQw4w9WgXcQ", True),
        ("dQw4w9WgXcQ", False),
        ("www.youtube.com/watch?v=dQw4w9WgXcQ", False),
    ])
    def test_looks_like_url(self, value, expected):
        assert looks_like_url(value) is expected


class TestLogging:
    """Tests for logger configuration."""

    def test_logger_is_namespaced(self):
        logger = get_logger("tests")

        assert logger.name == "ytscript.tests"
        assert logger.propagate is False
        assert logger.handlers

    def test_logger_is_configured_once(self):
        first = get_logger("tests.once")
        second = get_logger("tests.once")

        assert first is second
        assert len(second.handlers) == 1

    def test_set_log_level(self):
        logger = get_logger("tests.level")

        set_log_level("DEBUG")

        assert logger.level == logging.DEBUG
        set_log_level(get_log_level())
