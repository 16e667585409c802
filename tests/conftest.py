"""Pytest configuration and fixtures for the ytscript test suite."""

import os
import sys

import pytest

# Add the project root and the src directory to path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, PROJECT_ROOT)
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from ytscript.core.config import reload_config

from tests.mocks.mock_session import MockSession
from tests.mocks.youtube_pages import (
    TIMED_TEXT,
    VIDEO_ID,
    caption_renderer,
    caption_track,
    player_captions,
    translation_language,
    watch_page,
)

ENV_VARS = (
    "YT_HTTP_TIMEOUT",
    "YT_ACCEPT_LANGUAGE",
    "YT_USER_AGENT",
    "YT_HTTP_PROXY",
    "YT_HTTPS_PROXY",
    "YT_COOKIES_PATH",
    "YT_DEFAULT_LANGUAGES",
    "YT_PRESERVE_FORMATTING",
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without any network access")
    config.addinivalue_line("markers", "integration: full pipeline tests against scripted HTTP replies")


def pytest_collection_modifyitems(config, items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.path)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against the built-in defaults, not the caller's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield reload_config()


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def mock_session():
    """Scripted session, queue replies with ``respond``."""
    return MockSession()


@pytest.fixture
def english_renderer():
    """A single translatable, manually created English track."""
    return caption_renderer(
        [caption_track("en", "English")],
        [translation_language("de", "German"), translation_language("fr", "French")],
    )


@pytest.fixture
def mixed_renderer():
    """Manual English and German tracks plus a generated English track."""
    return caption_renderer(
        [
            caption_track("en", "English"),
            caption_track("de", "German", translatable=False),
            caption_track("en", "English (auto-generated)", kind="asr"),
        ],
        [translation_language("fr", "French")],
    )


@pytest.fixture
def english_page(english_renderer):
    return watch_page(player_captions(english_renderer))


@pytest.fixture
def timed_text():
    return TIMED_TEXT


@pytest.fixture
def cookie_file(tmp_path):
    """A cookie file holding a consent cookie and a preferences cookie."""
    path = tmp_path / "cookies.txt"
    path.write_text(
        "CONSENT=YES+cb.20210328-17-p0.de+FX+119; Domain=.youtube.com; Path=/\n"
        "\n"
        "PREF=tz.Europe.Berlin; Domain=.youtube.com; Path=/; Secure\n",
        encoding="utf-8",
    )
    return path
