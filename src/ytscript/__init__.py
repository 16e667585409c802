"""
ytscript

Fetches the transcripts of YouTube videos: lists the available caption tracks,
selects one by language preference, translates it and decodes it into timed
lines.
"""

__version__ = "0.1.0"

from .api import YouTubeTranscriptApi
from .core.errors import (
    ErrorKind,
    CouldNotRetrieveTranscript,
    YouTubeRequestFailed,
    InvalidVideoId,
    TooManyRequests,
    VideoUnavailable,
    TranscriptsDisabled,
    NoTranscriptAvailable,
    NotTranslatable,
    TranslationLanguageNotAvailable,
    CookiePathInvalid,
    CookiesInvalid,
    FailedToCreateConsentCookie,
    NoTranscriptFound
)
from .core.resolver import InclusionPolicy
from .models import BatchResult, TranscriptCatalog, TranscriptHandle, TranscriptLine, TranslationLanguage
from .utils.logging import get_logger

__all__ = [
    # API
    'YouTubeTranscriptApi',
    'InclusionPolicy',

    # Models
    'BatchResult',
    'TranscriptCatalog',
    'TranscriptHandle',
    'TranscriptLine',
    'TranslationLanguage',

    # Errors
    'ErrorKind',
    'CouldNotRetrieveTranscript',
    'YouTubeRequestFailed',
    'InvalidVideoId',
    'TooManyRequests',
    'VideoUnavailable',
    'TranscriptsDisabled',
    'NoTranscriptAvailable',
    'NotTranslatable',
    'TranslationLanguageNotAvailable',
    'CookiePathInvalid',
    'CookiesInvalid',
    'FailedToCreateConsentCookie',
    'NoTranscriptFound',

    # Logging
    'get_logger'
]

# Set up package-level logger
logger = get_logger(__name__)
