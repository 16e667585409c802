"""Core transcript acquisition pipeline."""

from .config import get_config, reload_config, Config
from .errors import (
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
from .session import Session, HttpResponse
from .page_fetcher import fetch_video_page
from .manifest import extract_manifest, classify_missing_captions
from .catalog import build_catalog
from .resolver import (
    InclusionPolicy,
    resolve,
    find_transcript,
    find_generated_transcript,
    find_manually_created_transcript
)
from .translation import translate_handle
from .decoder import TranscriptParser, fetch_cues

__all__ = [
    'get_config',
    'reload_config',
    'Config',
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
    'Session',
    'HttpResponse',
    'fetch_video_page',
    'extract_manifest',
    'classify_missing_captions',
    'build_catalog',
    'InclusionPolicy',
    'resolve',
    'find_transcript',
    'find_generated_transcript',
    'find_manually_created_transcript',
    'translate_handle',
    'TranscriptParser',
    'fetch_cues'
]
