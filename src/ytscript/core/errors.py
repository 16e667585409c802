"""Failure conditions raised while retrieving a transcript."""

from enum import Enum
from typing import Iterable, List, Union

from .config import WATCH_URL


class ErrorKind(str, Enum):
    """Stable identifiers for every failure condition."""
    COULD_NOT_RETRIEVE_TRANSCRIPT = "could_not_retrieve_transcript"
    YOUTUBE_REQUEST_FAILED = "youtube_request_failed"
    INVALID_VIDEO_ID = "invalid_video_id"
    TOO_MANY_REQUESTS = "too_many_requests"
    VIDEO_UNAVAILABLE = "video_unavailable"
    TRANSCRIPTS_DISABLED = "transcripts_disabled"
    NO_TRANSCRIPT_AVAILABLE = "no_transcript_available"
    NOT_TRANSLATABLE = "not_translatable"
    TRANSLATION_LANGUAGE_NOT_AVAILABLE = "translation_language_not_available"
    COOKIE_PATH_INVALID = "cookie_path_invalid"
    COOKIES_INVALID = "cookies_invalid"
    FAILED_TO_CREATE_CONSENT_COOKIE = "failed_to_create_consent_cookie"
    NO_TRANSCRIPT_FOUND = "no_transcript_found"


class CouldNotRetrieveTranscript(Exception):
    """
    Raised if a transcript could not be retrieved.

    Every subclass carries the video id, a fixed ``kind`` and a human-readable
    ``cause``.
    """
    kind = ErrorKind.COULD_NOT_RETRIEVE_TRANSCRIPT

    ERROR_MESSAGE = "\nCould not retrieve a transcript for the video {video_url}!"
    CAUSE_MESSAGE_INTRO = " This is most likely caused by:\n\n{cause}"
    CAUSE_MESSAGE = ""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(self._build_error_message())

    @property
    def cause(self) -> str:
        return self.CAUSE_MESSAGE

    def _build_error_message(self) -> str:
        error_message = self.ERROR_MESSAGE.format(video_url=WATCH_URL.format(video_id=self.video_id))
        cause = self.cause
        if cause:
            error_message += self.CAUSE_MESSAGE_INTRO.format(cause=cause)
        return error_message


class YouTubeRequestFailed(CouldNotRetrieveTranscript):
    kind = ErrorKind.YOUTUBE_REQUEST_FAILED
    CAUSE_MESSAGE = "Request to YouTube failed: {reason}"

    def __init__(self, video_id: str, http_error: Union[Exception, str]):
        self.reason = str(http_error)
        super().__init__(video_id)

    @property
    def cause(self) -> str:
        return self.CAUSE_MESSAGE.format(reason=self.reason)


class VideoUnavailable(CouldNotRetrieveTranscript):
    kind = ErrorKind.VIDEO_UNAVAILABLE
    CAUSE_MESSAGE = "The video is no longer available"


class InvalidVideoId(CouldNotRetrieveTranscript):
    kind = ErrorKind.INVALID_VIDEO_ID
    CAUSE_MESSAGE = (
        "You provided an invalid video id. Make sure you are using the video id and NOT the url!\n\n"
        'Do NOT run: `YouTubeTranscriptApi().get_transcript("https://www.youtube.com/watch?v=1234")`\n'
        'Instead run: `YouTubeTranscriptApi().get_transcript("1234")`'
    )


class TooManyRequests(CouldNotRetrieveTranscript):
    kind = ErrorKind.TOO_MANY_REQUESTS
    CAUSE_MESSAGE = (
        "YouTube is receiving too many requests from this IP and now requires solving a captcha to continue. "
        "One of the following things can be done to work around this:\n"
        "- Manually solve the captcha in a browser and export the cookie, then pass it with --cookies\n"
        "- Use a different IP address\n"
        "- Wait until the ban on your IP has been lifted"
    )


class TranscriptsDisabled(CouldNotRetrieveTranscript):
    kind = ErrorKind.TRANSCRIPTS_DISABLED
    CAUSE_MESSAGE = "Subtitles are disabled for this video"


class NoTranscriptAvailable(CouldNotRetrieveTranscript):
    kind = ErrorKind.NO_TRANSCRIPT_AVAILABLE
    CAUSE_MESSAGE = "No transcripts are available for this video"


class NotTranslatable(CouldNotRetrieveTranscript):
    kind = ErrorKind.NOT_TRANSLATABLE
    CAUSE_MESSAGE = "The requested language is not translatable"


class TranslationLanguageNotAvailable(CouldNotRetrieveTranscript):
    kind = ErrorKind.TRANSLATION_LANGUAGE_NOT_AVAILABLE
    CAUSE_MESSAGE = "The requested translation language is not available"


class CookiePathInvalid(CouldNotRetrieveTranscript):
    kind = ErrorKind.COOKIE_PATH_INVALID
    CAUSE_MESSAGE = "The provided cookie file was unable to be loaded"


class CookiesInvalid(CouldNotRetrieveTranscript):
    kind = ErrorKind.COOKIES_INVALID
    CAUSE_MESSAGE = "The cookies provided are not valid (may have expired)"


class FailedToCreateConsentCookie(CouldNotRetrieveTranscript):
    kind = ErrorKind.FAILED_TO_CREATE_CONSENT_COOKIE
    CAUSE_MESSAGE = "Failed to automatically give consent to saving cookies"


class NoTranscriptFound(CouldNotRetrieveTranscript):
    kind = ErrorKind.NO_TRANSCRIPT_FOUND
    CAUSE_MESSAGE = (
        "No transcripts were found for any of the requested language codes: {requested_language_codes}\n\n"
        "{transcript_data}"
    )

    def __init__(self, video_id: str, requested_language_codes: Iterable[str], transcript_data: str):
        self.requested_language_codes: List[str] = list(requested_language_codes)
        self.transcript_data = transcript_data
        super().__init__(video_id)

    @property
    def cause(self) -> str:
        return self.CAUSE_MESSAGE.format(
            requested_language_codes=", ".join(self.requested_language_codes),
            transcript_data=self.transcript_data,
        )
