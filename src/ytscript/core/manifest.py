"""
Caption manifest extraction from a watch page.

The manifest is embedded in the page's player response and has no published
schema, so failures are classified from textual signals in the page.
"""

import json
from typing import Callable, Tuple, Type

from ..models import CaptionManifest
from ..utils.logging import get_logger
from ..utils.youtube_utils import looks_like_url
from .errors import (
    CouldNotRetrieveTranscript,
    InvalidVideoId,
    NoTranscriptAvailable,
    TooManyRequests,
    TranscriptsDisabled,
    VideoUnavailable,
)

logger = get_logger("manifest")

CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_BOUNDARY = ',"videoDetails'
RECAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'

Signal = Callable[[str, str], bool]

# Ordered: several signals can be present on the same page, the first match wins.
MISSING_CAPTIONS_SIGNALS: Tuple[Tuple[Signal, Type[CouldNotRetrieveTranscript]], ...] = (
    (lambda html, video_id: looks_like_url(video_id), InvalidVideoId),
    (lambda html, video_id: RECAPTCHA_MARKER in html, TooManyRequests),
    (lambda html, video_id: PLAYABILITY_MARKER not in html, VideoUnavailable),
)


def classify_missing_captions(html: str, video_id: str) -> CouldNotRetrieveTranscript:
    """Return the error describing why a page carries no captions object."""
    for signal, error_class in MISSING_CAPTIONS_SIGNALS:
        if signal(html, video_id):
            return error_class(video_id)
    return TranscriptsDisabled(video_id)


def extract_manifest(html: str, video_id: str) -> CaptionManifest:
    """
    Carve the caption manifest out of a watch page.

    Args:
        html: Unescaped watch page body
        video_id: YouTube video ID the page was fetched for

    Returns:
        The decoded CaptionManifest

    Raises:
        CouldNotRetrieveTranscript: The subclass matching the page's signals
    """
    splitted_html = html.split(CAPTIONS_MARKER)
    if len(splitted_html) <= 1:
        error = classify_missing_captions(html, video_id)
        logger.info(f"No captions object for {video_id}: {error.kind.value}")
        raise error

    raw_captions = splitted_html[1].split(VIDEO_DETAILS_BOUNDARY)[0].replace("\n", "")
    try:
        captions_json = json.loads(raw_captions)
    except ValueError as e:
        logger.warning(f"Captions object for {video_id} is not valid JSON: {e}")
        raise TranscriptsDisabled(video_id) from e

    renderer = captions_json.get("playerCaptionsTracklistRenderer") if isinstance(captions_json, dict) else None
    if not renderer:
        raise TranscriptsDisabled(video_id)

    if not renderer.get("captionTracks"):
        raise NoTranscriptAvailable(video_id)

    manifest = CaptionManifest.from_json(renderer)
    logger.debug(
        f"Manifest for {video_id}: {len(manifest.caption_tracks)} tracks, "
        f"{len(manifest.translation_languages)} translation languages"
    )
    return manifest
