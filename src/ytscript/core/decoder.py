"""Fetching and decoding of timed-text subtitle documents."""

import re
from html import unescape
from typing import List, Pattern
from xml.etree.ElementTree import Element, ParseError, tostring
from xml.parsers.expat import ExpatError

from defusedxml import ElementTree

from ..models import TranscriptHandle, TranscriptLine
from ..utils.logging import get_logger
from .config import get_config
from .errors import YouTubeRequestFailed
from .session import Session

logger = get_logger("decoder")


class TranscriptParser:
    """Turns a timed-text XML document into transcript lines."""

    FORMATTING_TAGS = ("strong", "em", "b", "i", "mark", "small", "del", "ins", "sub", "sup")

    def __init__(self, preserve_formatting: bool = False):
        self.preserve_formatting = preserve_formatting
        self._html_regex = self._get_html_regex(preserve_formatting)

    def _get_html_regex(self, preserve_formatting: bool) -> Pattern[str]:
        if preserve_formatting:
            formats_regex = "|".join(self.FORMATTING_TAGS)
            return re.compile(r"<(?!/?(?:" + formats_regex + r")\b)[^>]*>", re.IGNORECASE)
        return re.compile(r"<[^>]*>", re.IGNORECASE)

    def parse(self, raw_data: str) -> List[TranscriptLine]:
        root = ElementTree.fromstring(raw_data)
        return [
            TranscriptLine(
                text=self._html_regex.sub("", unescape(_inner_markup(element))),
                start=float(element.attrib.get("start", "0.0")),
                duration=float(element.attrib.get("dur", "0.0")),
            )
            for element in root.iter("text")
        ]


def _inner_markup(element: Element) -> str:
    # Inline tags may arrive escaped inside the text or as literal child elements.
    parts = [element.text or ""]
    parts.extend(tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


def fetch_cues(session: Session, handle: TranscriptHandle, preserve_formatting: bool = False) -> List[TranscriptLine]:
    """
    Download and decode the subtitle document a handle points at.

    Args:
        session: Session used for the request
        handle: Transcript to fetch
        preserve_formatting: Keep inline formatting tags such as <b> and <i>

    Returns:
        Transcript lines in document order

    Raises:
        YouTubeRequestFailed: If the document cannot be downloaded or decoded
    """
    response = session.get(handle.url, video_id=handle.video_id)
    if not response.ok:
        logger.info(
            f"Timed text request for {handle.video_id} returned {response.status}, "
            f"retrying with an explicit Accept-Language header"
        )
        response = session.get(
            handle.url,
            video_id=handle.video_id,
            headers={"Accept-Language": get_config().network.accept_language},
        )
        if not response.ok:
            raise YouTubeRequestFailed(handle.video_id, f"{response.status} response from {handle.url}")

    try:
        lines = TranscriptParser(preserve_formatting=preserve_formatting).parse(response.text)
    except (ParseError, ExpatError, ValueError) as e:
        logger.warning(f"Timed text for {handle.video_id} ({handle.language_code}) could not be decoded: {e}")
        raise YouTubeRequestFailed(handle.video_id, f"Could not decode timed text from {handle.url}: {e}") from e

    logger.debug(f"Decoded {len(lines)} lines for {handle.video_id} ({handle.language_code})")
    return lines
