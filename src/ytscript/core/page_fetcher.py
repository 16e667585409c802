"""Watch page retrieval with consent negotiation."""

import re
from html import unescape

from ..utils.logging import get_logger
from .config import WATCH_URL, YOUTUBE_ORIGIN, get_config
from .errors import FailedToCreateConsentCookie, YouTubeRequestFailed
from .session import Session

logger = get_logger("page_fetcher")

CONSENT_FORM_MARKER = 'action="https://consent.youtube.com/s"'
CONSENT_TOKEN_PATTERN = re.compile(r'name="v" value="(.*?)"')


def fetch_video_page(session: Session, video_id: str) -> str:
    """
    Fetch the watch page of a video, giving consent once if YouTube asks for it.

    Args:
        session: Session owning the cookie store for this lookup
        video_id: YouTube video ID

    Returns:
        HTML-unescaped page body

    Raises:
        FailedToCreateConsentCookie: If the consent page cannot be passed
        YouTubeRequestFailed: If the page request fails
    """
    html = _fetch_html(session, video_id)
    if CONSENT_FORM_MARKER in html:
        logger.info(f"Consent page served for {video_id}, negotiating consent cookie")
        create_consent_cookie(session, html, video_id)
        html = _fetch_html(session, video_id)
        if CONSENT_FORM_MARKER in html:
            raise FailedToCreateConsentCookie(video_id)
    return html


def create_consent_cookie(session: Session, html: str, video_id: str) -> None:
    match = CONSENT_TOKEN_PATTERN.search(html)
    if match is None:
        raise FailedToCreateConsentCookie(video_id)

    consent_value = "YES+" + match.group(1)
    session.post(YOUTUBE_ORIGIN, video_id=video_id, data={"CONSENT": consent_value})
    session.set_cookie("CONSENT", consent_value)


def _fetch_html(session: Session, video_id: str) -> str:
    url = WATCH_URL.format(video_id=video_id)
    response = session.get(
        url,
        video_id=video_id,
        headers={"Accept-Language": get_config().network.accept_language},
    )
    if not response.ok:
        raise YouTubeRequestFailed(video_id, f"{response.status} response from {url}")
    return unescape(response.text)
