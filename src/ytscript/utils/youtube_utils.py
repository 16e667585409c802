"""Utility functions for working with YouTube video identifiers."""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")


def looks_like_url(value: str) -> bool:
    """Check whether a supposed video id is actually a URL."""
    return value.startswith("http://") or value.startswith("https://")


def is_video_id(value: Optional[str]) -> bool:
    return bool(value) and VIDEO_ID_PATTERN.fullmatch(value) is not None


def extract_video_id(url_or_id: Optional[str]) -> Optional[str]:
    """
    Extract a video id from a YouTube URL, or return a bare id unchanged.

    Supports watch, short (youtu.be), embed, shorts and mobile URLs.

    Args:
        url_or_id: YouTube URL or video id

    Returns:
        The 11 character video id, or None if none can be found
    """
    s = (url_or_id or "").strip()
    if not s:
        return None
    if is_video_id(s):
        return s

    u = urlparse(s)
    host = (u.netloc or "").lower()
    path_parts = [part for part in u.path.split("/") if part]

    if "youtu.be" in host and path_parts:
        vid = path_parts[0]
        return vid if is_video_id(vid) else None

    if "youtube.com" in host:
        qs = parse_qs(u.query)
        if qs.get("v"):
            vid = qs["v"][0]
            return vid if is_video_id(vid) else None
        if len(path_parts) >= 2 and path_parts[0] in ("embed", "shorts", "live", "v"):
            vid = path_parts[1]
            return vid if is_video_id(vid) else None

    return None
