"""HTTP session bound to a cookie store."""

from dataclasses import dataclass
from http.cookies import CookieError, SimpleCookie
from pathlib import Path
from typing import Dict, Optional, Union

import requests
from requests.cookies import create_cookie

from ..utils.logging import get_logger
from .config import get_config
from .errors import CookiePathInvalid, CookiesInvalid, YouTubeRequestFailed

logger = get_logger("session")

DEFAULT_COOKIE_DOMAIN = ".youtube.com"


@dataclass
class HttpResponse:
    """Status and body of a completed request."""
    ok: bool
    status: int
    text: str


class Session:
    """
    A requests session plus the cookie jar it carries between calls.

    Cookies set by a response are replayed on later requests to the same
    domain. Every lookup should own its own Session.
    """

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        proxies: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        http_client: Optional[requests.Session] = None
    ):
        settings = get_config()
        self._http = http_client if http_client is not None else requests.Session()
        self._http.headers.update(settings.network.default_headers)
        if headers:
            self._http.headers.update(headers)
        if proxies:
            self._http.proxies.update(proxies)
        self.timeout = timeout if timeout is not None else settings.network.timeout

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self._http.cookies

    def request(
        self,
        method: str,
        url: str,
        video_id: str = "",
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Union[Dict[str, str], str]] = None
    ) -> HttpResponse:
        """Perform a request and return its status and decoded body."""
        logger.debug(f"{method} {url}")
        try:
            response = self._http.request(method, url, headers=headers, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise YouTubeRequestFailed(video_id, e) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return HttpResponse(ok=response.ok, status=response.status_code, text=response.text)

    def get(self, url: str, video_id: str = "", headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return self.request("GET", url, video_id=video_id, headers=headers)

    def post(
        self,
        url: str,
        video_id: str = "",
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Union[Dict[str, str], str]] = None
    ) -> HttpResponse:
        return self.request("POST", url, video_id=video_id, headers=headers, data=data)

    def set_cookie(self, name: str, value: str, domain: str = DEFAULT_COOKIE_DOMAIN) -> None:
        self._http.cookies.set(name, value, domain=domain, path="/")

    def load_cookies(self, cookie_path: Union[str, Path], video_id: str = "") -> int:
        """
        Install cookies from a file of ``Set-Cookie`` strings, one per line.

        Args:
            cookie_path: Path to the cookie file
            video_id: Video the cookies are loaded for, used in error reports

        Returns:
            Number of cookies installed

        Raises:
            CookiePathInvalid: If the file cannot be read
            CookiesInvalid: If any non-empty line is not a valid cookie
        """
        try:
            content = Path(cookie_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CookiePathInvalid(video_id) from e

        # Parse every line before touching the jar so a bad file installs nothing
        cookies = [
            cookie
            for line in content.splitlines() if line.strip()
            for cookie in _parse_set_cookie(line.strip(), video_id)
        ]
        for cookie in cookies:
            self._http.cookies.set_cookie(cookie)

        logger.info(f"Loaded {len(cookies)} cookies from {cookie_path}")
        return len(cookies)


def _parse_set_cookie(line: str, video_id: str):
    parsed = SimpleCookie()
    try:
        parsed.load(line)
    except CookieError as e:
        raise CookiesInvalid(video_id) from e
    if not parsed:
        raise CookiesInvalid(video_id)

    for name, morsel in parsed.items():
        yield create_cookie(
            name=name,
            value=morsel.value,
            domain=morsel["domain"] or DEFAULT_COOKIE_DOMAIN,
            path=morsel["path"] or "/",
            secure=bool(morsel["secure"]),
        )
