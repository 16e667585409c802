"""
Configuration for the transcript fetcher.
All defaults can be overridden via environment variables or a local .env file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)

YOUTUBE_ORIGIN = "https://www.youtube.com"
WATCH_URL = YOUTUBE_ORIGIN + "/watch?v={video_id}"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124 Safari/537.36"
)

# =============================================================================
# HELPERS
# =============================================================================

def _parse_list_env(name: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')

# =============================================================================
# SECTIONS
# =============================================================================

@dataclass
class NetworkConfig:
    """HTTP transport settings."""
    timeout: float = field(default_factory=lambda: float(os.getenv('YT_HTTP_TIMEOUT', '30')))
    accept_language: str = field(default_factory=lambda: os.getenv('YT_ACCEPT_LANGUAGE', 'en-US'))
    user_agent: str = field(default_factory=lambda: os.getenv('YT_USER_AGENT', DEFAULT_USER_AGENT))

    @property
    def default_headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}


@dataclass
class ProxyConfig:
    """Proxy settings handed to requests."""
    http_proxy: Optional[str] = field(default_factory=lambda: os.getenv('YT_HTTP_PROXY') or None)
    https_proxy: Optional[str] = field(default_factory=lambda: os.getenv('YT_HTTPS_PROXY') or None)

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to requests-compatible proxy dict."""
        if not self.http_proxy and not self.https_proxy:
            return None
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        return proxies


@dataclass
class CookieConfig:
    """Cookie file replayed into every new session."""
    cookies_path: Optional[str] = field(default_factory=lambda: os.getenv('YT_COOKIES_PATH') or None)


@dataclass
class TranscriptConfig:
    """Defaults for transcript selection and decoding."""
    default_languages: List[str] = field(default_factory=lambda: _parse_list_env('YT_DEFAULT_LANGUAGES', ['en']))
    preserve_formatting: bool = field(default_factory=lambda: _parse_bool_env('YT_PRESERVE_FORMATTING', False))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'WARNING').upper())

# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class Config:
    """Complete application configuration."""
    network: NetworkConfig = field(default_factory=NetworkConfig)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    cookies: CookieConfig = field(default_factory=CookieConfig)
    transcript: TranscriptConfig = field(default_factory=TranscriptConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Validate configuration values."""
        if self.network.timeout <= 0:
            raise ValueError("YT_HTTP_TIMEOUT must be a positive number of seconds")
        if not self.transcript.default_languages:
            raise ValueError("YT_DEFAULT_LANGUAGES must name at least one language code")


config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config


def reload_config() -> Config:
    """
    Re-read the environment and replace the global configuration.

    Raises:
        ValueError: If the environment holds invalid settings. The previous
            configuration stays in place.
    """
    global config
    fresh = Config()
    fresh.validate()
    config = fresh
    return config
