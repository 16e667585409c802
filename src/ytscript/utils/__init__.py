"""
Utility modules for the transcript fetcher.
"""

from .logging import setup_logger, get_logger, set_log_level
from .youtube_utils import extract_video_id, is_video_id, looks_like_url

__all__ = [
    'setup_logger',
    'get_logger',
    'set_log_level',
    'extract_video_id',
    'is_video_id',
    'looks_like_url',
]
