"""Data models for transcript retrieval."""

from .transcript import (
    BatchResult,
    CaptionManifest,
    CaptionTrack,
    TranscriptCatalog,
    TranscriptHandle,
    TranscriptLine,
    TranslationLanguage,
)

__all__ = [
    "BatchResult",
    "CaptionManifest",
    "CaptionTrack",
    "TranscriptCatalog",
    "TranscriptHandle",
    "TranscriptLine",
    "TranslationLanguage",
]
