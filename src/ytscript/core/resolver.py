"""Selects a transcript from a catalog by ordered language preference."""

from enum import Enum
from typing import Dict, List, Sequence, Union

from ..models import TranscriptCatalog, TranscriptHandle
from .errors import NoTranscriptFound

LanguageCodes = Union[str, Sequence[str]]


class InclusionPolicy(Enum):
    """Which transcript origins a lookup may return."""
    ANY = "any"
    GENERATED_ONLY = "generated_only"
    MANUAL_ONLY = "manual_only"


def find_transcript(catalog: TranscriptCatalog, language_codes: LanguageCodes) -> TranscriptHandle:
    """Find a transcript, preferring manually created over generated for the same language."""
    return _find(catalog, language_codes, [catalog.manually_created, catalog.generated])


def find_generated_transcript(catalog: TranscriptCatalog, language_codes: LanguageCodes) -> TranscriptHandle:
    return _find(catalog, language_codes, [catalog.generated])


def find_manually_created_transcript(catalog: TranscriptCatalog, language_codes: LanguageCodes) -> TranscriptHandle:
    return _find(catalog, language_codes, [catalog.manually_created])


def resolve(
    catalog: TranscriptCatalog,
    language_codes: LanguageCodes,
    policy: InclusionPolicy = InclusionPolicy.ANY
) -> TranscriptHandle:
    if policy is InclusionPolicy.GENERATED_ONLY:
        return find_generated_transcript(catalog, language_codes)
    if policy is InclusionPolicy.MANUAL_ONLY:
        return find_manually_created_transcript(catalog, language_codes)
    return find_transcript(catalog, language_codes)


def _find(
    catalog: TranscriptCatalog,
    language_codes: LanguageCodes,
    mappings: List[Dict[str, TranscriptHandle]]
) -> TranscriptHandle:
    if isinstance(language_codes, str):
        language_codes = [language_codes]

    # Language preference is the primary key, origin only breaks ties.
    for language_code in language_codes:
        for mapping in mappings:
            if language_code in mapping:
                return mapping[language_code]

    raise NoTranscriptFound(catalog.video_id, language_codes, str(catalog))
