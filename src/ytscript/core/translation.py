"""Derives translated transcript handles."""

from dataclasses import replace

from ..models import TranscriptHandle
from .errors import NotTranslatable, TranslationLanguageNotAvailable

TRANSLATION_PARAM = "tlang"


def translate_handle(handle: TranscriptHandle, language_code: str) -> TranscriptHandle:
    """
    Create a handle for ``handle`` translated into ``language_code``.

    The translated handle is always flagged as generated and cannot be
    translated again.

    Raises:
        NotTranslatable: If the handle offers no translation languages
        TranslationLanguageNotAvailable: If ``language_code`` is not offered
    """
    if not handle.is_translatable:
        raise NotTranslatable(handle.video_id)

    languages = {entry.language_code: entry.language for entry in handle.translation_languages}
    if language_code not in languages:
        raise TranslationLanguageNotAvailable(handle.video_id)

    separator = "&" if "?" in handle.url else "?"
    return replace(
        handle,
        url=f"{handle.url}{separator}{TRANSLATION_PARAM}={language_code}",
        language=languages[language_code],
        language_code=language_code,
        is_generated=True,
        translation_languages=(),
    )
