"""Builds the per-video transcript catalog from a caption manifest."""

from typing import Iterable

from ..models import CaptionManifest, TranscriptCatalog, TranscriptHandle


def build_catalog(video_id: str, manifest: CaptionManifest) -> TranscriptCatalog:
    """
    Index a manifest's caption tracks by origin and language code.

    Tracks sharing a language code within one origin overwrite each other in
    manifest order.
    """
    translation_languages = tuple(manifest.translation_languages)
    catalog = TranscriptCatalog(
        video_id=video_id,
        translation_languages=list(manifest.translation_languages),
    )

    for track in manifest.caption_tracks:
        target = catalog.generated if track.is_generated else catalog.manually_created
        target[track.language_code] = TranscriptHandle(
            video_id=video_id,
            url=track.base_url,
            language=track.name,
            language_code=track.language_code,
            is_generated=track.is_generated,
            translation_languages=translation_languages if track.is_translatable else (),
        )

    return catalog


def render_catalog(catalog: TranscriptCatalog) -> str:
    return (
        "For this video ({video_id}) transcripts are available in the following languages:\n\n"
        "(MANUALLY CREATED)\n"
        "{manually_created}\n\n"
        "(GENERATED)\n"
        "{generated}\n\n"
        "(TRANSLATION LANGUAGES)\n"
        "{translation_languages}"
    ).format(
        video_id=catalog.video_id,
        manually_created=_describe(catalog.manually_created.values()),
        generated=_describe(catalog.generated.values()),
        translation_languages=_describe(catalog.translation_languages),
    )


def _describe(entries: Iterable[object]) -> str:
    lines = [f" - {entry}" for entry in entries]
    return "\n".join(lines) if lines else "None"
