"""Data models for caption manifests, transcript handles and cues."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

GENERATED_KIND = "asr"


def _text_of(node: Optional[Dict[str, Any]]) -> str:
    """Read a YouTube text node, either ``simpleText`` or a list of ``runs``."""
    if not node:
        return ""
    if "simpleText" in node:
        return node["simpleText"]
    return "".join(run.get("text", "") for run in node.get("runs", []))


@dataclass(frozen=True)
class TranslationLanguage:
    """A language a translatable transcript can be translated into."""
    language: str
    language_code: str

    def __str__(self) -> str:
        return f"{self.language} ({self.language_code})"


@dataclass(frozen=True)
class CaptionTrack:
    """One entry of the manifest's ``captionTracks`` list."""
    language_code: str
    name: str
    base_url: str
    kind: Optional[str] = None
    is_translatable: bool = False

    @property
    def is_generated(self) -> bool:
        return self.kind == GENERATED_KIND


@dataclass
class CaptionManifest:
    """Caption metadata carved out of a watch page."""
    caption_tracks: List[CaptionTrack] = field(default_factory=list)
    translation_languages: List[TranslationLanguage] = field(default_factory=list)

    @classmethod
    def from_json(cls, renderer: Dict[str, Any]) -> "CaptionManifest":
        """Create from a raw ``playerCaptionsTracklistRenderer`` object."""
        if not isinstance(renderer, dict):
            raise TypeError(f"Expected dictionary, got {type(renderer)}")

        translation_languages = [
            TranslationLanguage(
                language=_text_of(entry.get("languageName")),
                language_code=entry["languageCode"],
            )
            for entry in renderer.get("translationLanguages", [])
        ]
        caption_tracks = [
            CaptionTrack(
                language_code=track["languageCode"],
                name=_text_of(track.get("name")),
                base_url=track["baseUrl"],
                kind=track.get("kind"),
                is_translatable=bool(track.get("isTranslatable", False)),
            )
            for track in renderer.get("captionTracks", [])
        ]
        return cls(caption_tracks=caption_tracks, translation_languages=translation_languages)


@dataclass(frozen=True)
class TranscriptHandle:
    """
    An addressable reference to one transcript track, not yet decoded.

    Handles are immutable. Translating one produces a new handle and leaves
    the source handle usable.
    """
    video_id: str
    url: str
    language: str
    language_code: str
    is_generated: bool
    translation_languages: Tuple[TranslationLanguage, ...] = ()

    @property
    def is_translatable(self) -> bool:
        return len(self.translation_languages) > 0

    def translate(self, language_code: str) -> "TranscriptHandle":
        from ..core.translation import translate_handle

        return translate_handle(self, language_code)

    def __str__(self) -> str:
        return "{language} ({language_code}){translatable}".format(
            language=self.language,
            language_code=self.language_code,
            translatable="[TRANSLATABLE]" if self.is_translatable else "",
        )


@dataclass
class TranscriptCatalog:
    """All transcripts available for one video, split by origin."""
    video_id: str
    manually_created: Dict[str, TranscriptHandle] = field(default_factory=dict)
    generated: Dict[str, TranscriptHandle] = field(default_factory=dict)
    translation_languages: List[TranslationLanguage] = field(default_factory=list)

    def __iter__(self) -> Iterator[TranscriptHandle]:
        yield from self.manually_created.values()
        yield from self.generated.values()

    def find_transcript(self, language_codes: Sequence[str]) -> TranscriptHandle:
        from ..core.resolver import find_transcript

        return find_transcript(self, language_codes)

    def find_generated_transcript(self, language_codes: Sequence[str]) -> TranscriptHandle:
        from ..core.resolver import find_generated_transcript

        return find_generated_transcript(self, language_codes)

    def find_manually_created_transcript(self, language_codes: Sequence[str]) -> TranscriptHandle:
        from ..core.resolver import find_manually_created_transcript

        return find_manually_created_transcript(self, language_codes)

    def __str__(self) -> str:
        from ..core.catalog import render_catalog

        return render_catalog(self)


@dataclass
class TranscriptLine:
    """A single timed cue of a transcript."""
    text: str
    start: float
    duration: float = 0.0

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + self.duration

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "start": self.start, "duration": self.duration}


@dataclass
class BatchResult:
    """Outcome of fetching transcripts for several videos."""
    data: Dict[str, List[TranscriptLine]] = field(default_factory=dict)
    unretrievable_videos: List[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return len(self.unretrievable_videos) > 0
