"""Renderers turning transcript lines into text output."""

import json
import pprint
from typing import Dict, List, Type

from .models import TranscriptLine


class Formatter:
    """Base class: renders one transcript or several transcripts."""

    def format_transcript(self, transcript: List[TranscriptLine], **kwargs) -> str:
        raise NotImplementedError

    def format_transcripts(self, transcripts: List[List[TranscriptLine]], **kwargs) -> str:
        raise NotImplementedError


class PrettyPrintFormatter(Formatter):
    def format_transcript(self, transcript: List[TranscriptLine], **kwargs) -> str:
        return pprint.pformat([line.to_dict() for line in transcript], **kwargs)

    def format_transcripts(self, transcripts: List[List[TranscriptLine]], **kwargs) -> str:
        return pprint.pformat([[line.to_dict() for line in transcript] for transcript in transcripts], **kwargs)


class JSONFormatter(Formatter):
    def format_transcript(self, transcript: List[TranscriptLine], **kwargs) -> str:
        return json.dumps([line.to_dict() for line in transcript], **kwargs)

    def format_transcripts(self, transcripts: List[List[TranscriptLine]], **kwargs) -> str:
        return json.dumps([[line.to_dict() for line in transcript] for transcript in transcripts], **kwargs)


class TextFormatter(Formatter):
    def format_transcript(self, transcript: List[TranscriptLine], **kwargs) -> str:
        return "\n".join(line.text for line in transcript)

    def format_transcripts(self, transcripts: List[List[TranscriptLine]], **kwargs) -> str:
        return "\n\n\n".join(self.format_transcript(transcript, **kwargs) for transcript in transcripts)


class _SubtitleFormatter(Formatter):
    """Shared cue layout for subtitle file formats."""

    def _format_timestamp(self, hours: int, minutes: int, seconds: int, milliseconds: int) -> str:
        raise NotImplementedError

    def _format_transcript_header(self, lines: List[str]) -> str:
        raise NotImplementedError

    def _format_transcript_helper(self, index: int, time_text: str, line: TranscriptLine) -> str:
        raise NotImplementedError

    def _seconds_to_timestamp(self, time: float) -> str:
        total_ms = int(round(time * 1000))
        hours, remainder = divmod(total_ms, 3600000)
        minutes, remainder = divmod(remainder, 60000)
        seconds, milliseconds = divmod(remainder, 1000)
        return self._format_timestamp(hours, minutes, seconds, milliseconds)

    def format_transcript(self, transcript: List[TranscriptLine], **kwargs) -> str:
        lines = []
        for i, line in enumerate(transcript):
            end = line.start + line.duration
            # A cue ends where the next one starts so overlapping cues do not stack
            if i < len(transcript) - 1 and transcript[i + 1].start < end:
                end = transcript[i + 1].start
            time_text = f"{self._seconds_to_timestamp(line.start)} --> {self._seconds_to_timestamp(end)}"
            lines.append(self._format_transcript_helper(i, time_text, line))
        return self._format_transcript_header(lines)

    def format_transcripts(self, transcripts: List[List[TranscriptLine]], **kwargs) -> str:
        return "\n\n".join(self.format_transcript(transcript, **kwargs) for transcript in transcripts)


class SRTFormatter(_SubtitleFormatter):
    def _format_timestamp(self, hours: int, minutes: int, seconds: int, milliseconds: int) -> str:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"

    def _format_transcript_header(self, lines: List[str]) -> str:
        return "\n\n".join(lines) + "\n"

    def _format_transcript_helper(self, index: int, time_text: str, line: TranscriptLine) -> str:
        return f"{index + 1}\n{time_text}\n{line.text}"


class WebVTTFormatter(_SubtitleFormatter):
    def _format_timestamp(self, hours: int, minutes: int, seconds: int, milliseconds: int) -> str:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"

    def _format_transcript_header(self, lines: List[str]) -> str:
        return "WEBVTT\n\n" + "\n\n".join(lines) + "\n"

    def _format_transcript_helper(self, index: int, time_text: str, line: TranscriptLine) -> str:
        return f"{time_text}\n{line.text}"


class FormatterFactory:
    FORMATTERS: Dict[str, Type[Formatter]] = {
        "json": JSONFormatter,
        "pretty": PrettyPrintFormatter,
        "text": TextFormatter,
        "srt": SRTFormatter,
        "webvtt": WebVTTFormatter,
    }

    @classmethod
    def get(cls, formatter_type: str = "pretty") -> Formatter:
        if formatter_type not in cls.FORMATTERS:
            raise ValueError(
                f"The format '{formatter_type}' is not supported. "
                f"Choose one of the following formats: {', '.join(cls.FORMATTERS)}"
            )
        return cls.FORMATTERS[formatter_type]()
