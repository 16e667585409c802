"""Unit tests for transcript formatters."""

import json
import pprint

import pytest

from ytscript.formatters import (
    FormatterFactory,
    JSONFormatter,
    PrettyPrintFormatter,
    SRTFormatter,
    TextFormatter,
    WebVTTFormatter,
)
from ytscript.models import TranscriptLine


@pytest.fixture
def transcript():
    return [
        TranscriptLine(text="Hey, this is just a test", start=0.0, duration=1.54),
        TranscriptLine(text="this is not the original transcript", start=1.54, duration=4.16),
        TranscriptLine(text="just something shorter", start=5.7, duration=3.239),
    ]


@pytest.fixture
def transcripts(transcript):
    return [transcript, transcript[:1]]


class TestDataFormatters:
    def test_json(self, transcript):
        output = JSONFormatter().format_transcript(transcript)

        assert json.loads(output) == [line.to_dict() for line in transcript]

    def test_json_kwargs(self, transcript):
        output = JSONFormatter().format_transcript(transcript, indent=2)

        assert output.startswith("[\n  {")

    def test_json_many(self, transcripts):
        output = JSONFormatter().format_transcripts(transcripts)

        assert len(json.loads(output)) == 2

    def test_pretty(self, transcript):
        output = PrettyPrintFormatter().format_transcript(transcript)

        assert output == pprint.pformat([line.to_dict() for line in transcript])

    def test_text(self, transcript):
        assert TextFormatter().format_transcript(transcript) == (
            "Hey, this is just a test\nthis is not the original transcript\njust something shorter"
        )

    def test_text_many(self, transcripts):
        output = TextFormatter().format_transcripts(transcripts)

        assert output.endswith("just something shorter\n\n\nHey, this is just a test")


class TestSubtitleFormatters:
    def test_srt(self, transcript):
        assert SRTFormatter().format_transcript(transcript) == (
            "1\n00:00:00,000 --> 00:00:01,540\nHey, this is just a test\n\n"
            "2\n00:00:01,540 --> 00:00:05,700\nthis is not the original transcript\n\n"
            "3\n00:00:05,700 --> 00:00:08,939\njust something shorter\n"
        )

    def test_webvtt(self, transcript):
        assert WebVTTFormatter().format_transcript(transcript) == (
            "WEBVTT\n\n"
            "00:00:00.000 --> 00:00:01.540\nHey, this is just a test\n\n"
            "00:00:01.540 --> 00:00:05.700\nthis is not the original transcript\n\n"
            "00:00:05.700 --> 00:00:08.939\njust something shorter\n"
        )

    def test_overlapping_cue_is_clipped(self):
        lines = [
            TranscriptLine(text="first", start=0.0, duration=5.0),
            TranscriptLine(text="second", start=2.0, duration=1.0),
        ]

        output = SRTFormatter().format_transcript(lines)

        assert "00:00:00,000 --> 00:00:02,000" in output
        assert "00:00:02,000 --> 00:00:03,000" in output

    def test_hours(self):
        lines = [TranscriptLine(text="late", start=3725.5, duration=1.0)]

        assert "01:02:05,500 --> 01:02:06,500" in SRTFormatter().format_transcript(lines)


class TestFormatterFactory:
    @pytest.mark.parametrize("name,formatter_class", [
        ("json", JSONFormatter),
        ("pretty", PrettyPrintFormatter),
        ("text", TextFormatter),
        ("srt", SRTFormatter),
        ("webvtt", WebVTTFormatter),
    ])
    def test_get(self, name, formatter_class):
        assert isinstance(FormatterFactory.get(name), formatter_class)

    def test_default_is_pretty(self):
        assert isinstance(FormatterFactory.get(), PrettyPrintFormatter)

    def test_unsupported(self):
        with pytest.raises(ValueError, match="json, pretty, text, srt, webvtt"):
            FormatterFactory.get("csv")
