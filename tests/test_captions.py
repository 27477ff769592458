"""Unit tests for caption-track discovery."""

import pytest

from ytt.captions import (
    CAPTIONS_MARKER,
    VIDEO_DETAILS_MARKER,
    build_transcript_list,
    extract_captions_json,
    list_transcripts,
)
from ytt.config import Config
from ytt.errors import (
    FetchError,
    InvalidFormat,
    MalformedPayload,
    TranscriptsDisabled,
    TranscriptsUnavailable,
)
from ytt.models import Transcript

from conftest import DE_URL, EN_URL, VIDEO_ID, make_track, make_watch_html


class TestExtractCaptionsJson:
    """Tests for pulling the caption renderer out of a watch page."""
    
    def test_returns_renderer(self, watch_html, captions_json):
        renderer = extract_captions_json(watch_html, VIDEO_ID)
        
        assert renderer == captions_json["playerCaptionsTracklistRenderer"]
    
    def test_missing_marker(self):
        html = "<html><body>This video is private.</body></html>"
        
        with pytest.raises(TranscriptsUnavailable) as exc_info:
            extract_captions_json(html, VIDEO_ID)
        
        assert exc_info.value.video_id == VIDEO_ID
    
    def test_unparseable_fragment(self):
        html = make_watch_html('{"playerCaptionsTracklistRenderer":{"captionTracks":[')
        
        with pytest.raises(MalformedPayload):
            extract_captions_json(html, VIDEO_ID)
    
    @pytest.mark.parametrize("captions", [
        {"playerCaptionsRenderer": {"baseUrl": "https://example.com"}},
        {"playerCaptionsTracklistRenderer": []},
        {"playerCaptionsTracklistRenderer": None},
        [1, 2, 3],
    ])
    def test_missing_renderer(self, captions):
        with pytest.raises(TranscriptsDisabled):
            extract_captions_json(make_watch_html(captions), VIDEO_ID)
    
    def test_raw_newlines_inside_strings_are_tolerated(self):
        html = make_watch_html(
            '{"playerCaptionsTracklistRenderer":{"captionTracks":'
            '[{"languageCode":"en","name":{"simpleText":"Eng\nlish"}}]}}'
        )
        
        renderer = extract_captions_json(html, VIDEO_ID)
        
        assert renderer["captionTracks"][0]["name"]["simpleText"] == "English"
    
    def test_json_escapes_are_decoded(self):
        html = make_watch_html(
            '{"playerCaptionsTracklistRenderer":{"captionTracks":'
            '[{"baseUrl":"https://www.youtube.com/api/timedtext?v=x\\u0026lang=en"}]}}'
        )
        
        renderer = extract_captions_json(html, VIDEO_ID)
        
        assert renderer["captionTracks"][0]["baseUrl"].endswith("?v=x&lang=en")
    
    def test_markers(self):
        assert CAPTIONS_MARKER == '"captions":'
        assert VIDEO_DETAILS_MARKER == ',"videoDetails"'


class TestBuildTranscriptList:
    """Tests for turning the renderer into a catalog."""
    
    def test_single_generated_track(self):
        captions = {"captionTracks": [
            {"languageCode": "en", "kind": "asr", "baseUrl": EN_URL, "name": {"simpleText": "English"}},
        ]}
        
        catalog = build_transcript_list(VIDEO_ID, captions)
        
        assert catalog.manually_created_transcripts == {}
        assert catalog.generated_transcripts == {
            "en": Transcript(VIDEO_ID, EN_URL, "English", "en", is_generated=True),
        }
    
    def test_partitions_by_kind(self, captions_json):
        catalog = build_transcript_list(VIDEO_ID, captions_json["playerCaptionsTracklistRenderer"])
        
        assert list(catalog.manually_created_transcripts) == ["en"]
        assert list(catalog.generated_transcripts) == ["de"]
        assert catalog.generated_transcripts["de"].url == DE_URL
        assert catalog.video_id == VIDEO_ID
    
    @pytest.mark.parametrize("kind", [None, "", "standard", "ASR", "forced"])
    def test_non_asr_kinds_are_manual(self, kind):
        captions = {"captionTracks": [make_track("fr", "French", "https://example.com/fr", kind=kind)]}
        
        catalog = build_transcript_list(VIDEO_ID, captions)
        
        assert "fr" in catalog.manually_created_transcripts
        assert not catalog.manually_created_transcripts["fr"].is_generated
        assert catalog.generated_transcripts == {}
    
    @pytest.mark.parametrize("captions", [
        {},
        {"captionTracks": {"languageCode": "en"}},
        {"captionTracks": "en"},
        {"captionTracks": None},
    ])
    def test_invalid_track_list(self, captions):
        with pytest.raises(InvalidFormat):
            build_transcript_list(VIDEO_ID, captions)
    
    def test_empty_track_list(self):
        catalog = build_transcript_list(VIDEO_ID, {"captionTracks": []})
        
        assert len(catalog) == 0
    
    def test_malformed_track_does_not_affect_others(self):
        good_en = make_track("en", "English", EN_URL)
        good_de = make_track("de", "German", DE_URL, kind="asr")
        captions = {"captionTracks": [
            good_en,
            {"languageCode": 5, "baseUrl": None, "name": "English", "kind": ["asr"]},
            "garbage",
            good_de,
        ]}
        
        catalog = build_transcript_list(VIDEO_ID, captions)
        
        assert catalog.manually_created_transcripts["en"] == Transcript(VIDEO_ID, EN_URL, "English", "en")
        assert catalog.generated_transcripts["de"] == Transcript(VIDEO_ID, DE_URL, "German", "de", True)
        assert catalog.manually_created_transcripts[""] == Transcript(VIDEO_ID, "", "", "", False)
    
    def test_last_duplicate_wins(self):
        captions = {"captionTracks": [
            make_track("en", "English", "https://example.com/first"),
            make_track("en", "English (UK)", "https://example.com/second"),
        ]}
        
        catalog = build_transcript_list(VIDEO_ID, captions)
        
        assert catalog.manually_created_transcripts["en"].url == "https://example.com/second"
        assert len(catalog) == 1


class TestListTranscripts:
    """Tests for the page fetch plus discovery pipeline."""
    
    def test_fetches_watch_page_once(self, fake_session):
        catalog = list_transcripts(VIDEO_ID, session=fake_session)
        
        assert sorted(t.language_code for t in catalog) == ["de", "en"]
        fake_session.get.assert_called_once_with(
            Config.WATCH_URL.format(video_id=VIDEO_ID), timeout=Config.REQUEST_TIMEOUT
        )
    
    def test_transport_failure_passes_through(self, fake_session):
        with pytest.raises(FetchError) as exc_info:
            list_transcripts("unknownVid1", session=fake_session)
        
        assert exc_info.value.status_code == 404
