"""Shared fixtures: canned watch pages, timed-text documents and a fake HTTP session."""

import json
from typing import Dict
from unittest.mock import MagicMock

import pytest
import requests

from ytt.config import Config

VIDEO_ID = "dQw4w9WgXcQ"
EN_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en"
DE_URL = "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=de&kind=asr"


def make_watch_html(captions) -> str:
    """Embed a captions object in a page the way the player response does."""
    payload = captions if isinstance(captions, str) else json.dumps(captions)
    return (
        '<!DOCTYPE html><html><head><title>Video</title></head><body>'
        '<script>var ytInitialPlayerResponse = {"responseContext":{"serviceTrackingParams":[]},'
        '"playabilityStatus":{"status":"OK"},'
        f'"captions":{payload},'
        '"videoDetails":{"videoId":"dQw4w9WgXcQ","title":"Test"}};</script>'
        '</body></html>'
    )


def make_track(language_code, name, url, kind=None) -> Dict:
    track = {
        "baseUrl": url,
        "name": {"simpleText": name},
        "vssId": f".{language_code}",
        "languageCode": language_code,
        "isTranslatable": True,
    }
    if kind is not None:
        track["kind"] = kind
    return track


def make_response(body: bytes, status_code: int = 200) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


@pytest.fixture
def captions_json():
    """Captions object with a manual English and a generated German track."""
    return {
        "playerCaptionsTracklistRenderer": {
            "captionTracks": [
                make_track("en", "English", EN_URL),
                make_track("de", "German (auto-generated)", DE_URL, kind="asr"),
            ],
            "audioTracks": [{"captionTrackIndices": [0, 1]}],
            "defaultAudioTrackIndex": 0,
        }
    }


@pytest.fixture
def watch_html(captions_json):
    return make_watch_html(captions_json)


@pytest.fixture
def transcript_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="1.0" dur="2.5">Hello &amp;amp; World</text>'
        '<text start="3.5" dur="1.25">it&amp;#39;s &lt;font color=&quot;#E5E5E5&quot;&gt;fine&lt;/font&gt;</text>'
        '</transcript>'
    ).encode("utf-8")


@pytest.fixture
def fake_session(watch_html, transcript_xml):
    """Session whose GET answers the watch page and both timed-text URLs."""
    pages = {
        Config.WATCH_URL.format(video_id=VIDEO_ID): watch_html.encode("utf-8"),
        EN_URL: transcript_xml,
        DE_URL: transcript_xml,
    }

    def get(url, timeout=None):
        if url in pages:
            return make_response(pages[url])
        return make_response(b"not found", status_code=404)

    session = MagicMock(spec=requests.Session)
    session.get.side_effect = get
    session.__enter__.return_value = session
    return session
