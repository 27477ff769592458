"""
Caption track discovery from a YouTube watch page.

The watch page embeds the player response as JSON. Rather than parsing the
HTML, the captions object is cut out between two literal markers and fed to
the JSON parser. Only this module knows about the markers, so a different
extraction strategy can replace extract_captions_json without touching
callers.
"""

import json
from typing import Any, Dict, Optional

import requests

from ytt.errors import InvalidFormat, MalformedPayload, TranscriptsDisabled, TranscriptsUnavailable
from ytt.fetcher import fetch_video_html
from ytt.logger import get_logger
from ytt.models import Transcript, TranscriptList

logger = get_logger("captions")

CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails"'

GENERATED_KIND = "asr"


def extract_captions_json(html: str, video_id: str) -> Dict[str, Any]:
    """
    Locate and decode the caption configuration embedded in a watch page.
    
    Args:
        html: Watch page document
        video_id: Video the page belongs to (used in errors)
        
    Returns:
        The playerCaptionsTracklistRenderer object
        
    Raises:
        TranscriptsUnavailable: If the page has no captions marker
        MalformedPayload: If the captions fragment is not valid JSON
        TranscriptsDisabled: If the renderer object is missing
    """
    parts = html.split(CAPTIONS_MARKER)
    if len(parts) <= 1:
        raise TranscriptsUnavailable(video_id)
    
    json_part = parts[1].split(VIDEO_DETAILS_MARKER)[0]
    # String values may contain raw newlines, which strict JSON rejects
    json_part = json_part.replace("\n", "")
    
    try:
        captions = json.loads(json_part)
    except json.JSONDecodeError as e:
        raise MalformedPayload(video_id, str(e)) from e
    
    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    if not isinstance(renderer, dict):
        raise TranscriptsDisabled(video_id)
    
    return renderer


def _str_field(obj: Any, key: str) -> str:
    if not isinstance(obj, dict):
        return ""
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def build_transcript_list(video_id: str, captions_json: Dict[str, Any]) -> TranscriptList:
    """
    Turn the caption configuration into a catalog of tracks.
    
    A malformed track degrades to empty fields instead of failing the whole
    catalog. Later tracks overwrite earlier ones with the same language code.
    
    Raises:
        InvalidFormat: If captionTracks is missing or not a list
    """
    caption_tracks = captions_json.get("captionTracks")
    if not isinstance(caption_tracks, list):
        raise InvalidFormat(video_id)
    
    manual = {}
    generated = {}
    
    for track in caption_tracks:
        language_code = _str_field(track, "languageCode")
        kind = _str_field(track, "kind")
        name = track.get("name") if isinstance(track, dict) else None
        
        transcript = Transcript(
            video_id=video_id,
            url=_str_field(track, "baseUrl"),
            language=_str_field(name, "simpleText"),
            language_code=language_code,
            is_generated=kind == GENERATED_KIND,
        )
        
        if transcript.is_generated:
            generated[language_code] = transcript
        else:
            manual[language_code] = transcript
    
    logger.debug(
        f"Found {len(manual)} manual and {len(generated)} generated tracks for {video_id}"
    )
    return TranscriptList(
        video_id=video_id,
        manually_created_transcripts=manual,
        generated_transcripts=generated,
    )


def list_transcripts(video_id: str, session: Optional[requests.Session] = None) -> TranscriptList:
    """Fetch the watch page for a video and build its caption catalog."""
    html = fetch_video_html(video_id, session=session)
    captions_json = extract_captions_json(html, video_id)
    return build_transcript_list(video_id, captions_json)
