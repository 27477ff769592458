"""Timed-text transcript fetching and decoding."""

import copy
import re
from typing import List, Optional
from xml.etree import ElementTree
from xml.sax.saxutils import escape

import requests

from ytt.errors import FetchError, MalformedTranscriptXML
from ytt.fetcher import fetch
from ytt.logger import get_logger
from ytt.models import Transcript, TranscriptEntry

logger = get_logger("transcript")

TAG_PATTERN = re.compile(r"<[^>]*>")


def remove_html_tags(text: str) -> str:
    """Remove anything that looks like a markup tag."""
    return TAG_PATTERN.sub("", text)


def _inner_markup(element: ElementTree.Element) -> str:
    """Return the element's content as markup, entities left encoded."""
    parts = [escape(element.text or "")]
    for child in element:
        tail = child.tail
        child = copy.copy(child)
        child.tail = None
        parts.append(ElementTree.tostring(child, encoding="unicode"))
        parts.append(escape(tail or ""))
    return "".join(parts)


def _parse_offset(element: ElementTree.Element, name: str) -> float:
    value = element.get(name)
    if value is None:
        raise MalformedTranscriptXML(f"<text> element without {name!r} attribute")
    try:
        return float(value)
    except ValueError as e:
        raise MalformedTranscriptXML(f"non-numeric {name!r} value {value!r}") from e


def parse_transcript(xml_data) -> List[TranscriptEntry]:
    """
    Decode a timed-text document into transcript entries.
    
    Every <text> element becomes one entry in document order. Tags inside
    the text are stripped; HTML entities are left for the presentation layer.
    
    Args:
        xml_data: The document as str or bytes
        
    Raises:
        MalformedTranscriptXML: If the document does not parse or an entry
            lacks a numeric start/dur
    """
    try:
        root = ElementTree.fromstring(xml_data)
    except ElementTree.ParseError as e:
        raise MalformedTranscriptXML(str(e)) from e
    
    entries = []
    for element in root.iter("text"):
        entries.append(TranscriptEntry(
            text=remove_html_tags(_inner_markup(element)),
            start=_parse_offset(element, "start"),
            duration=_parse_offset(element, "dur"),
        ))
    return entries


def fetch_transcript(transcript: Transcript, session: Optional[requests.Session] = None) -> List[TranscriptEntry]:
    """
    Fetch a track's timed-text document and decode it.
    
    Raises:
        FetchError: If the track has no URL or the request fails
        MalformedTranscriptXML: If the document cannot be decoded
    """
    if not transcript.url:
        raise FetchError("", f"track {transcript.language_code!r} of {transcript.video_id} has no URL")
    
    body = fetch(transcript.url, session=session)
    try:
        entries = parse_transcript(body)
    except MalformedTranscriptXML as e:
        e.video_id = transcript.video_id
        raise
    
    logger.debug(f"Decoded {len(entries)} entries for {transcript.video_id} [{transcript.language_code}]")
    return entries
