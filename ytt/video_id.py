"""Video ID extraction from YouTube URLs, URL fragments and bare IDs."""

import re

from ytt.errors import IDTooShortError, InvalidCharactersError
from ytt.logger import get_logger

logger = get_logger("video_id")

MIN_VIDEO_ID_LENGTH = 10

# Characters that can never appear in a video ID
RESERVED_CHARACTERS = set('?&/<%=')

# Tried in order, most specific first; the first match wins
VIDEO_ID_PATTERNS = [
    re.compile(r'(?:v|embed|shorts|watch\?v)(?:=|/)([^"&?/=%]{11})'),
    re.compile(r'(?:=|/)([^"&?/=%]{11})'),
    re.compile(r'([^"&?/=%]{11})'),
]


def _looks_like_url(value: str) -> bool:
    return "youtu" in value or any(c in value for c in '"?&/<%=')


def extract_video_id(value: str) -> str:
    """
    Extract the video ID from a YouTube URL or return a bare ID unchanged.
    
    Args:
        value: A watch/embed/shorts URL, a URL fragment, or a video ID
        
    Returns:
        The validated video ID
        
    Raises:
        InvalidCharactersError: If the candidate still contains reserved characters
        IDTooShortError: If the candidate is shorter than 10 characters
    """
    candidate = value
    if _looks_like_url(value):
        for pattern in VIDEO_ID_PATTERNS:
            match = pattern.search(value)
            if match:
                candidate = match.group(1)
                break
    
    if any(c in RESERVED_CHARACTERS for c in candidate):
        raise InvalidCharactersError(candidate)
    
    if len(candidate) < MIN_VIDEO_ID_LENGTH:
        raise IDTooShortError(candidate, MIN_VIDEO_ID_LENGTH)
    
    logger.debug(f"Resolved video ID {candidate} from {value!r}")
    return candidate
