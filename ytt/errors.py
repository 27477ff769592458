"""Exceptions raised by the transcript discovery pipeline."""

from typing import Optional, Sequence


class TranscriptError(Exception):
    """Base class for transcript-related errors."""

    def __init__(self, message: str, video_id: Optional[str] = None):
        super().__init__(message)
        self.video_id = video_id


class VideoIDError(TranscriptError, ValueError):
    """The input could not be turned into a valid video ID."""


class InvalidCharactersError(VideoIDError):
    """Candidate ID still contains reserved characters after extraction."""

    def __init__(self, candidate: str):
        super().__init__(f"invalid characters in video id: {candidate!r}")
        self.candidate = candidate


class IDTooShortError(VideoIDError):
    """Candidate ID is shorter than the minimum length."""

    def __init__(self, candidate: str, min_length: int):
        super().__init__(
            f"the video id must be at least {min_length} characters long, got {candidate!r}"
        )
        self.candidate = candidate
        self.min_length = min_length


class TranscriptsUnavailable(TranscriptError):
    """The watch page carries no captions metadata at all."""

    def __init__(self, video_id: str):
        super().__init__(
            f"transcripts disabled or video unavailable for {video_id}", video_id
        )


class MalformedPayload(TranscriptError):
    """The embedded captions JSON could not be parsed."""

    def __init__(self, video_id: str, reason: str):
        super().__init__(f"could not parse captions payload for {video_id}: {reason}", video_id)


class TranscriptsDisabled(TranscriptError):
    """Captions metadata is present but holds no track list renderer."""

    def __init__(self, video_id: str):
        super().__init__(f"transcripts are disabled for {video_id}", video_id)


class InvalidFormat(TranscriptError):
    """The captionTracks field is missing or not a list."""

    def __init__(self, video_id: str):
        super().__init__(f"invalid captions tracks format for {video_id}", video_id)


class NoTranscriptFound(TranscriptError):
    """None of the requested language codes matched a track."""

    def __init__(
        self,
        video_id: str,
        language_codes: Sequence[str],
        available: Sequence[str] = (),
    ):
        requested = ", ".join(language_codes) or "(none)"
        message = f"no transcript found for {video_id} in language(s): {requested}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message, video_id)
        self.language_codes = list(language_codes)
        self.available = list(available)


class MalformedTranscriptXML(TranscriptError):
    """The timed-text document failed to parse or has bad offsets."""

    def __init__(self, reason: str, video_id: Optional[str] = None):
        super().__init__(f"malformed transcript XML: {reason}", video_id)


class FetchError(TranscriptError):
    """Network or HTTP failure while talking to the video platform."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(f"failed to fetch {url or '(no url)'}: {reason}")
        self.url = url
        self.status_code = status_code
