"""Data models for caption tracks and transcript entries."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Union

import requests

from ytt.errors import NoTranscriptFound


@dataclass(frozen=True)
class TranscriptEntry:
    """A single caption line with timing information."""
    text: str         # Markup stripped, entities still encoded
    start: float      # Start offset in seconds
    duration: float   # Duration in seconds
    
    @property
    def end(self) -> float:
        return self.start + self.duration


@dataclass(frozen=True)
class Transcript:
    """One caption track discovered for a video."""
    video_id: str
    url: str
    language: str
    language_code: str
    is_generated: bool = False
    
    def fetch(self, session: Optional[requests.Session] = None) -> List[TranscriptEntry]:
        """Fetch and decode this track's timed-text document."""
        from ytt.transcript import fetch_transcript
        return fetch_transcript(self, session=session)


@dataclass
class TranscriptList:
    """Caption tracks for one video, split by human-authored and generated."""
    video_id: str
    manually_created_transcripts: Dict[str, Transcript] = None
    generated_transcripts: Dict[str, Transcript] = None
    
    def __post_init__(self):
        """Initialize the track mappings if not provided."""
        if self.manually_created_transcripts is None:
            self.manually_created_transcripts = {}
        if self.generated_transcripts is None:
            self.generated_transcripts = {}
    
    def __iter__(self) -> Iterator[Transcript]:
        yield from self.manually_created_transcripts.values()
        yield from self.generated_transcripts.values()
    
    def __len__(self) -> int:
        return len(self.manually_created_transcripts) + len(self.generated_transcripts)
    
    def find_transcript(self, *language_codes: Union[str, Sequence[str]]) -> Transcript:
        """
        Return the first track matching the language codes in order.
        
        For each code the human-authored tracks are checked before the
        generated ones, so language preference wins over authorship.
        
        Args:
            language_codes: Codes in order of preference, either as separate
                arguments or as a single list
        
        Raises:
            NoTranscriptFound: If no code matches any track
        """
        return self._find(
            _flatten(language_codes),
            [self.manually_created_transcripts, self.generated_transcripts],
        )
    
    def find_manually_created_transcript(self, *language_codes: Union[str, Sequence[str]]) -> Transcript:
        """Like find_transcript, but only human-authored tracks are considered."""
        return self._find(_flatten(language_codes), [self.manually_created_transcripts])
    
    def find_generated_transcript(self, *language_codes: Union[str, Sequence[str]]) -> Transcript:
        """Like find_transcript, but only generated tracks are considered."""
        return self._find(_flatten(language_codes), [self.generated_transcripts])
    
    def first_available(self) -> Transcript:
        """Return any track, preferring human-authored ones."""
        for transcript in self:
            return transcript
        raise NoTranscriptFound(self.video_id, [])
    
    def _find(self, language_codes: List[str], mappings: List[Dict[str, Transcript]]) -> Transcript:
        for code in language_codes:
            for mapping in mappings:
                if code in mapping:
                    return mapping[code]
        available = [t.language_code for t in self]
        raise NoTranscriptFound(self.video_id, language_codes, available)


def _flatten(language_codes) -> List[str]:
    codes = []
    for code in language_codes:
        if isinstance(code, str):
            codes.append(code)
        else:
            codes.extend(code)
    return codes
