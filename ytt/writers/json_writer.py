"""Writer for JSON format."""

import json
from pathlib import Path
from typing import Iterable

from ytt.models import Transcript, TranscriptEntry
from ytt.writers.txt_writer import clean_text


def format_json(transcript: Transcript, entries: Iterable[TranscriptEntry]) -> str:
    """Render a track and its entries as a JSON document."""
    data = {
        'video_id': transcript.video_id,
        'language': transcript.language,
        'language_code': transcript.language_code,
        'is_generated': transcript.is_generated,
        'entries': [
            {
                'start': entry.start,
                'duration': entry.duration,
                'text': clean_text(entry.text)
            }
            for entry in entries
        ]
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_json(transcript: Transcript, entries: Iterable[TranscriptEntry], output_path: Path) -> None:
    """Write transcript to JSON file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(format_json(transcript, entries))
