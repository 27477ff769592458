"""Writer for SRT subtitle format."""

from pathlib import Path
from typing import Iterable

from ytt.models import TranscriptEntry
from ytt.writers.txt_writer import clean_text


def format_timestamp(seconds: float) -> str:
    """Format seconds as SRT timestamp: HH:MM:SS,mmm."""
    total_millis = int(round(seconds * 1000))
    hours, rest = divmod(total_millis, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def format_srt(entries: Iterable[TranscriptEntry]) -> str:
    """Render entries as numbered SRT blocks."""
    blocks = []
    for index, entry in enumerate(entries, start=1):
        # SRT format: index, timestamps, text, blank line
        blocks.append(
            f"{index}\n"
            f"{format_timestamp(entry.start)} --> {format_timestamp(entry.end)}\n"
            f"{clean_text(entry.text)}\n"
            "\n"
        )
    return "".join(blocks)


def write_srt(entries: Iterable[TranscriptEntry], output_path: Path) -> None:
    """Write transcript entries to an SRT subtitle file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(format_srt(entries))
