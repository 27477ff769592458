"""Writer for TXT format with optional timestamps."""

import html
from pathlib import Path
from typing import Iterable

from ytt.models import TranscriptEntry
from ytt.transcript import remove_html_tags


def clean_text(text: str) -> str:
    """
    Decode entities left in an entry's text for display.
    
    Timed-text bodies carry HTML escaped inside XML, so two rounds of
    unescaping are needed. Tags that were hidden behind entities are removed
    afterwards.
    """
    return remove_html_tags(html.unescape(html.unescape(text)))


def format_txt(entries: Iterable[TranscriptEntry], timestamps: bool = True) -> str:
    """
    Render entries as text, one line each.
    
    Format: start:end<TAB>text, with offsets in seconds to two decimals.
    """
    lines = []
    for entry in entries:
        text = clean_text(entry.text)
        if timestamps:
            lines.append(f"{entry.start:.2f}:{entry.end:.2f}\t{text}\n")
        else:
            lines.append(f"{text}\n")
    return "".join(lines)


def write_txt(entries: Iterable[TranscriptEntry], output_path: Path, timestamps: bool = True) -> None:
    """Write transcript entries to a TXT file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(format_txt(entries, timestamps=timestamps))
