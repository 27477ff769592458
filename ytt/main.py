"""Command-line entry point for YouTube transcript retrieval."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import requests
from colorlog.escape_codes import escape_codes
from tqdm import tqdm

from ytt.captions import list_transcripts
from ytt.config import Config
from ytt.errors import TranscriptError
from ytt.fetcher import new_session
from ytt.logger import set_level
from ytt.models import Transcript, TranscriptEntry, TranscriptList
from ytt.video_id import extract_video_id
from ytt.writers.json_writer import format_json
from ytt.writers.srt_writer import format_srt
from ytt.writers.txt_writer import format_txt

FORMATS = ("txt", "srt", "json")


def print_error(message: str) -> None:
    """Print a red error line to stderr."""
    color = escape_codes["bold_red"] if sys.stderr.isatty() else ""
    reset = escape_codes["reset"] if color else ""
    print(f"{color}✗ Error: {message}{reset}", file=sys.stderr)


def choose_transcript(transcript_list: TranscriptList, languages: Sequence[str]) -> Transcript:
    """Pick a track by language, or the first available one if none was asked for."""
    if languages:
        return transcript_list.find_transcript(list(languages))
    return transcript_list.first_available()


def render(transcript: Transcript, entries: List[TranscriptEntry], fmt: str = "txt", timestamps: bool = True) -> str:
    """Render fetched entries in the requested output format."""
    if fmt == "srt":
        return format_srt(entries)
    if fmt == "json":
        return format_json(transcript, entries) + "\n"
    return format_txt(entries, timestamps=timestamps)


def process_video(
    url: str,
    languages: Sequence[str],
    fmt: str = "txt",
    timestamps: bool = True,
    session: Optional[requests.Session] = None,
) -> Tuple[Transcript, str]:
    """
    Resolve, discover, select, fetch and render the transcript of one video.
    
    Args:
        url: YouTube URL or video ID
        languages: Language codes in order of preference; empty means any
        fmt: Output format (txt, srt or json)
        timestamps: Whether txt output includes timestamps
        session: HTTP session shared by both requests
        
    Returns:
        Tuple of (chosen transcript, rendered output)
    """
    video_id = extract_video_id(url)
    transcript_list = list_transcripts(video_id, session=session)
    transcript = choose_transcript(transcript_list, languages)
    entries = transcript.fetch(session=session)
    return transcript, render(transcript, entries, fmt=fmt, timestamps=timestamps)


def format_catalog(transcript_list: TranscriptList) -> str:
    """One line per track: code, name and whether it is generated."""
    lines = []
    for transcript in transcript_list:
        kind = "generated" if transcript.is_generated else "manual"
        lines.append(f"{transcript.language_code}\t{transcript.language}\t{kind}\n")
    return "".join(lines)


def parse_languages(values: Optional[List[str]]) -> List[str]:
    """Flatten repeated/comma-separated --lang values, dropping empty ones."""
    if values is None:
        values = [Config.DEFAULT_LANGUAGE]
    languages = []
    for value in values:
        languages.extend(code.strip() for code in value.split(",") if code.strip())
    return languages


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytt",
        description="Download the captions of YouTube videos as text.",
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="YouTube URL or video ID")
    parser.add_argument(
        "--lang",
        action="append",
        help=f"language code, repeatable in order of preference (default: {Config.DEFAULT_LANGUAGE}; "
             "pass an empty string to take the first available track)",
    )
    parser.add_argument("--no-timestamps", action="store_true", help="don't print timestamps")
    parser.add_argument("-o", "--output", help="output filename (defaults to stdout)")
    parser.add_argument("--format", choices=FORMATS, default="txt", help="output format (default: txt)")
    parser.add_argument("--list", action="store_true", help="list available tracks instead of fetching")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run_single(url: str, args, languages: List[str], session: requests.Session) -> int:
    try:
        if args.list:
            output = format_catalog(list_transcripts(extract_video_id(url), session=session))
        else:
            _, output = process_video(
                url, languages, fmt=args.format, timestamps=not args.no_timestamps, session=session
            )
    except TranscriptError as e:
        print_error(str(e))
        return 1
    
    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as e:
            print_error(f"Failed to write to file: {e}")
            return 1
        print(f"✓ Transcript written to {args.output}")
    else:
        sys.stdout.write(output)
    return 0


def run_batch(urls: List[str], args, languages: List[str], session: requests.Session) -> int:
    Config.OUT_DIR.mkdir(parents=True, exist_ok=True)
    failures = 0
    
    for url in tqdm(urls, desc="Transcripts", unit="video", ncols=80):
        try:
            transcript, output = process_video(
                url, languages, fmt=args.format, timestamps=not args.no_timestamps, session=session
            )
            output_path = Config.OUT_DIR / f"{transcript.video_id}.{args.format}"
            output_path.write_text(output, encoding="utf-8")
            tqdm.write(f"✓ {url} -> {output_path}")
        except (TranscriptError, OSError) as e:
            failures += 1
            tqdm.write(f"⚠ {url}: {e}")
    
    if failures:
        print_error(f"{failures} of {len(urls)} videos failed")
        return 1
    print(f"✓ All transcripts saved to: {Config.OUT_DIR}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and fetch the requested transcripts."""
    args = build_parser().parse_args(argv)
    
    if args.verbose:
        set_level("DEBUG")
    
    try:
        Config.validate()
    except ValueError as e:
        print_error(f"Configuration Error: {e}")
        return 1
    
    languages = parse_languages(args.lang)
    
    with new_session() as session:
        if len(args.urls) == 1 or args.list:
            status = 0
            for url in args.urls:
                status = max(status, run_single(url, args, languages, session))
            return status
        return run_batch(args.urls, args, languages, session)


if __name__ == "__main__":
    sys.exit(main())
