"""Streamlit web application for YouTube caption retrieval."""

import streamlit as st
import sys
from pathlib import Path

# Add the project root to the path so we can import ytt modules
project_root = Path(__file__).parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ytt.captions import list_transcripts
from ytt.config import Config
from ytt.errors import NoTranscriptFound, TranscriptError
from ytt.fetcher import new_session
from ytt.main import choose_transcript, format_catalog, parse_languages
from ytt.video_id import extract_video_id
from ytt.writers.json_writer import format_json
from ytt.writers.srt_writer import format_srt
from ytt.writers.txt_writer import format_txt


# Page configuration
st.set_page_config(
    page_title="YouTube Transcript Downloader",
    page_icon="🎥",
    layout="wide",
)

# Initialize session state
if 'transcript' not in st.session_state:
    st.session_state.transcript = None
if 'entries' not in st.session_state:
    st.session_state.entries = None
if 'catalog' not in st.session_state:
    st.session_state.catalog = None


def fetch_with_status(url: str, languages: list):
    """Run the pipeline for one video, reporting each step in the page."""
    with st.spinner("Resolving video ID..."):
        video_id = extract_video_id(url)

    with new_session() as session:
        with st.spinner(f"Listing caption tracks for {video_id}..."):
            catalog = list_transcripts(video_id, session=session)
        st.session_state.catalog = catalog

        transcript = choose_transcript(catalog, languages)
        with st.spinner(f"Downloading {transcript.language or transcript.language_code} captions..."):
            entries = transcript.fetch(session=session)

    st.session_state.transcript = transcript
    st.session_state.entries = entries


st.title("🎥 YouTube Transcript Downloader")

with st.sidebar:
    st.header("Options")
    lang_input = st.text_input(
        "Languages (comma-separated, in order of preference)",
        value=Config.DEFAULT_LANGUAGE,
        help="Leave empty to take the first available track.",
    )
    show_timestamps = st.checkbox("Show timestamps", value=True)

url = st.text_input("YouTube URL or video ID")

if st.button("Get transcript", type="primary", disabled=not url.strip()):
    st.session_state.transcript = None
    st.session_state.entries = None
    st.session_state.catalog = None
    try:
        fetch_with_status(url.strip(), parse_languages([lang_input]))
    except NoTranscriptFound as e:
        st.error(f"❌ {e}")
    except TranscriptError as e:
        st.error(f"❌ **Error:** {e}")

if st.session_state.catalog is not None:
    with st.expander(f"Available tracks ({len(st.session_state.catalog)})"):
        st.code(format_catalog(st.session_state.catalog) or "(none)", language=None)

transcript = st.session_state.transcript
entries = st.session_state.entries

if transcript is not None and entries is not None:
    kind = "auto-generated" if transcript.is_generated else "manual"
    st.success(f"✓ {len(entries)} lines of {transcript.language or transcript.language_code} captions ({kind})")

    text = format_txt(entries, timestamps=show_timestamps)
    st.text_area("Transcript", text, height=500)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "📄 Download TXT",
            data=text,
            file_name=f"{transcript.video_id}.txt",
            mime="text/plain",
        )
    with col2:
        st.download_button(
            "🎬 Download SRT",
            data=format_srt(entries),
            file_name=f"{transcript.video_id}.srt",
            mime="application/x-subrip",
        )
    with col3:
        st.download_button(
            "🧾 Download JSON",
            data=format_json(transcript, entries),
            file_name=f"{transcript.video_id}.json",
            mime="application/json",
        )
