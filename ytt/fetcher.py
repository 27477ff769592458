"""HTTP access to YouTube watch pages and timed-text tracks."""

from typing import Optional

import requests

from ytt.config import Config
from ytt.errors import FetchError
from ytt.logger import get_logger

logger = get_logger("fetcher")


def new_session() -> requests.Session:
    """Create a session with browser-like headers and the consent cookie set."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": Config.USER_AGENT,
        "Accept-Language": Config.ACCEPT_LANGUAGE,
    })
    # Without it EU visitors get a consent page with no captions data
    session.cookies.set("CONSENT", "YES+1", domain=".youtube.com")
    return session


def fetch(url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> bytes:
    """
    Perform a single GET request and return the response body.
    
    Args:
        url: URL to fetch
        session: Session to reuse; a temporary one is created if omitted
        timeout: Request timeout in seconds (defaults to Config.REQUEST_TIMEOUT)
        
    Returns:
        The raw response body
        
    Raises:
        FetchError: On connection problems or a non-2xx status
    """
    if timeout is None:
        timeout = Config.REQUEST_TIMEOUT
    
    owns_session = session is None
    if owns_session:
        session = new_session()
    
    try:
        logger.debug(f"GET {url}")
        try:
            response = session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise FetchError(url, f"HTTP {status_code}", status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e)) from e
        
        logger.debug(f"Received {len(response.content)} bytes from {url}")
        return response.content
    finally:
        if owns_session:
            session.close()


def fetch_video_html(video_id: str, session: Optional[requests.Session] = None) -> str:
    """Fetch the watch page for a video and decode it as text."""
    url = Config.WATCH_URL.format(video_id=video_id)
    return fetch(url, session=session).decode("utf-8", errors="replace")
