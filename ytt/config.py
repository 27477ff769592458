"""Configuration management and environment variable loading."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Application configuration."""
    
    # Watch page template, must contain {video_id}
    WATCH_URL: str = os.getenv("WATCH_URL", "https://www.youtube.com/watch?v={video_id}")
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    )
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "en-US,en;q=0.9")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")
    OUT_DIR: Path = Path(os.getenv("OUT_DIR", "./out")).resolve()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    
    @classmethod
    def validate(cls) -> None:
        """Validate that the loaded configuration is usable."""
        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError(
                f"REQUEST_TIMEOUT must be positive, got {cls.REQUEST_TIMEOUT}."
            )
        if "{video_id}" not in cls.WATCH_URL:
            raise ValueError(
                "WATCH_URL must contain a {video_id} placeholder. Please fix it in your .env file or environment variables."
            )
