"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(name: str):
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Application configuration."""

    # API
    GUTENDEX_BASE_URL = os.getenv("GUTENDEX_BASE_URL", "https://gutendex.com/books")

    # Defaults
    DEFAULT_MAX_RESULTS = int(os.getenv("DEFAULT_MAX_RESULTS", "5"))
    DEFAULT_MAX_CONCURRENT = int(os.getenv("DEFAULT_MAX_CONCURRENT", "5"))
    # None means requests wait indefinitely
    DEFAULT_TIMEOUT = _optional_float("BOOK_EXCERPTS_TIMEOUT")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
