"""HTTP client for the Gutendex catalog and Gutenberg plain-text files."""
import requests
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class GutendexClient:
    """
    Client for the Gutendex search API.

    Every call is a single attempt: failures surface to the caller as
    requests exceptions.
    """

    BASE_URL = "https://gutendex.com/books"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize Gutendex client.

        Args:
            base_url: Catalog endpoint (defaults to the public Gutendex API)
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout

        # Create session for connection pooling
        self.session = requests.Session()

    def search(self, query: str) -> Dict[str, Any]:
        """
        Search the catalog.

        Args:
            query: Free-text search (title, author or topic), sent as-is

        Returns:
            Decoded API response JSON

        Raises:
            requests.RequestException: on network errors or error statuses
            ValueError: if the body is not JSON
        """
        logger.info(f"Searching catalog: {query!r}")

        response = self.session.get(
            self.base_url,
            params={"search": query},
            timeout=self.timeout
        )
        response.raise_for_status()

        data = response.json()
        logger.info(f"Catalog reported {data.get('count', 0)} matches")
        return data

    def fetch_text(self, url: str) -> str:
        """
        Download a plain-text resource.

        Args:
            url: Plain-text URL from a book's formats

        Returns:
            Response body as a string
        """
        logger.info(f"Fetching text: {url}")

        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()

        # Gutenberg often omits the charset; requests would then assume latin-1
        if "charset" not in response.headers.get("content-type", "").lower():
            response.encoding = "utf-8"
        return response.text

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
