"""Async HTTP client for fetching book excerpts in parallel."""
import asyncio
import httpx
from typing import Optional, Dict, Any
import logging

from book_excerpts.excerpt import extract_excerpt
from book_excerpts.models import Book, SearchResult
from book_excerpts.parse import parse_search_response

logger = logging.getLogger(__name__)


class AsyncGutendexClient:
    """Async client that downloads book texts with bounded concurrency."""

    BASE_URL = "https://gutendex.com/books"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_concurrent: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            base_url: Catalog endpoint
            timeout: Request timeout, None to wait indefinitely
            max_concurrent: Maximum concurrent requests
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url or self.BASE_URL
        self.semaphore = asyncio.Semaphore(max_concurrent)

        # Create async HTTP client
        self.client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport
        )

    async def search(self, query: str) -> Dict[str, Any]:
        """
        Search the catalog asynchronously.

        Args:
            query: Free-text search

        Returns:
            Decoded API response JSON
        """
        async with self.semaphore:
            logger.info(f"Async search: {query!r}")
            response = await self.client.get(self.base_url, params={"search": query})
            response.raise_for_status()
            return response.json()

    async def fetch_text(self, url: str) -> str:
        """Download a plain-text resource."""
        async with self.semaphore:
            logger.info(f"Async fetch: {url}")
            response = await self.client.get(url)
            response.raise_for_status()
            return response.text

    async def attach_excerpt(self, book: Book) -> Book:
        """
        Set a book's excerpt from its plain text.

        Same contract as the sequential pipeline: no plain text, no fetch;
        failures are logged and leave the excerpt unset.
        """
        if not book.formats.text_plain:
            return book

        try:
            full_text = await self.fetch_text(book.formats.text_plain)
            book.excerpt = extract_excerpt(full_text)
        except Exception as e:
            logger.error(f"Failed to fetch excerpt for book {book.id}: {e}")

        return book

    async def get_book_excerpt(self, query: str, max_results: int = 5) -> SearchResult:
        """
        Search, then fetch all excerpts in parallel.

        Args:
            query: Free-text search
            max_results: Maximum books to return

        Returns:
            SearchResult with books in provider order
        """
        response = await self.search(query)
        books, total = parse_search_response(response, max_results)

        # gather preserves argument order whatever the completion order
        books = await asyncio.gather(*(self.attach_excerpt(book) for book in books))
        return SearchResult(books=list(books), total_results=total)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
