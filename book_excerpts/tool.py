"""The "get book excerpt" tool exposed to the agent runtime."""
from typing import Optional, Dict, Any
import logging

from book_excerpts.client import GutendexClient
from book_excerpts.config import Config
from book_excerpts.excerpt import extract_excerpt
from book_excerpts.models import Book, SearchResult
from book_excerpts.parse import parse_search_response

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5

_BOOK_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "title": {"type": "string"},
        "authors": {"type": "array", "items": {"type": "string"}},
        "subjects": {"type": "array", "items": {"type": "string"}},
        "languages": {"type": "array", "items": {"type": "string"}},
        "downloadCount": {"type": "integer"},
        "formats": {
            "type": "object",
            "properties": {
                "textPlain": {"type": "string"},
                "textHtml": {"type": "string"},
            },
        },
        "excerpt": {"type": "string"},
    },
    "required": ["id", "title", "authors", "subjects", "languages", "downloadCount", "formats"],
}

TOOL_DEFINITION = {
    "id": "get-book-excerpt",
    "description": "Search and fetch excerpts from public domain books via Project Gutenberg",
    "input_schema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query: book title, author name, or topic",
            },
            "maxResults": {
                "type": "integer",
                "default": DEFAULT_MAX_RESULTS,
                "description": "Maximum number of books to return",
            },
        },
        "required": ["query"],
    },
    "output_schema": {
        "type": "object",
        "properties": {
            "books": {"type": "array", "items": _BOOK_SCHEMA},
            "totalResults": {"type": "integer"},
        },
        "required": ["books", "totalResults"],
    },
}


def attach_excerpt(book: Book, client) -> Book:
    """
    Fetch a book's plain text and set its excerpt.

    Books without a plain-text URL are returned untouched. Any failure while
    fetching or extracting is logged and leaves the excerpt unset.

    Args:
        book: Book to enrich in place
        client: Object with a fetch_text(url) method

    Returns:
        The same book
    """
    if not book.formats.text_plain:
        return book

    try:
        full_text = client.fetch_text(book.formats.text_plain)
        book.excerpt = extract_excerpt(full_text)
    except Exception as e:
        logger.error(f"Failed to fetch excerpt for book {book.id}: {e}")

    return book


def get_book_excerpt(
    query: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    client: Optional[GutendexClient] = None
) -> SearchResult:
    """
    Search the catalog and attach an excerpt to every matched book.

    Books are processed one at a time in provider order. Search failures
    propagate; per-book failures only cost that book its excerpt.

    Args:
        query: Free-text search
        max_results: Maximum books to return
        client: Client to use; a new one is opened and closed if omitted

    Returns:
        SearchResult
    """
    if client is None:
        config = Config()
        with GutendexClient(config.GUTENDEX_BASE_URL, config.DEFAULT_TIMEOUT) as own_client:
            return get_book_excerpt(query, max_results, own_client)

    response = client.search(query)
    books, total = parse_search_response(response, max_results)
    logger.info(f"Processing {len(books)} of {total} books")

    for book in books:
        attach_excerpt(book, client)

    return SearchResult(books=books, total_results=total)


def get_book_excerpt_tool(query: str, maxResults: Optional[int] = None) -> Dict[str, Any]:
    """Tool entry point: takes and returns the JSON payload shapes."""
    if maxResults is None:
        maxResults = DEFAULT_MAX_RESULTS
    return get_book_excerpt(query, maxResults).to_dict()
