"""Parse and normalize Gutendex API responses."""
from typing import Dict, Any, List, Optional, Tuple
from book_excerpts.models import Book, BookFormats

# Plain-text variants, most preferred first
TEXT_PLAIN_PREFERENCE = (
    "text/plain; charset=utf-8",
    "text/plain; charset=us-ascii",
    "text/plain",
)
TEXT_HTML = "text/html"


class CatalogResponseError(ValueError):
    """Raised when a catalog entry lacks data we cannot default."""


def parse_formats(formats: Optional[Dict[str, str]]) -> BookFormats:
    """
    Collapse the provider's MIME-type -> URL mapping into BookFormats.

    Args:
        formats: The "formats" object of a Gutendex result (may be None)

    Returns:
        BookFormats with the preferred plain-text URL and the HTML URL, if any
    """
    formats = formats or {}

    text_plain = None
    for mime_type in TEXT_PLAIN_PREFERENCE:
        if formats.get(mime_type):
            text_plain = formats[mime_type]
            break

    return BookFormats(
        text_plain=text_plain,
        text_html=formats.get(TEXT_HTML) or None
    )


def parse_book(item: Dict[str, Any]) -> Book:
    """
    Parse a single book entry from a Gutendex response.

    Args:
        item: Single element of the "results" array

    Returns:
        Book object

    Raises:
        CatalogResponseError: if the entry has no id
    """
    book_id = item.get("id")
    if book_id is None:
        raise CatalogResponseError(f"Catalog entry without id: {item.get('title')!r}")

    # Keep only author names; birth/death years are dropped
    authors = [
        author["name"]
        for author in item.get("authors") or []
        if isinstance(author, dict) and author.get("name")
    ]

    return Book(
        id=int(book_id),
        title=item.get("title") or "Unknown Title",
        authors=authors,
        subjects=list(item.get("subjects") or []),
        languages=list(item.get("languages") or []),
        download_count=item.get("download_count") or 0,
        formats=parse_formats(item.get("formats"))
    )


def parse_search_response(
    response_json: Dict[str, Any],
    max_results: Optional[int] = None
) -> Tuple[List[Book], int]:
    """
    Parse a full Gutendex search response.

    Args:
        response_json: Complete API response JSON
        max_results: Keep only this many books (provider order); None keeps all

    Returns:
        (books, total_results); ([], 0) when nothing matched
    """
    results = response_json.get("results") or []
    if not results:
        return [], 0

    if max_results is not None:
        results = results[:max(max_results, 0)]

    books = [parse_book(item) for item in results]
    return books, response_json.get("count") or 0
