"""Tests for parsing functions."""
import pytest

from book_excerpts.parse import (
    CatalogResponseError,
    parse_book,
    parse_formats,
    parse_search_response,
)


def make_item(book_id, title="Book", **extra):
    item = {"id": book_id, "title": title}
    item.update(extra)
    return item


def test_parse_book_complete():
    """Test parsing a book with all fields present."""
    item = {
        "id": 1342,
        "title": "Pride and Prejudice",
        "authors": [{"name": "Austen, Jane", "birth_year": 1775, "death_year": 1817}],
        "subjects": ["England -- Fiction", "Courtship -- Fiction"],
        "languages": ["en"],
        "download_count": 54321,
        "formats": {
            "text/plain; charset=us-ascii": "https://example.com/1342.txt",
            "text/html": "https://example.com/1342.html",
            "image/jpeg": "https://example.com/1342.jpg"
        }
    }

    book = parse_book(item)

    assert book.id == 1342
    assert book.title == "Pride and Prejudice"
    assert book.authors == ["Austen, Jane"]
    assert book.subjects == ["England -- Fiction", "Courtship -- Fiction"]
    assert book.languages == ["en"]
    assert book.download_count == 54321
    assert book.formats.text_plain == "https://example.com/1342.txt"
    assert book.formats.text_html == "https://example.com/1342.html"
    assert book.excerpt is None


def test_parse_book_missing_fields():
    """Test parsing a book with missing optional fields."""
    book = parse_book({"id": 7})

    assert book.id == 7
    assert book.title == "Unknown Title"
    assert book.authors == []
    assert book.subjects == []
    assert book.languages == []
    assert book.download_count == 0
    assert book.formats.text_plain is None
    assert book.formats.text_html is None


def test_parse_book_keeps_author_order():
    """Author names come back in provider order."""
    book = parse_book(make_item(1, authors=[{"name": "B"}, {"name": "A"}, {"birth_year": 1900}]))

    assert book.authors == ["B", "A"]


def test_parse_book_no_id():
    """Test that a book without an id is rejected."""
    with pytest.raises(CatalogResponseError):
        parse_book({"title": "No ID Book"})


def test_format_preference_utf8_first():
    """UTF-8 plain text wins over US-ASCII and generic plain text."""
    formats = parse_formats({
        "text/plain": "https://example.com/plain.txt",
        "text/plain; charset=us-ascii": "https://example.com/ascii.txt",
        "text/plain; charset=utf-8": "https://example.com/utf8.txt",
    })

    assert formats.text_plain == "https://example.com/utf8.txt"


def test_format_preference_falls_back_to_generic():
    """Generic text/plain is used when no charset variant exists."""
    formats = parse_formats({"text/plain": "https://example.com/plain.txt"})

    assert formats.text_plain == "https://example.com/plain.txt"


def test_format_without_plain_text():
    """Other formats never stand in for plain text."""
    formats = parse_formats({
        "text/html": "https://example.com/book.html",
        "application/epub+zip": "https://example.com/book.epub",
        "text/plain; charset=iso-8859-1": "https://example.com/latin1.txt",
    })

    assert formats.text_plain is None
    assert formats.text_html == "https://example.com/book.html"


def test_parse_search_response_truncates_in_order():
    """Only the first max_results entries are kept, in provider order."""
    response = {
        "count": 42,
        "results": [make_item(i, f"Book {i}") for i in range(1, 8)]
    }

    books, total = parse_search_response(response, max_results=3)

    assert [book.id for book in books] == [1, 2, 3]
    assert total == 42


def test_parse_search_response_fewer_matches_than_limit():
    """Bounding returns min(limit, matches)."""
    response = {"count": 2, "results": [make_item(1), make_item(2)]}

    books, total = parse_search_response(response, max_results=5)

    assert len(books) == 2
    assert total == 2


def test_parse_search_response_zero_matches():
    """Empty and missing results both mean zero matches."""
    assert parse_search_response({"count": 0, "results": []}) == ([], 0)
    assert parse_search_response({}) == ([], 0)


def test_parse_search_response_zero_limit():
    """A limit of zero returns no books but keeps the total."""
    books, total = parse_search_response({"count": 1, "results": [make_item(1)]}, max_results=0)

    assert books == []
    assert total == 1
