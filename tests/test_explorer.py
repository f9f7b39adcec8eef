"""Tests for the command-line front end."""
import json

import explorer
from book_excerpts.models import Book, BookFormats, SearchResult

PROSE = "Happy families are all alike; every unhappy family is unhappy in its own way."


def test_excerpt_command(monkeypatch, tmp_path, capsys):
    """The excerpt command prints the heuristic's output for a local file."""
    book_file = tmp_path / "book.txt"
    book_file.write_text("Title\n*** START OF THE EBOOK ***\nPART ONE\n" + PROSE + "\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["explorer.py", "excerpt", str(book_file)])

    explorer.main()

    assert capsys.readouterr().out.strip() == PROSE + "..."


def test_search_command_json(monkeypatch, capsys):
    """The search command prints the tool payload as JSON."""
    result = SearchResult(
        books=[Book(id=2600, title="War and Peace", authors=["Tolstoy, Leo"],
                    formats=BookFormats(text_plain="https://example.com/2600.txt"),
                    excerpt=PROSE + "...")],
        total_results=1
    )
    calls = []

    def fake_get_book_excerpt(query, max_results, client=None):
        calls.append((query, max_results))
        return result

    monkeypatch.setattr(explorer, "get_book_excerpt", fake_get_book_excerpt)
    monkeypatch.setattr("sys.argv", ["explorer.py", "search", "tolstoy", "--limit", "1", "--format", "json"])

    explorer.main()

    payload = json.loads(capsys.readouterr().out)
    assert calls == [("tolstoy", 1)]
    assert payload["totalResults"] == 1
    assert payload["books"][0]["excerpt"] == PROSE + "..."


def test_display_table_marks_missing_excerpt(capsys):
    """Books without an excerpt show N/A in the table."""
    result = SearchResult(books=[Book(id=1, title="No Text")], total_results=1)

    explorer.display_result(result, "table")

    out = capsys.readouterr().out
    assert "No Text" in out
    assert "N/A" in out
    assert "Total matches: 1" in out
