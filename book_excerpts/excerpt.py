"""Pull a short prose excerpt out of a Project Gutenberg plain-text file."""
from typing import List

# Gutenberg texts mark the end of the license header with one of these
START_MARKERS = ("*** START OF", "***START OF")

EXCERPT_LENGTH = 500
# Shorter lines are usually titles or chapter headings
MIN_LINE_LENGTH = 50
ELLIPSIS = "..."


def find_content_start(lines: List[str]) -> int:
    """
    Find the first line of book content after the Gutenberg header.

    Args:
        lines: Text split into lines

    Returns:
        Index just past the first line holding a start marker, or 0 if none does
    """
    for index, line in enumerate(lines):
        if any(marker in line for marker in START_MARKERS):
            return index + 1
    return 0


def extract_excerpt(
    text: str,
    max_chars: int = EXCERPT_LENGTH,
    min_line_length: int = MIN_LINE_LENGTH
) -> str:
    """
    Build an excerpt from the first substantial lines of a book.

    Lines are stripped and kept only when longer than ``min_line_length``;
    kept lines are joined with single spaces until more than ``max_chars``
    characters are collected. The result is cut to ``max_chars``, stripped
    on the right and always suffixed with ``...``, so a text with no
    qualifying lines yields just ``...``.

    Args:
        text: Full book text
        max_chars: Characters kept before the ellipsis
        min_line_length: Lines must be longer than this to count as prose

    Returns:
        Excerpt of at most max_chars + 3 characters
    """
    lines = text.split("\n")
    accumulated = ""

    for line in lines[find_content_start(lines):]:
        if len(accumulated) > max_chars:
            break
        line = line.strip()
        if len(line) > min_line_length:
            accumulated += line + " "

    return accumulated[:max_chars].rstrip() + ELLIPSIS
