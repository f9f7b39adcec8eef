"""Data models for books and search results."""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class BookFormats:
    """Downloadable resources for a book, reduced to the ones we use."""
    text_plain: Optional[str] = None
    text_html: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {}
        if self.text_plain:
            data["textPlain"] = self.text_plain
        if self.text_html:
            data["textHtml"] = self.text_html
        return data


@dataclass
class Book:
    """Normalized Gutendex book record."""
    id: int
    title: str
    authors: List[str] = field(default_factory=list)
    subjects: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    download_count: int = 0
    formats: BookFormats = field(default_factory=BookFormats)
    excerpt: Optional[str] = None

    @property
    def authors_str(self) -> str:
        """Format authors as semicolon-separated string."""
        # Gutendex names are "Last, First" so commas would be ambiguous
        return "; ".join(self.authors) if self.authors else "Unknown"

    @property
    def subjects_str(self) -> str:
        """Format subjects as semicolon-separated string."""
        return "; ".join(self.subjects) if self.subjects else "None"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the tool payload shape.

        The excerpt key is left out entirely when no excerpt was produced.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "authors": list(self.authors),
            "subjects": list(self.subjects),
            "languages": list(self.languages),
            "downloadCount": self.download_count,
            "formats": self.formats.to_dict(),
        }
        if self.excerpt is not None:
            data["excerpt"] = self.excerpt
        return data


@dataclass
class SearchResult:
    """Books returned for one query plus the provider's total match count."""
    books: List[Book] = field(default_factory=list)
    total_results: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "books": [book.to_dict() for book in self.books],
            "totalResults": self.total_results,
        }
