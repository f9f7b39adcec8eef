#!/usr/bin/env python3
"""Book Excerpts CLI - search Project Gutenberg and preview excerpts."""
import argparse
import asyncio
import sys
import json
from tabulate import tabulate
from book_excerpts.client import GutendexClient
from book_excerpts.async_client import AsyncGutendexClient
from book_excerpts.excerpt import extract_excerpt
from book_excerpts.tool import get_book_excerpt
from book_excerpts.config import Config
import logging

logger = logging.getLogger(__name__)


def setup_logging(config: Config):
    """Configure root logging from config."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


async def search_books_async(args, config: Config):
    """Search and fetch excerpts with the async client."""
    async with AsyncGutendexClient(
        base_url=config.GUTENDEX_BASE_URL,
        timeout=config.DEFAULT_TIMEOUT,
        max_concurrent=args.parallel
    ) as client:
        logger.info(f"Searching for: {args.query}")
        logger.info(f"Parallel requests: {args.parallel}")

        result = await client.get_book_excerpt(args.query, args.limit)

    logger.info(f"Found {result.total_results} books, showing {len(result.books)}")
    display_result(result, args.format)


def search_books_sync(args, config: Config):
    """Search and fetch excerpts one book at a time."""
    with GutendexClient(
        base_url=config.GUTENDEX_BASE_URL,
        timeout=config.DEFAULT_TIMEOUT
    ) as client:
        logger.info(f"Searching for: {args.query}")
        result = get_book_excerpt(args.query, args.limit, client=client)

    logger.info(f"Found {result.total_results} books, showing {len(result.books)}")
    display_result(result, args.format)


def _shorten(text: str, width: int) -> str:
    return text[:width] + "..." if len(text) > width else text


def display_result(result, format_type: str):
    """Display search results in specified format."""
    books = result.books

    if format_type == "table":
        headers = ["ID", "Title", "Authors", "Languages", "Downloads", "Excerpt"]
        rows = [
            [
                book.id,
                _shorten(book.title, 50),
                _shorten(book.authors_str, 30),
                ", ".join(book.languages),
                book.download_count,
                _shorten(book.excerpt, 60) if book.excerpt is not None else "N/A"
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))
        print(f"Total matches: {result.total_results}")

    elif format_type == "json":
        print(json.dumps(result.to_dict(), indent=2))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.authors_str}")
            if book.excerpt is not None:
                print(f"   {book.excerpt}\n")


def show_excerpt(args):
    """Run the excerpt heuristic over a local text file."""
    with open(args.path, encoding="utf-8") as f:
        text = f.read()

    print(extract_excerpt(text, max_chars=args.length))


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Book Excerpts - Project Gutenberg search and excerpt CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search with defaults
  %(prog)s search "pride and prejudice"

  # Fetch excerpts in parallel, print the tool payload
  %(prog)s search "dickens" --limit 10 --async --parallel 5 --format json

  # Check the excerpt heuristic on a downloaded file
  %(prog)s excerpt pg1342.txt
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    config = Config()

    # Search command
    search_parser = subparsers.add_parser("search", help="Search for books and fetch excerpts")
    search_parser.add_argument("query", help="Search query: title, author or topic")
    search_parser.add_argument("--limit", type=int, default=config.DEFAULT_MAX_RESULTS,
                               help=f"Max results (default: {config.DEFAULT_MAX_RESULTS})")
    search_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")
    search_parser.add_argument("--async", dest="use_async", action="store_true", help="Fetch excerpts in parallel")
    search_parser.add_argument("--parallel", type=int, default=config.DEFAULT_MAX_CONCURRENT,
                               help=f"Concurrent requests with --async (default: {config.DEFAULT_MAX_CONCURRENT})")

    # Excerpt command
    excerpt_parser = subparsers.add_parser("excerpt", help="Extract an excerpt from a local text file")
    excerpt_parser.add_argument("path", help="Path to a plain-text book")
    excerpt_parser.add_argument("--length", type=int, default=500, help="Characters before the ellipsis (default: 500)")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(config)

    try:
        if args.command == "search":
            if args.use_async:
                asyncio.run(search_books_async(args, config))
            else:
                search_books_sync(args, config)

        elif args.command == "excerpt":
            show_excerpt(args)

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
