"""CLI tool for searching the published blogs."""

import argparse
import os
import sys

from blogsearch.service import create_public_blog_service
from errors.errors import BlogSearchError
from models.blog_models import SearchQuery
from utils.config import PublicBlogSettings, load_env_file
from utils.logging_utils import setup_logging

logger = setup_logging(__name__)


def _settings(documents: str | None) -> PublicBlogSettings:
    settings = PublicBlogSettings()
    if documents:
        settings = settings.model_copy(update={"documents_path": documents})
    return settings


def search_blogs(
    query: str | None, page: int = 1, page_size: int = 10, documents: str | None = None
):
    """Print one page of ranked results."""
    service = create_public_blog_service(settings=_settings(documents))
    result = service.search(SearchQuery(search=query, page=page, page_size=page_size))

    print(
        f"\n🔍 Page {result.page}/{max(result.total_pages, 1)} "
        f"({result.total_count} matching blogs):"
    )
    for i, item in enumerate(result.items, start=(result.page - 1) * result.page_size + 1):
        doc = item.document
        relevance = f"  [{item.relevance:.2f}]" if item.relevance is not None else ""
        print(f"{i:>3}. {doc.title}{relevance}")
        print(f"     id={doc.id} published={doc.recency:%Y-%m-%d}")
        if doc.summary:
            print(f"     {doc.summary[:120]}")


def show_blog(document_id: str, documents: str | None = None):
    """Print a single published blog."""
    service = create_public_blog_service(settings=_settings(documents))
    doc = service.get_by_id(document_id)

    print(f"\n📄 {doc.title}")
    print(f"Published: {doc.recency:%Y-%m-%d %H:%M}")
    if doc.tags:
        print(f"Tags: {', '.join(doc.tags)}")
    if doc.summary:
        print(f"\n{doc.summary}")
    print(f"\n{doc.body}")


def serve(host: str, port: int, documents: str | None = None):
    """Run the public API with uvicorn."""
    import uvicorn

    if documents:
        os.environ["PUBLIC_BLOG_DOCUMENTS_PATH"] = documents

    uvicorn.run("api.main:app", host=host, port=port)


def main(argv: list[str] | None = None):
    load_env_file()

    parser = argparse.ArgumentParser(description="Public blog search CLI")
    parser.add_argument("--documents", "-d", help="Path to the blogs JSON file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search published blogs")
    search_parser.add_argument("query", nargs="?", default=None, help="Search text")
    search_parser.add_argument("--page", "-p", type=int, default=1, help="Page number")
    search_parser.add_argument(
        "--page-size", "-n", type=int, default=10, help="Results per page"
    )

    show_parser = subparsers.add_parser("show", help="Show one published blog")
    show_parser.add_argument("id", help="Blog id")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "search":
            search_blogs(args.query, args.page, args.page_size, args.documents)
        elif args.command == "show":
            show_blog(args.id, args.documents)
        elif args.command == "serve":
            serve(args.host, args.port, args.documents)
    except BlogSearchError as e:
        logger.error(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
