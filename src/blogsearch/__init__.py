"""Relevance-ranked search over published blog documents."""

from .ranking import find_published, matches, paginate, rank
from .relevance import count_occurrences, score, tokenize
from .service import PublicBlogService, create_public_blog_service

__all__ = [
    "PublicBlogService",
    "count_occurrences",
    "create_public_blog_service",
    "find_published",
    "matches",
    "paginate",
    "rank",
    "score",
    "tokenize",
]
