import math
from datetime import datetime, timezone

import msgspec

from utils.text_utils import lower_text


class BlogDocument(msgspec.Struct, frozen=True):
    """A blog post as stored, treated as an immutable snapshot."""

    id: str
    title: str
    created_at: datetime
    body: str = ""
    summary: str | None = None
    is_published: bool = False
    published_at: datetime | None = None
    user_id: str | None = None
    thumbnail_title: str | None = None
    thumbnail_summary: str | None = None
    is_archived: bool = False
    updated_at: datetime | None = None
    tags: list[str] = msgspec.field(default_factory=list)

    @property
    def recency(self) -> datetime:
        """Publish time, falling back to creation time. Naive values are UTC."""
        moment = self.published_at or self.created_at
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment


class SearchQuery(msgspec.Struct):
    search: str | None = None
    page: int = 1
    page_size: int = 10

    @property
    def normalized_search(self) -> str | None:
        """Trimmed, lower-cased search text, or None when there is nothing to search."""
        if self.search is None:
            return None
        return lower_text(self.search.strip()) or None


class ScoredResult(msgspec.Struct):
    document: BlogDocument
    relevance: float | None = None


class SearchPage(msgspec.Struct):
    items: list[ScoredResult]
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1
