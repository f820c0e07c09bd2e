from datetime import datetime, timedelta, timezone

import pytest

from models.blog_models import BlogDocument

BASE_TIME = datetime(2025, 11, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_document():
    """Build a BlogDocument; ``day`` offsets creation time from a fixed base."""

    def _make(
        doc_id: str,
        title: str = "Untitled",
        body: str = "",
        summary: str | None = None,
        *,
        published: bool = True,
        day: int = 0,
        published_day: int | None = None,
        **extra,
    ) -> BlogDocument:
        published_at = (
            BASE_TIME + timedelta(days=published_day)
            if published_day is not None
            else None
        )
        return BlogDocument(
            id=doc_id,
            title=title,
            body=body,
            summary=summary,
            is_published=published,
            published_at=published_at,
            created_at=BASE_TIME + timedelta(days=day),
            **extra,
        )

    return _make
