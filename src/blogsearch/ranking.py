"""Filtering, ordering and pagination of published blog documents."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from blogsearch.relevance import score
from errors.errors import DocumentNotFoundError
from models.blog_models import BlogDocument, ScoredResult, SearchPage, SearchQuery
from utils.text_utils import lower_text


def matches(document: BlogDocument, search: str) -> bool:
    """Pre-filter: the lower-cased search text occurs in title, summary or body."""
    return (
        search in lower_text(document.title)
        or (document.summary is not None and search in lower_text(document.summary))
        or search in lower_text(document.body or "")
    )


def _order(results: list[ScoredResult], by_relevance: bool) -> list[ScoredResult]:
    # Stable sorts: id ascending first, then the descending keys on top of it.
    results = sorted(results, key=lambda r: r.document.id)
    if by_relevance:
        return sorted(
            results,
            key=lambda r: (r.relevance, r.document.recency),
            reverse=True,
        )
    return sorted(results, key=lambda r: r.document.recency, reverse=True)


def paginate(results: Sequence[ScoredResult], page: int, page_size: int) -> list[ScoredResult]:
    """Return the 1-based ``page`` of ``results``."""
    start = (page - 1) * page_size
    return list(results[start : start + page_size])


def rank(documents: Iterable[BlogDocument], query: SearchQuery) -> SearchPage:
    """
    Filter, score, order and paginate ``documents`` for ``query``.

    Without a search string the published documents are ordered by recency
    and carry no relevance. With one, only documents passing the pre-filter
    are kept and they are ordered by relevance, then recency.

    ``query.page`` and ``query.page_size`` are expected to be positive.
    """
    search = query.normalized_search
    visible = [doc for doc in documents if doc.is_published]

    if search:
        results = [
            ScoredResult(document=doc, relevance=score(doc, search))
            for doc in visible
            if matches(doc, search)
        ]
    else:
        results = [ScoredResult(document=doc) for doc in visible]

    ordered = _order(results, by_relevance=search is not None)

    return SearchPage(
        items=paginate(ordered, query.page, query.page_size),
        page=query.page,
        page_size=query.page_size,
        total_count=len(ordered),
    )


def find_published(documents: Iterable[BlogDocument], document_id: str) -> BlogDocument:
    """
    Return the published document with ``document_id``.

    Raises DocumentNotFoundError when it is absent or unpublished, without
    telling the two apart.
    """
    for doc in documents:
        if doc.id == document_id and doc.is_published:
            return doc
    raise DocumentNotFoundError(document_id)
