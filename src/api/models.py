from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.blog_models import BlogDocument, ScoredResult, SearchPage


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PublicBlogSummary(_CamelModel):
    """A published blog as it appears in a search result page."""

    id: str
    title: str
    summary: str | None = None
    thumbnail_title: str | None = None
    thumbnail_summary: str | None = None
    content: str = ""
    is_published: bool = True
    is_archived: bool = False
    published_at_utc: datetime | None = None
    created_at_utc: datetime
    updated_at_utc: datetime | None = None
    relevance: float | None = Field(
        default=None, description="Relevance score, only present when searching"
    )

    @classmethod
    def from_result(cls, result: ScoredResult) -> "PublicBlogSummary":
        doc = result.document
        return cls(
            id=doc.id,
            title=doc.title,
            summary=doc.summary,
            thumbnail_title=doc.thumbnail_title,
            thumbnail_summary=doc.thumbnail_summary,
            content=doc.body,
            is_published=doc.is_published,
            is_archived=doc.is_archived,
            published_at_utc=doc.published_at,
            created_at_utc=doc.created_at,
            updated_at_utc=doc.updated_at,
            relevance=result.relevance,
        )


class PublicBlogDetail(_CamelModel):
    """A single published blog, including its tags."""

    id: str
    title: str
    summary: str | None = None
    thumbnail_title: str | None = None
    thumbnail_summary: str | None = None
    content: str = ""
    is_published: bool = True
    is_archived: bool = False
    published_at_utc: datetime | None = None
    created_at_utc: datetime
    updated_at_utc: datetime | None = None
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: BlogDocument) -> "PublicBlogDetail":
        return cls(
            id=doc.id,
            title=doc.title,
            summary=doc.summary,
            thumbnail_title=doc.thumbnail_title,
            thumbnail_summary=doc.thumbnail_summary,
            content=doc.body,
            is_published=doc.is_published,
            is_archived=doc.is_archived,
            published_at_utc=doc.published_at,
            created_at_utc=doc.created_at,
            updated_at_utc=doc.updated_at,
            tags=list(doc.tags),
        )


class PaginationResult(_CamelModel):
    """Envelope for one page of ranked results."""

    items: list[PublicBlogSummary]
    page: int
    page_size: int
    total_count: int
    has_next_page: bool = False
    has_previous_page: bool = False

    @classmethod
    def from_page(cls, page: SearchPage) -> "PaginationResult":
        return cls(
            items=[PublicBlogSummary.from_result(r) for r in page.items],
            page=page.page,
            page_size=page.page_size,
            total_count=page.total_count,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )
