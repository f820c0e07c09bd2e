"""Public (anonymous) access to published blogs."""

from __future__ import annotations

from blogsearch.ranking import find_published, rank
from errors.errors import InvalidQueryError
from models.blog_models import BlogDocument, SearchPage, SearchQuery
from services.document_store import DocumentStore, JsonDocumentStore
from utils.config import PublicBlogSettings
from utils.logging_utils import setup_logging

logger = setup_logging(__name__)


class PublicBlogService:
    """
    Searches and retrieves published blogs from a document store.

    Each call takes a fresh snapshot from the store; the service keeps no
    state between calls and can be shared by concurrent requests.
    """

    def __init__(self, store: DocumentStore, settings: PublicBlogSettings | None = None):
        """
        Args:
            store: Source of blog documents
            settings: Paging limits and optional owner scoping
        """
        self.store = store
        self.settings = settings or PublicBlogSettings()

    def _owned(self, document: BlogDocument) -> bool:
        owner = self.settings.owner_user_id
        return owner is None or document.user_id == owner

    def _validate(self, query: SearchQuery) -> SearchQuery:
        if query.page < 1:
            raise InvalidQueryError(f"page must be >= 1, got {query.page}")
        if query.page_size < 1:
            raise InvalidQueryError(f"page_size must be >= 1, got {query.page_size}")
        if query.page_size > self.settings.max_page_size:
            logger.debug(
                f"Clamping page_size {query.page_size} to {self.settings.max_page_size}"
            )
            return SearchQuery(
                search=query.search,
                page=query.page,
                page_size=self.settings.max_page_size,
            )
        return query

    def search(self, query: SearchQuery) -> SearchPage:
        """
        Rank the published blogs for ``query``.

        Raises:
            InvalidQueryError: page or page size is not positive
            DocumentStoreError: the store could not be read
        """
        query = self._validate(query)
        documents = [
            doc for doc in self.store.fetch_published_documents() if self._owned(doc)
        ]
        result = rank(documents, query)
        logger.info(
            f"Search {query.normalized_search!r} page {query.page}: "
            f"{len(result.items)} of {result.total_count} results"
        )
        return result

    def get_by_id(self, document_id: str) -> BlogDocument:
        """
        Return one published blog.

        Raises:
            DocumentNotFoundError: the blog is absent, unpublished or owned by
                someone else
        """
        doc = self.store.fetch_document_by_id(document_id)
        candidates = [doc] if doc is not None and self._owned(doc) else []
        return find_published(candidates, document_id)


def create_public_blog_service(
    settings: PublicBlogSettings | None = None,
    store: DocumentStore | None = None,
) -> PublicBlogService:
    """
    Factory function to create a PublicBlogService.

    Args:
        settings: Optional settings, read from the environment when omitted
        store: Optional store, a JsonDocumentStore on the configured path
            when omitted

    Returns:
        Configured PublicBlogService instance
    """
    settings = settings or PublicBlogSettings()
    if store is None:
        store = JsonDocumentStore(settings.documents_path)
    return PublicBlogService(store=store, settings=settings)
