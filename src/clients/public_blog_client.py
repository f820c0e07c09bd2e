from urllib.parse import quote

from api.models import PaginationResult, PublicBlogDetail
from clients.base_client import BaseAPIClient
from errors.errors import DocumentNotFoundError, PublicBlogAPIError
from utils.config import ClientsSettings


class PublicBlogClient(BaseAPIClient):
    """Async client for the anonymous public blog endpoints."""

    DEFAULT_BASE_URL = "http://localhost:8000"

    @classmethod
    def from_settings(cls, settings: ClientsSettings | None = None, **kwargs):
        settings = settings or ClientsSettings()
        return cls(settings.base_url, timeout=settings.http_timeout, **kwargs)

    async def search(
        self, query: str | None = None, page: int = 1, page_size: int = 10
    ) -> PaginationResult:
        params: dict = {"page": page, "pageSize": page_size}
        if query:
            params["query"] = query
        data = await self._get("/public/search", params=params)
        return PaginationResult.model_validate(data)

    async def get_document(self, document_id: str) -> PublicBlogDetail:
        try:
            data = await self._get(f"/public/documents/{quote(document_id, safe='')}")
        except PublicBlogAPIError as e:
            if e.status == 404:
                raise DocumentNotFoundError(document_id) from e
            raise
        return PublicBlogDetail.model_validate(data)
