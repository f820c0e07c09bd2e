from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_public_blog_service
from api.models import PaginationResult, PublicBlogDetail
from blogsearch.service import PublicBlogService
from errors.errors import DocumentNotFoundError, DocumentStoreError, InvalidQueryError
from models.blog_models import SearchQuery
from utils.logging_utils import setup_logging

logger = setup_logging(__name__)

router = APIRouter()


def _search(
    service: PublicBlogService, search: str | None, page: int, page_size: int | None
) -> PaginationResult:
    query = SearchQuery(
        search=search,
        page=page,
        page_size=page_size or service.settings.default_page_size,
    )
    try:
        return PaginationResult.from_page(service.search(query))
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except DocumentStoreError as e:
        logger.error(f"Search failed: {e}")
        raise HTTPException(status_code=503, detail="Documents unavailable") from e


def _get(service: PublicBlogService, document_id: str) -> PublicBlogDetail:
    try:
        return PublicBlogDetail.from_document(service.get_by_id(document_id))
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Not Found") from None
    except DocumentStoreError as e:
        logger.error(f"Lookup of {document_id!r} failed: {e}")
        raise HTTPException(status_code=503, detail="Documents unavailable") from e


@router.get("/search", response_model=PaginationResult)
def search(
    query: str | None = Query(None, description="Free-text search"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, alias="pageSize"),
    service: PublicBlogService = Depends(get_public_blog_service),
):
    return _search(service, query, page, page_size)


@router.get("/documents/{document_id}", response_model=PublicBlogDetail)
def get_document(
    document_id: str,
    service: PublicBlogService = Depends(get_public_blog_service),
):
    return _get(service, document_id)


@router.get("/blogs", response_model=PaginationResult)
def list_blogs(
    search: str | None = Query(None, description="Free-text search"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, alias="pageSize"),
    service: PublicBlogService = Depends(get_public_blog_service),
):
    return _search(service, search, page, page_size)


@router.get("/blogs/{document_id}", response_model=PublicBlogDetail)
def get_blog(
    document_id: str,
    service: PublicBlogService = Depends(get_public_blog_service),
):
    return _get(service, document_id)
