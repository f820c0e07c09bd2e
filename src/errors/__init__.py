from .errors import (
    BlogSearchError,
    DocumentNotFoundError,
    DocumentStoreError,
    InvalidQueryError,
    PublicBlogAPIError,
)

__all__ = [
    "BlogSearchError",
    "DocumentNotFoundError",
    "DocumentStoreError",
    "InvalidQueryError",
    "PublicBlogAPIError",
]
