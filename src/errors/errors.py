from collections.abc import Iterable
from typing import Final

_RETRYABLE_STATUS: Final[set[int]] = {429, 500, 502, 503, 504}


class BlogSearchError(Exception):
    """Base class for all errors raised by the public blog search."""


class DocumentNotFoundError(BlogSearchError):
    """
    The requested document does not exist or is not published.

    Both cases raise this same error so callers cannot tell them apart.
    """

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Document {document_id!r} not found")
        self.document_id = document_id


class InvalidQueryError(BlogSearchError):
    """Non-positive page or page size."""


class DocumentStoreError(BlogSearchError):
    """The document store could not produce a snapshot."""


class PublicBlogAPIError(BlogSearchError):
    """
    Error raised by the HTTP client of the public blog API.

    Attributes
    ----------
    message : str
        Human-readable explanation.
    status  : int | None
        HTTP status code, if available.
    url     : str | None
        Requested URL, useful for logs.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url

    # ---------------------------------------------------------------------
    # Helper utilities
    # ---------------------------------------------------------------------
    def is_retryable(self, extra_status: Iterable[int] | None = None) -> bool:
        """
        Return True if the underlying status code is commonly worth retrying.

        A missing status means the request never got a response (transport
        failure), which is retried as well.

        Attributes
        ----------
        extra_status : Iterable[int] | None
            Additional status codes to retry (merged with the default set).
        """
        if self.status is None:
            return True
        retryable = _RETRYABLE_STATUS | set(extra_status or ())
        return self.status in retryable

    def __str__(self) -> str:
        parts: list[str] = [self.message]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.url:
            parts.append(f"url={self.url}")
        return " | ".join(parts)
